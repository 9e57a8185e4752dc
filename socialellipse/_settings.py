"""Numeric thresholds shared by the fitting methods."""

# approximation of the space occupied by a single person, in meters
FALLBACK_SIZE = 0.28

# largest accepted coordinate magnitude; distances between points must
# not overflow
MAX_COORDINATE = 1e300


class FitSettings:
    """simply hold parameters."""
    def __init__(self, fallback_size=FALLBACK_SIZE, min_axis=1e-6,
                 max_extent=1e6, collinear_minor=1e-3, direction_tol=1e-3,
                 eigen_tie_rtol=1e-10, coefficient_eps=1e-12):
        # semi-axes of the footprint used when no ellipse can be fit
        self.fallback_size = fallback_size

        # validity of an algebraic fit
        ##############################
        # semi-axis shorter than this means the ellipse collapsed
        self.min_axis = min_axis
        # center coordinates or semi-axes beyond this mean the solver
        # blew up
        self.max_extent = max_extent

        # fallback construction
        #######################
        # transverse spread below this means the points are in-line
        self.collinear_minor = collinear_minor
        # angular tolerance (radians) when comparing directions
        self.direction_tol = direction_tol

        # algebraic solver
        ##################
        # eigenvalues closer than this (relative to the largest one) to the
        # smallest eigenvalue are treated as equal
        self.eigen_tie_rtol = eigen_tie_rtol
        # normalized conic coefficients smaller than this are set to 0
        self.coefficient_eps = coefficient_eps

    def __repr__(self):
        fields = ', '.join(
            '{}={!r}'.format(k, v) for k, v in sorted(vars(self).items()))
        return 'FitSettings({})'.format(fields)


DEFAULT_SETTINGS = FitSettings()
