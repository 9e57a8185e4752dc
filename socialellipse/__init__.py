
from ._settings import FALLBACK_SIZE, FitSettings
from .basic import (
    EllipseParameters,
    normalize_angle,
    fold_axis_angle,
    project_vectors,
    make_points,
)
from .fit_conic_taubin import fit_conic_taubin
from .conic_to_parametric import conic_to_parametric
from .check_ellipse import is_valid_ellipse
from .fit_ellipse_fallback import fit_fallback_single, fit_fallback_multiple
from .fit_ellipse import (
    fit_ellipse,
    fit_ellipse_outcome,
    FitOutcome,
    Provenance,
)
