"""Convert conic coefficients into geometric ellipse parameters."""

import numpy as np

from socialellipse.basic import fold_axis_angle


def conic_to_parametric(c: np.ndarray) -> np.ndarray:
    """Find center, semi-axes and orientation of an ellipse.

    Parameters
    ----------
    c : array_like (6,)
        Coefficients [A, B, C, D, E, F] of the conic

            A x**2 + B x y + C y**2 + D x + E y + F = 0

    Returns
    -------
    res : array_like (5,)
        [center_x, center_y, semi_axis_major, semi_axis_minor,
        orientation].  The orientation is the angle from the positive
        horizontal axis to the major axis, in [-pi/2, pi/2).

    Notes
    -----
    The quadratic part is diagonalized by a rotation through
    theta = atan2(B, A - C)/2; the center is then the vertex of the
    conic along each of the rotated axes.  If the conic is not an
    ellipse (hyperbola, parabola, imaginary ellipse, ...) at least one
    of the entries is NaN or infinite.  No exception is raised.

    The reported orientation is not theta itself.  The larger radius is
    always returned first, so when the major axis lies along the second
    rotated axis the radii are swapped and pi/2 is added to theta; the
    angle is then folded into [-pi/2, pi/2) as an axis direction
    (modulo pi).  A vertical major axis is therefore reported as -pi/2,
    never +pi/2, the same convention the fallback ellipses use.

    Based on the C++ implementation available at [1]_.

    References
    ----------
    .. [1] https://github.com/gopiraj15/OpenCV-journey/blob/master/TaubinEllipseFit.cpp
    """
    A, B, C, D, E, F = np.asarray(c, dtype=float)

    theta = np.arctan2(B, A - C)/2
    cost, sint = np.cos(theta), np.sin(theta)

    # conic in the rotated frame (u, v)
    Au = D*cost + E*sint
    Av = -D*sint + E*cost
    Auu = A*cost**2 + C*sint**2 + B*sint*cost
    Avv = A*sint**2 + C*cost**2 - B*sint*cost

    with np.errstate(divide='ignore', invalid='ignore'):
        tu = -Au/(2*Auu)
        tv = -Av/(2*Avv)
        w = F - Auu*tu**2 - Avv*tv**2

        xc = tu*cost - tv*sint
        yc = tu*sint + tv*cost

        # negative squared radius -> NaN
        a = np.sqrt(-w/Auu)
        b = np.sqrt(-w/Avv)

    if a < b:
        a, b = b, a
        theta += np.pi/2

    return np.array([xc, yc, a, b, fold_axis_angle(theta)])


if __name__ == '__main__':
    pass
