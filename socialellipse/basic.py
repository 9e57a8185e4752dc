from typing import NamedTuple, Tuple

import numpy as np


class EllipseParameters(NamedTuple):
    """Geometric description of a fitted ellipse."""
    center_x: float
    center_y: float
    semi_axis_major: float
    semi_axis_minor: float
    orientation: float


def normalize_angle(angle):
    """Wrap angle(s) into the interval (-pi, pi].

    Parameters
    ----------
    angle : float or array_like
        Angle(s) in radians.

    Returns
    -------
    res : float or array_like
        Equivalent angle(s) in (-pi, pi].
    """
    a = np.fmod(np.asarray(angle, dtype=float) + np.pi, 2*np.pi)
    return np.where(a <= 0, a + np.pi, a - np.pi)[()]


def fold_axis_angle(angle):
    """Direction of an undirected axis, in the interval [-pi/2, pi/2).

    Angles differing by pi describe the same axis; of the two, the one
    with the smaller absolute value is returned, and -pi/2 for a
    vertical axis.
    """
    return np.mod(np.asarray(angle, dtype=float) + np.pi/2, np.pi) - np.pi/2


def project_vectors(vx: np.ndarray, vy: np.ndarray, ux: float,
                    uy: float) -> Tuple[np.ndarray, np.ndarray]:
    """Vector projection of v onto u.

    Parameters
    ----------
    vx, vy : array_like (N,)
        Components of the vectors to be projected.
    ux, uy : float
        Components of the vector to project onto.  Need not be unit
        length, but must not be zero.

    Returns
    -------
    (px, py) : tuple of array_like (N,)
        Components of the projections, parallel to u.
    """
    mult = (vx*ux + vy*uy)/(ux**2 + uy**2)
    return mult*ux, mult*uy


def make_points(params: EllipseParameters,
                t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Generate points along the ellipse parameterized by t.

    Parameters
    ----------
    params : EllipseParameters
        Center, semi-axes and orientation of the ellipse.
    t : array_like (N,)
        Points along the ellipse.  t is in the interval [0, 2*pi).

    Returns
    -------
    (x, y) : tuple of array_like (N,)
        Points along the ellipse.

    References
    ----------
    .. [1] https://en.wikipedia.org/wiki/Ellipse#General_ellipse
    """
    xc, yc, a, b, theta = params
    t = np.asarray(t, dtype=float)

    f0 = np.array([xc, yc])
    f1 = np.array([a*np.cos(theta), a*np.sin(theta)])
    f2 = np.array([-b*np.sin(theta), b*np.cos(theta)])
    pts = f0[:, None] + f1[:, None]*np.cos(t) + f2[:, None]*np.sin(t)
    return pts[0, :], pts[1, :]


def check_fit(C: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """General quadratic polynomial function.

    Parameters
    ----------
    C : array_like (6,)
        coefficients.
    x : array_like (N,)
        x coordinates assumed to be on the conic.
    y : array_like (N,)
        y coordinates assumed to be on the conic.

    Returns
    -------
    res : array_like
        Measure of how well the conic fits the points (x, y).

    Notes
    -----
    We want this to equal 0 for a good fit.  This polynomial is called
    the algebraic distance of the point (x, y) to the given conic.
    """
    x = np.asarray(x, dtype=float).flatten()
    y = np.asarray(y, dtype=float).flatten()
    return C[0]*x**2 + C[1]*x*y + C[2]*y**2 + C[3]*x + C[4]*y + C[5]
