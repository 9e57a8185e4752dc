"""Taubin algebraic conic fit for small point sets."""

import logging

import numpy as np
import scipy.linalg

from socialellipse._settings import DEFAULT_SETTINGS, FitSettings

# a'Ka = B**2 - 4*A*C for a = [A, B, C, D, E]
_DISCRIMINANT = np.array([
    [0, 0, -2, 0, 0],
    [0, 1, 0, 0, 0],
    [-2, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
], dtype=float)


def fit_conic_taubin(x: np.ndarray, y: np.ndarray,
                     settings: FitSettings = None) -> np.ndarray:
    """Conic fitting by Taubin's method.

    Parameters
    ----------
    x, y : array_like (N,)
        Coordinates of the N >= 2 points.
    settings : FitSettings, optional
        Numeric tolerances.  Defaults are used if not given.

    Returns
    -------
    res : array_like (6,)
        Coefficients [A, B, C, D, E, F] of the conic

            A x**2 + B x y + C y**2 + D x + E y + F = 0

        with unit norm and A + C >= 0.  All entries are NaN when the
        points do not determine a conic (fewer than three independent
        constraints, or a singular normalization matrix, as happens for
        collinear points).

    Notes
    -----
    The fit is done in coordinates centered on the centroid of the
    points.  The scatter matrix is split into P, the covariance of the
    non-constant monomials, and Q, Taubin's gradient-weighted
    normalization, and the coefficients are the generalized eigenvector
    of (P, Q) with the smallest eigenvalue [1]_.  Four points in general
    position leave a pencil of exactly fitting conics; in that case the
    most elliptical member of the pencil (the one minimizing
    B**2 - 4 A C under the same normalization) is returned.

    Based on the C++ implementation available at [2]_.

    References
    ----------
    .. [1] G. Taubin, "Estimation of planar curves, surfaces and nonplanar
           space curves defined by implicit equations, with applications
           to edge and range image segmentation", IEEE Trans. PAMI, Vol.
           13, pages 1115-1138 (1991)
    .. [2] https://github.com/gopiraj15/OpenCV-journey/blob/master/TaubinEllipseFit.cpp
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    nan = np.full(6, np.nan)

    # center the data
    mx, my = x.mean(), y.mean()
    xc, yc = x - mx, y - my

    # scatter matrix
    with np.errstate(over='ignore', invalid='ignore'):
        Z = np.stack((xc**2, xc*yc, yc**2, xc, yc, np.ones_like(xc)), axis=1)
        M = Z.T @ Z / x.size
    if not np.all(np.isfinite(M)):
        logging.debug('Taubin fit failed: scatter matrix overflow')
        return nan

    # covariance of the monomials
    P = M[:5, :5].copy()
    P[:3, :3] -= np.outer(M[:3, 5], M[:3, 5])

    # Taubin normalization
    Q = np.zeros((5, 5))
    Q[0, 0] = 4*M[0, 5]
    Q[0, 1] = Q[1, 0] = 2*M[1, 5]
    Q[1, 1] = M[0, 5] + M[2, 5]
    Q[1, 2] = Q[2, 1] = 2*M[1, 5]
    Q[2, 2] = 4*M[2, 5]
    Q[3, 3] = Q[4, 4] = 1

    try:
        # every conic in a null space of dimension 3 or more fits exactly
        rank = np.linalg.matrix_rank(P)
        if rank < 3:
            logging.debug('Taubin fit underdetermined: rank(P) = %d', rank)
            return nan
        evals, evecs = scipy.linalg.eigh(P, Q)
    except np.linalg.LinAlgError as e:
        logging.debug('Taubin fit failed: %s', e)
        return nan

    # eigenvalues are ascending and evecs are Q-orthonormal
    tied = np.flatnonzero(
        evals - evals[0] <= settings.eigen_tie_rtol*np.abs(evals).max())
    if tied.size > 1:
        V = evecs[:, tied]
        _dval, dvec = np.linalg.eigh(V.T @ _DISCRIMINANT @ V)
        a = V @ dvec[:, 0]
    else:
        a = evecs[:, 0]

    A, B, C, D, E = a
    F = -a[:3] @ M[5, :3]

    # undo the centering
    c = np.array([
        A,
        B,
        C,
        D - 2*A*mx - B*my,
        E - 2*C*my - B*mx,
        F + A*mx**2 + C*my**2 + B*mx*my - D*mx - E*my,
    ])

    # norm of a vector == its largest singular value
    c /= np.linalg.norm(c)
    if c[0] + c[2] < 0:
        c = -c
    c[np.abs(c) < settings.coefficient_eps] = 0.0
    return c


if __name__ == '__main__':
    pass
