"""Heuristic ellipses for inputs the algebraic fit cannot handle."""

import numpy as np

from socialellipse._settings import DEFAULT_SETTINGS, FitSettings
from socialellipse.basic import EllipseParameters, fold_axis_angle, normalize_angle, project_vectors


def fit_fallback_single(x: float, y: float,
                        settings: FitSettings = None) -> EllipseParameters:
    """Circular footprint of default size around a single point."""
    if settings is None:
        settings = DEFAULT_SETTINGS
    return EllipseParameters(
        float(x), float(y), settings.fallback_size, settings.fallback_size,
        0.0)


def fit_fallback_multiple(x: np.ndarray, y: np.ndarray,
                          settings: FitSettings = None) -> EllipseParameters:
    """Ellipse spanned by the extent of the points.

    Parameters
    ----------
    x, y : array_like (N,)
        Coordinates of the N >= 2 points.
    settings : FitSettings, optional
        Thresholds.  Defaults are used if not given.

    Returns
    -------
    res : EllipseParameters
        Ellipse centered at the centroid of the points.  The major axis
        is the longest vector connecting two of the points; the minor
        axis is half of the spread of the points across the major axis.

    Notes
    -----
    If the points lie on a line the minor axis is set to
    ``settings.fallback_size``, and so is the major axis if all points
    coincide.  Of several equally long vectors, the
    one found last scanning pairs (i, j) in row-major order is used.
    The orientation is folded into [-pi/2, pi/2), as for algebraic
    fits, so a vertical major axis is reported as -pi/2.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()

    # center of gravity
    cog_x, cog_y = x.mean(), y.mean()

    # vectors connecting every pair of points: d[i, j] = p[j] - p[i]
    dx = x[None, :] - x[:, None]
    dy = y[None, :] - y[:, None]
    lengths = np.hypot(dx, dy)
    np.fill_diagonal(lengths, -1)

    # last occurrence of the longest vector
    flat = lengths.ravel()
    idx = flat.size - 1 - np.argmax(flat[::-1])
    i, j = np.unravel_index(idx, lengths.shape)
    longest_len = lengths[i, j]
    longest_dir = np.arctan2(dy[i, j], dx[i, j])

    # unit vector perpendicular to the longest
    perp_dir = normalize_angle(longest_dir + np.pi/2)
    perp_x, perp_y = np.cos(perp_dir), np.sin(perp_dir)

    # project vectors from the center of gravity onto the perpendicular
    proj_x, proj_y = project_vectors(x - cog_x, y - cog_y, perp_x, perp_y)
    proj_len = np.hypot(proj_x, proj_y)
    proj_dir = np.arctan2(proj_y, proj_x)
    aligned = np.abs(
        normalize_angle(perp_dir - proj_dir)) < settings.direction_tol

    # longest projections on either side of the major axis
    aligned_max = proj_len[aligned].max(initial=0.0)
    opposed_max = proj_len[~aligned].max(initial=0.0)

    # orientation as an axis, not an arrow
    phi = fold_axis_angle(longest_dir)

    a = longest_len/2
    b = (aligned_max + opposed_max)/2

    # all points coincide
    if a < settings.min_axis:
        a = settings.fallback_size
    # points in-line only
    if b < settings.collinear_minor:
        b = settings.fallback_size

    return EllipseParameters(
        float(cog_x), float(cog_y), float(a), float(b), float(phi))
