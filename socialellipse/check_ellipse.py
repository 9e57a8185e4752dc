"""Decide whether a fitted ellipse is numerically trustworthy."""

import logging

import numpy as np

from socialellipse._settings import DEFAULT_SETTINGS, FitSettings


def is_valid_ellipse(params, settings: FitSettings = None) -> bool:
    """Check the result of an algebraic fit for collapse or blow-up.

    Parameters
    ----------
    params : array_like (5,)
        [center_x, center_y, semi_axis_major, semi_axis_minor,
        orientation].
    settings : FitSettings, optional
        Thresholds.  Defaults are used if not given.

    Returns
    -------
    bool
        False if any parameter is NaN or infinite, if either semi-axis is
        shorter than ``settings.min_axis``, or if the center or either
        semi-axis reaches ``settings.max_extent``.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    params = np.asarray(params, dtype=float)
    if not np.all(np.isfinite(params)):
        logging.debug('ellipse rejected: non-finite parameters %s', params)
        return False

    xc, yc, a, b, _theta = params
    if a < settings.min_axis or b < settings.min_axis:
        logging.debug('ellipse rejected: negligible axis (%g, %g)', a, b)
        return False
    if max(abs(xc), abs(yc)) >= settings.max_extent:
        logging.debug('ellipse rejected: center out of bounds (%g, %g)',
                      xc, yc)
        return False
    if max(abs(a), abs(b)) >= settings.max_extent:
        logging.debug('ellipse rejected: axis out of bounds (%g, %g)', a, b)
        return False
    return True
