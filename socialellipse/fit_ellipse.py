"""Best-effort ellipse around a small group of points."""

import enum
import logging
from typing import NamedTuple, Tuple

import numpy as np

from socialellipse._fit_ellipse_process_params import _fit_ellipse_process_params
from socialellipse._settings import DEFAULT_SETTINGS, FitSettings
from socialellipse.basic import EllipseParameters
from socialellipse.check_ellipse import is_valid_ellipse
from socialellipse.conic_to_parametric import conic_to_parametric
from socialellipse.fit_conic_taubin import fit_conic_taubin
from socialellipse.fit_ellipse_fallback import fit_fallback_multiple, fit_fallback_single


class Provenance(enum.Enum):
    """Which method produced an ellipse."""
    ALGEBRAIC = 'algebraic'
    FALLBACK = 'fallback'


class FitOutcome(NamedTuple):
    """Ellipse together with the method that produced it."""
    params: EllipseParameters
    provenance: Provenance

    @property
    def used_fallback(self) -> bool:
        return self.provenance is Provenance.FALLBACK


def fit_ellipse_outcome(x: np.ndarray, y: np.ndarray = None,
                        settings: FitSettings = None) -> FitOutcome:
    """Fit an ellipse and report which method was used.

    Same as :func:`fit_ellipse`, but returns a :class:`FitOutcome`.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    x, y = _fit_ellipse_process_params(x, y)

    # primitive case
    if x.size == 1:
        return FitOutcome(
            fit_fallback_single(x[0], y[0], settings), Provenance.FALLBACK)

    c = fit_conic_taubin(x, y, settings)
    params = conic_to_parametric(c)
    if is_valid_ellipse(params, settings):
        return FitOutcome(
            EllipseParameters(*(float(p) for p in params)),
            Provenance.ALGEBRAIC)

    logging.debug('algebraic fit of %d points rejected, using fallback',
                  x.size)
    return FitOutcome(
        fit_fallback_multiple(x, y, settings), Provenance.FALLBACK)


def fit_ellipse(x: np.ndarray, y: np.ndarray = None,
                settings: FitSettings = None) -> Tuple[EllipseParameters, bool]:
    """Fit an ellipse to a small set of points, e.g. a group of people.

    Parameters
    ----------
    x : array_like (N,) or (N, 2)
        If y is None, x is either an array of complex numbers
        (x.real, x.imag) or an (N, 2) array of points.  If y is not
        None, x are the x-axis coordinates of the N points (x, y).
    y : None or array_like (N,), optional
        If y is not None, y are the y-axis coordinates of the points.
    settings : FitSettings, optional
        Numeric thresholds.  Defaults are used if not given.

    Returns
    -------
    params : EllipseParameters
        Center, semi-axes and orientation of the ellipse.  All values
        are finite and both semi-axes are positive.
    used_fallback : bool
        True if the ellipse was constructed by the geometric heuristic
        instead of the algebraic fit.

    Raises
    ------
    ValueError
        If there are no points, the coordinate arrays differ in length,
        or a coordinate is not finite.

    Notes
    -----
    A single point gets a circle of radius ``settings.fallback_size``.
    Otherwise a conic is fit by Taubin's method; if it is not a sound
    ellipse (always the case for 2 or 3 points, or for collinear
    points), the ellipse is built from the longest vector connecting
    two points and the spread of the points across it.
    """
    outcome = fit_ellipse_outcome(x, y, settings)
    return outcome.params, outcome.used_fallback


if __name__ == '__main__':
    pass
