"""Process common input arguments to ellipse fitting methods."""

from typing import Optional, Tuple

import numpy as np

from socialellipse._settings import MAX_COORDINATE


def _fit_ellipse_process_params(x, y: Optional[np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
    """Validate a point set and return fresh float coordinate arrays.

    Parameters
    ----------
    x : array_like (N,) or (N, 2)
        x coordinates, or complex points (x.real, x.imag) if y is None,
        or an (N, 2) array of points if y is None.
    y : None or array_like (N,)
        y coordinates.

    Returns
    -------
    x, y : array_like (N,)
        Copies of the coordinates as float arrays.

    Raises
    ------
    ValueError
        If the point set is empty, the coordinate arrays differ in
        length, contain non-finite values or values beyond
        MAX_COORDINATE in magnitude.
    """

    if y is None:
        x = np.asarray(x)
        if np.iscomplexobj(x):
            # Convert complex array: (x, y) <=> (x.real, x.imag)
            x, y = x.real, x.imag
        elif x.ndim == 2 and x.shape[1] == 2:
            x, y = x[:, 0], x[:, 1]
        else:
            raise ValueError(
                'if y not provided, x must be a complex-valued array '
                'or an (N, 2) array of points')

    x = np.array(x, dtype=float)
    y = np.array(y, dtype=float)
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError('x and y must have exactly 1 dimension: (N,)')
    if x.shape != y.shape:
        raise ValueError(
            'x, y must have the same length, got {} and {}'.format(
                x.size, y.size))
    if x.size == 0:
        raise ValueError('at least one point is required')
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise ValueError('point coordinates must be finite')
    if max(np.abs(x).max(), np.abs(y).max()) > MAX_COORDINATE:
        raise ValueError(
            'point coordinates must not exceed {:g} in magnitude'.format(
                MAX_COORDINATE))

    return x, y


if __name__ == '__main__':
    pass
