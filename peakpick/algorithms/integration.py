"""Baseline-aware numerical integration of peak regions.

Each adjacent sample pair ``(x0, y0), (x1, y1)`` contributes the rectangle
under the value of smaller magnitude plus half the step towards the other
one::

    (x1 - x0) * m + (x1 - x0) * (M - m) / 2

where ``m`` is whichever of ``y0, y1`` has the smaller absolute value and
``M`` the other. The baseline (a constant offset or a polynomial in x) is
subtracted from y first. The window ``[start, end)`` names the segments, so
samples ``start .. end`` are read.

Degenerate input returns ``0.0`` instead of raising: mismatched array
lengths, ``end <= start``, or a window outside the arrays.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from numba import njit, prange
from numpy.typing import ArrayLike

from peakpick.algorithms.baseline import evaluate_polynomial
from peakpick.peak import Peak
from peakpick.spectrum import Spectrum

logger = logging.getLogger(__name__)

__all__ = [
    "integrate_arrays",
    "integrate",
    "integrate_polynomial",
    "integrate_peak",
    "window_in_bounds",
]


@njit(parallel=True, fastmath=False)
def _integrate_numba(x: np.ndarray, y: np.ndarray, base: np.ndarray, start: int, end: int) -> float:
    integ = 0.0
    for i in prange(start, end):
        k = i - start
        dx = x[i + 1] - x[i]
        y_0 = y[i] - base[k]
        y_1 = y[i + 1] - base[k + 1]
        if abs(y_0) < abs(y_1):
            contrib = dx * y_0 + dx * (y_1 - y_0) / 2.0
        else:
            contrib = dx * y_1 + dx * (y_0 - y_1) / 2.0
        integ += contrib
    return integ


def window_in_bounds(size: int, start: int, end: int) -> bool:
    """True when segments ``[start, end)`` can be read from ``size`` samples."""
    return 0 <= start < end <= size - 1


def _integrate(x: np.ndarray, y: np.ndarray, start: int, end: int, base: np.ndarray) -> float:
    return float(_integrate_numba(x, y, base, int(start), int(end)))


def _prepare(x: ArrayLike, y: ArrayLike, start: int, end: int):
    x = np.ascontiguousarray(x, dtype=np.float64).reshape(-1)
    y = np.ascontiguousarray(y, dtype=np.float64).reshape(-1)
    if x.size != y.size:
        logger.warning(f"Cannot integrate arrays of different length ({x.size} vs {y.size})")
        return None
    if not window_in_bounds(x.size, start, end):
        logger.debug(f"Integration window [{start}, {end}) unusable for {x.size} samples")
        return None
    return x, y


def integrate_arrays(
    x: ArrayLike,
    y: ArrayLike,
    start: int,
    end: int,
    offset: float = 0.0,
) -> float:
    """Integrate paired arrays over segments ``[start, end)`` above ``offset``."""
    prepared = _prepare(x, y, start, end)
    if prepared is None:
        return 0.0
    x, y = prepared
    base = np.full(end - start + 1, float(offset))
    return _integrate(x, y, start, end, base)


def integrate(spectrum: Spectrum, start: int, end: int, offset: float = 0.0) -> float:
    """Integrate ``spectrum`` over segments ``[start, end)`` above a constant baseline."""
    return integrate_arrays(spectrum.x_values, spectrum.y_values, start, end, offset)


def integrate_polynomial(
    spectrum: Spectrum,
    start: int,
    end: int,
    coefficients: Sequence[float],
) -> float:
    """Integrate above a polynomial baseline.

    ``coefficients`` are in increasing power order, as taken by
    :func:`peakpick.algorithms.baseline.evaluate_polynomial`.
    """
    prepared = _prepare(spectrum.x_values, spectrum.y_values, start, end)
    if prepared is None:
        return 0.0
    x, y = prepared
    base = np.ascontiguousarray(evaluate_polynomial(x[start:end + 1], coefficients), dtype=np.float64)
    return _integrate(x, y, start, end, base)


def integrate_peak(
    spectrum: Spectrum,
    peak: Peak,
    offset: float = 0.0,
    coefficients: Optional[Sequence[float]] = None,
) -> float:
    """Integrate ``peak`` over ``[int_start, int_end)`` and store the area.

    With ``coefficients`` the baseline is that polynomial and ``offset`` is
    ignored. The area is written to ``peak.integ_num`` and returned.
    """
    if coefficients is not None:
        area = integrate_polynomial(spectrum, peak.int_start, peak.int_end, coefficients)
    else:
        area = integrate(spectrum, peak.int_start, peak.int_end, offset)
    peak.integ_num = area
    return area
