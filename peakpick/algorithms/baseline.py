"""Polynomial baselines: evaluation and least-squares fitting."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np
from numpy.polynomial import polynomial as P
from numpy.typing import ArrayLike, NDArray

from peakpick.peak import Peak
from peakpick.spectrum import Spectrum

logger = logging.getLogger(__name__)

__all__ = ["evaluate_polynomial", "fit_polynomial_baseline", "peak_mask"]


def evaluate_polynomial(x: ArrayLike, coefficients: Sequence[float]) -> NDArray[np.float64]:
    """Evaluate ``sum(c[k] * x**k)``; coefficients in increasing power order."""
    coeffs = np.asarray(coefficients, dtype=float).reshape(-1)
    x = np.asarray(x, dtype=float)
    if coeffs.size == 0:
        return np.zeros_like(x)
    return P.polyval(x, coeffs)


def peak_mask(size: int, peaks: Iterable[Peak]) -> NDArray[np.bool_]:
    """Boolean mask that is False inside every ``[start, end]`` peak region."""
    mask = np.ones(size, dtype=bool)
    for peak in peaks:
        lo = max(int(peak.start), 0)
        hi = min(int(peak.end), size - 1)
        if hi >= lo:
            mask[lo:hi + 1] = False
    return mask


def fit_polynomial_baseline(
    spectrum: Spectrum,
    degree: int = 1,
    peaks: Optional[Iterable[Peak]] = None,
) -> NDArray[np.float64]:
    """Least-squares polynomial through the samples outside ``peaks``.

    Args:
        spectrum: Spectrum to fit
        degree: Polynomial degree (>= 0)
        peaks: Regions excluded from the fit; all samples are used if None

    Returns:
        Coefficients in increasing power order, ready for
        :func:`evaluate_polynomial` and the polynomial integrator

    Raises:
        ValueError: If degree is negative
    """
    degree = int(degree)
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")

    x = spectrum.x_values
    y = spectrum.y_values
    if peaks is not None:
        mask = peak_mask(x.size, peaks)
        if np.count_nonzero(mask) < degree + 1:
            logger.warning(
                f"Only {np.count_nonzero(mask)} samples outside peaks for degree {degree}, "
                f"fitting all samples"
            )
            mask = np.ones(x.size, dtype=bool)
        x, y = x[mask], y[mask]

    if x.size < degree + 1:
        degree = max(0, x.size - 1)
        logger.warning(f"Too few samples for the requested degree, reducing to {degree}")

    return P.polyfit(x, y, degree)
