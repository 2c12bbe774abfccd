"""Amplitude normalisation relative to the spectrum maximum."""

from __future__ import annotations

import logging

import numpy as np
from numba import njit, prange

from peakpick.spectrum import Spectrum

logger = logging.getLogger(__name__)

__all__ = ["normalise", "normalise_array"]


@njit(parallel=True, error_model="numpy")
def _scale_numba(y: np.ndarray, maximum: float, scale: float) -> None:
    # error_model="numpy": a zero maximum gives inf/nan instead of raising
    for i in prange(y.size):
        y[i] = y[i] / maximum * scale


def normalise_array(y: np.ndarray, maximum: float, max: float = 1.0) -> np.ndarray:
    """Rescale ``y`` in place so that ``maximum`` maps onto ``max``."""
    y = np.ascontiguousarray(y, dtype=np.float64)
    _scale_numba(y, float(maximum), float(max))
    return y


def normalise(spectrum: Spectrum, min: float = 0.0, max: float = 1.0) -> Spectrum:
    """Rescale all y-values by the spectrum maximum into ``[0, max]``.

    ``min`` is accepted for signature compatibility and not used: the scaling
    is relative to zero. A zero maximum is not guarded and produces NaN/Inf.

    Args:
        spectrum: Spectrum to rescale in place
        min: Unused lower bound of the target range
        max: Value the current maximum is mapped onto

    Returns:
        The same spectrum, re-analysed
    """
    maximum = spectrum.max()
    if maximum == 0 or not np.isfinite(maximum):
        logger.warning(f"Normalising by maximum {maximum}; results will not be finite")

    _scale_numba(spectrum.y_values, float(maximum), float(max))

    spectrum.analyse()
    logger.debug(f"Normalised {spectrum.size()} samples by {maximum:g} onto {max:g}")
    return spectrum
