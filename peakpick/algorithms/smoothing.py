"""Symmetric convolution smoothing (Savitzky-Golay style)."""

from __future__ import annotations

import logging
from typing import Union

import numpy as np
from numba import njit, prange
from numpy.typing import ArrayLike, NDArray

from peakpick.kernels import SmoothingKernel, build_kernel
from peakpick.spectrum import Spectrum

logger = logging.getLogger(__name__)

__all__ = ["smooth", "smooth_array", "resolve_kernel"]


@njit(parallel=True)
def _convolve_numba(padded: np.ndarray, coeffs: np.ndarray, norm: float, pad: int, n: int) -> np.ndarray:
    """Output k holds sample i = k + 1 of the unpadded signal."""
    points = coeffs.size
    out = np.empty(n - 1, dtype=np.float64)
    for i in prange(1, n):
        val = 0.0
        centre = i + pad
        for j in range(points):
            coeff = coeffs[j]
            val += coeff * padded[centre + j] / norm
            if j:
                val += coeff * padded[centre - j] / norm
        out[i - 1] = val
    return out


def resolve_kernel(kernel: Union[str, SmoothingKernel], points: int, **options) -> SmoothingKernel:
    """Return ``kernel`` itself or build the registered kernel of that name."""
    if isinstance(kernel, SmoothingKernel):
        return kernel
    return build_kernel(kernel, points, **options)


def smooth_array(y: ArrayLike, kernel: SmoothingKernel) -> NDArray[np.float64]:
    """Apply ``kernel`` to ``y`` and return the ``len(y) - 1`` smoothed values.

    Output index ``i - 1`` holds the weighted sum centred on input sample
    ``i`` for ``i`` in ``1 .. len(y) - 1``; the leading sample has no output.

    Samples beyond either edge of ``y`` are read as ``0.0``. There is no
    bounds validation: callers keep ``kernel.points - 1`` within the margin
    to the edges, or accept the zero-extended edge values.
    """
    y = np.asarray(y, dtype=float).reshape(-1)
    n = y.size
    if n < 2:
        return np.empty(0, dtype=float)

    coeffs = kernel.as_array()
    pad = max(coeffs.size - 1, 0)
    if pad >= n - 1:
        logger.warning(f"Smoothing window of {coeffs.size} points spans the whole signal of {n} samples")
    elif pad:
        logger.debug(f"Zero-extending {pad} samples at each edge")
    padded = np.zeros(n + 2 * pad, dtype=np.float64)
    padded[pad:pad + n] = y
    return _convolve_numba(padded, coeffs, float(kernel.norm), pad, n)


def smooth(
    spectrum: Spectrum,
    points: int,
    kernel: Union[str, SmoothingKernel] = "savitzky-golay",
    **kernel_options,
) -> Spectrum:
    """Smooth ``spectrum`` in place with a symmetric kernel.

    The result is one sample shorter than the input at the leading edge and
    replaces the spectrum's y-values via ``set_spectrum``.

    Args:
        spectrum: Spectrum to smooth in place
        points: Number of per-offset coefficients (centre included)
        kernel: Registered kernel name or a prebuilt kernel
        **kernel_options: Passed to the kernel builder (e.g. ``polyorder``)

    Returns:
        The same spectrum
    """
    kern = resolve_kernel(kernel, points, **kernel_options)
    smoothed = smooth_array(spectrum.y_values, kern)
    spectrum.set_spectrum(smoothed)
    logger.debug(f"Smoothed with {kern.name} ({kern.points} points), {spectrum.size()} samples remain")
    return spectrum
