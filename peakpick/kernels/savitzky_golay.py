from __future__ import annotations

import numpy as np
import scipy.signal

from peakpick.kernels.registry import KernelSpec, SmoothingKernel, register_kernel


def savitzky_golay_norm(points: int) -> float:
    """Divisor of the closed-form quadratic/cubic weights, ``m = points - 1``."""
    m = points - 1
    return (2 * m + 1) * (4 * m * m + 4 * m - 3) / 3.0


def savitzky_golay_coefficient(points: int, offset: int) -> float:
    """Closed-form quadratic/cubic weight ``3m² + 3m - 1 - 5j²``."""
    m = points - 1
    j = abs(offset)
    return float(3 * m * m + 3 * m - 1 - 5 * j * j)


def savitzky_golay_kernel(points: int) -> SmoothingKernel:
    """Classic integer Savitzky-Golay smoothing weights (polynomial order 2/3)."""
    return SmoothingKernel(
        name="savitzky-golay",
        norm=savitzky_golay_norm(points),
        coefficients=tuple(savitzky_golay_coefficient(points, j) for j in range(points)),
    )


def savitzky_golay_scipy_kernel(points: int, polyorder: int = 2) -> SmoothingKernel:
    """Savitzky-Golay weights of arbitrary order from :func:`scipy.signal.savgol_coeffs`.

    The full window is ``2 * points - 1`` samples. ``polyorder`` is clipped to
    stay below the window length.
    """
    window = 2 * points - 1
    polyorder = max(0, min(int(polyorder), window - 1))
    coeffs = scipy.signal.savgol_coeffs(window, polyorder)
    centre = points - 1
    half = np.asarray(coeffs[centre:], dtype=float)
    return SmoothingKernel(
        name="savitzky-golay-scipy",
        norm=1.0,
        coefficients=tuple(float(c) for c in half),
    )


register_kernel(
    KernelSpec(
        name="savitzky-golay",
        builder=savitzky_golay_kernel,
        description="Closed-form quadratic/cubic Savitzky-Golay weights with integer norm.",
    )
)

register_kernel(
    KernelSpec(
        name="savitzky-golay-scipy",
        builder=savitzky_golay_scipy_kernel,
        description="Savitzky-Golay weights of any polynomial order (scipy.signal.savgol_coeffs).",
    )
)
