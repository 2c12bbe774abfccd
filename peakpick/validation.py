"""Opt-in explicit checks for callers that want early detection.

The algorithms themselves fail quietly (NaN propagation, ``0.0`` areas). The
helpers here report why an input is degenerate, and the ``*_strict``
variants raise instead of returning sentinels.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike

from peakpick.algorithms.integration import integrate, integrate_polynomial, window_in_bounds
from peakpick.algorithms.normalization import normalise
from peakpick.spectrum import Spectrum

__all__ = [
    "WindowCheck",
    "NormaliseCheck",
    "PeakPickError",
    "IntegrationWindowError",
    "NormalisationError",
    "check_integration_window",
    "check_normalisable",
    "check_smoothing_margin",
    "edge_affected_samples",
    "integrate_strict",
    "normalise_strict",
]


class WindowCheck(Enum):
    OK = "ok"
    LENGTH_MISMATCH = "length_mismatch"
    EMPTY_WINDOW = "empty_window"
    OUT_OF_BOUNDS = "out_of_bounds"


class NormaliseCheck(Enum):
    OK = "ok"
    ZERO_MAXIMUM = "zero_maximum"
    NON_FINITE = "non_finite"


class PeakPickError(ValueError):
    """Base class for errors raised by the strict helpers."""


class IntegrationWindowError(PeakPickError):
    def __init__(self, kind: WindowCheck, start: int, end: int, size: int):
        self.kind = kind
        self.start = start
        self.end = end
        self.size = size
        super().__init__(f"Cannot integrate [{start}, {end}) over {size} samples: {kind.value}")


class NormalisationError(PeakPickError):
    def __init__(self, kind: NormaliseCheck, maximum: float):
        self.kind = kind
        self.maximum = maximum
        super().__init__(f"Cannot normalise by maximum {maximum!r}: {kind.value}")


def check_integration_window(x: ArrayLike, y: ArrayLike, start: int, end: int) -> WindowCheck:
    """Classify an integration window the way the integrator treats it."""
    nx = np.asarray(x).size
    ny = np.asarray(y).size
    if nx != ny:
        return WindowCheck.LENGTH_MISMATCH
    if end <= start:
        return WindowCheck.EMPTY_WINDOW
    if not window_in_bounds(nx, start, end):
        return WindowCheck.OUT_OF_BOUNDS
    return WindowCheck.OK


def check_normalisable(spectrum: Spectrum) -> NormaliseCheck:
    maximum = spectrum.max()
    if not np.isfinite(maximum):
        return NormaliseCheck.NON_FINITE
    if maximum == 0:
        return NormaliseCheck.ZERO_MAXIMUM
    return NormaliseCheck.OK


def edge_affected_samples(spectrum: Spectrum, points: int) -> int:
    """Number of smoothed samples whose window reads past either edge.

    Output sample ``i`` (``1 <= i <= N - 1``) spans
    ``i - (points - 1) .. i + (points - 1)``.
    """
    half = max(int(points) - 1, 0)
    n = spectrum.size()
    return sum(1 for i in range(1, n) if i - half < 0 or i + half > n - 1)


def check_smoothing_margin(spectrum: Spectrum, points: int) -> bool:
    """True when smoothing with ``points`` reads no sample outside the spectrum."""
    return edge_affected_samples(spectrum, points) == 0


def integrate_strict(
    spectrum: Spectrum,
    start: int,
    end: int,
    offset: float = 0.0,
    coefficients: Optional[Sequence[float]] = None,
) -> float:
    """Like :func:`~peakpick.algorithms.integration.integrate` but raise on bad windows.

    Raises:
        IntegrationWindowError: If the window would make the integrator return 0
    """
    kind = check_integration_window(spectrum.x_values, spectrum.y_values, start, end)
    if kind is not WindowCheck.OK:
        raise IntegrationWindowError(kind, start, end, spectrum.size())
    if coefficients is not None:
        return integrate_polynomial(spectrum, start, end, coefficients)
    return integrate(spectrum, start, end, offset)


def normalise_strict(spectrum: Spectrum, max: float = 1.0) -> Spectrum:
    """Normalise, raising :class:`NormalisationError` instead of producing NaN/Inf."""
    kind = check_normalisable(spectrum)
    if kind is not NormaliseCheck.OK:
        raise NormalisationError(kind, spectrum.max())
    return normalise(spectrum, max=max)
