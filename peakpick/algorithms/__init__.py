"""Peak picking algorithms: normalisation, smoothing, segmentation, extrema and integration.

This package hosts implementations used by the analysis pipeline.
"""

from .normalization import normalise, normalise_array
from .smoothing import smooth, smooth_array
from .segmentation import PeakSegmenter, PeakState, pick_peaks
from .extrema import find_maximum, find_minimum, find_maximum_in, find_minimum_in
from .integration import integrate, integrate_arrays, integrate_peak, integrate_polynomial
from .baseline import evaluate_polynomial, fit_polynomial_baseline

__all__ = [
    "normalise",
    "normalise_array",
    "smooth",
    "smooth_array",
    "PeakSegmenter",
    "PeakState",
    "pick_peaks",
    "find_maximum",
    "find_minimum",
    "find_maximum_in",
    "find_minimum_in",
    "integrate",
    "integrate_arrays",
    "integrate_peak",
    "integrate_polynomial",
    "evaluate_polynomial",
    "fit_polynomial_baseline",
]
