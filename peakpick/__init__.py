"""Peak detection and quantification for sampled one-dimensional spectra."""

from .spectrum import Spectrum, SpectrumStats
from .peak import Peak
from .config import PickConfig
from .algorithms import (
    normalise,
    smooth,
    pick_peaks,
    find_maximum,
    find_minimum,
    integrate,
    integrate_arrays,
    integrate_peak,
    integrate_polynomial,
    evaluate_polynomial,
    fit_polynomial_baseline,
)
from .pipeline import PeakPicker, detect, locate, quantify

__version__ = "0.3.0"

__all__ = [
    "Spectrum",
    "SpectrumStats",
    "Peak",
    "PickConfig",
    "normalise",
    "smooth",
    "pick_peaks",
    "find_maximum",
    "find_minimum",
    "integrate",
    "integrate_arrays",
    "integrate_peak",
    "integrate_polynomial",
    "evaluate_polynomial",
    "fit_polynomial_baseline",
    "PeakPicker",
    "detect",
    "locate",
    "quantify",
]
