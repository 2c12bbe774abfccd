"""Staged peak picking: detect -> locate -> quantify.

Each stage returns its own immutable result type, so whether a peak has been
enriched with extrema or an area follows from which stage produced it. All
stage types convert back to plain :class:`~peakpick.peak.Peak` records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from peakpick.algorithms.baseline import fit_polynomial_baseline
from peakpick.algorithms.extrema import find_maximum_in, find_minimum_in
from peakpick.algorithms.integration import integrate, integrate_polynomial
from peakpick.algorithms.normalization import normalise
from peakpick.algorithms.segmentation import pick_peaks
from peakpick.algorithms.smoothing import smooth
from peakpick.config import PickConfig
from peakpick.peak import Peak
from peakpick.spectrum import Spectrum

logger = logging.getLogger(__name__)

__all__ = [
    "DetectedPeak",
    "LocatedPeak",
    "QuantifiedPeak",
    "Detection",
    "Location",
    "Quantification",
    "detect",
    "locate",
    "quantify",
    "PickResult",
    "PeakPicker",
]


@dataclass(frozen=True)
class DetectedPeak:
    start: int
    end: int
    max: int

    def to_peak(self) -> Peak:
        return Peak(start=self.start, end=self.end, max=self.max)


@dataclass(frozen=True)
class LocatedPeak:
    detected: DetectedPeak
    max: int
    min: int

    @property
    def start(self) -> int:
        return self.detected.start

    @property
    def end(self) -> int:
        return self.detected.end

    def to_peak(self) -> Peak:
        return Peak(start=self.start, end=self.end, max=self.max, min=self.min)


@dataclass(frozen=True)
class QuantifiedPeak:
    located: LocatedPeak
    area: float
    int_start: int
    int_end: int

    @property
    def start(self) -> int:
        return self.located.start

    @property
    def end(self) -> int:
        return self.located.end

    def to_peak(self) -> Peak:
        peak = self.located.to_peak()
        peak.set_integration_range(self.int_start, self.int_end)
        peak.integ_num = self.area
        return peak


@dataclass(frozen=True)
class Detection:
    peaks: Tuple[DetectedPeak, ...]
    threshold: float
    precision: float

    def __len__(self) -> int:
        return len(self.peaks)

    def to_peaks(self) -> List[Peak]:
        return [p.to_peak() for p in self.peaks]


@dataclass(frozen=True)
class Location:
    peaks: Tuple[LocatedPeak, ...]

    def __len__(self) -> int:
        return len(self.peaks)

    def to_peaks(self) -> List[Peak]:
        return [p.to_peak() for p in self.peaks]


@dataclass(frozen=True)
class Quantification:
    peaks: Tuple[QuantifiedPeak, ...]
    baseline: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.peaks)

    @property
    def areas(self) -> np.ndarray:
        return np.array([p.area for p in self.peaks], dtype=float)

    def to_peaks(self) -> List[Peak]:
        return [p.to_peak() for p in self.peaks]


def detect(
    spectrum: Spectrum,
    threshold: float,
    precision: float = 1000,
    start: int = 0,
    end: int = 0,
    step: int = 1,
) -> Detection:
    peaks = pick_peaks(spectrum, threshold, precision=precision, start=start, end=end, step=step)
    return Detection(
        peaks=tuple(DetectedPeak(p.start, p.end, p.max) for p in peaks),
        threshold=float(threshold),
        precision=float(precision),
    )


def locate(spectrum: Spectrum, detection: Detection) -> Location:
    return Location(
        peaks=tuple(
            LocatedPeak(
                detected=p,
                max=find_maximum_in(spectrum, p.start, p.end),
                min=find_minimum_in(spectrum, p.start, p.end),
            )
            for p in detection.peaks
        )
    )


def quantify(
    spectrum: Spectrum,
    location: Location,
    offset: float = 0.0,
    coefficients: Optional[Sequence[float]] = None,
    windows: Optional[Sequence[Tuple[int, int]]] = None,
) -> Quantification:
    """Integrate every located peak.

    Args:
        spectrum: Spectrum the peaks were detected on
        location: Output of :func:`locate`
        offset: Constant baseline, ignored when ``coefficients`` is given
        coefficients: Polynomial baseline in increasing power order
        windows: Optional ``(int_start, int_end)`` per peak overriding the
            detection bounds

    Returns:
        Quantification with one area per peak
    """
    if windows is not None and len(windows) != len(location.peaks):
        raise ValueError(
            f"Got {len(windows)} integration windows for {len(location.peaks)} peaks"
        )

    quantified = []
    for k, peak in enumerate(location.peaks):
        int_start, int_end = windows[k] if windows is not None else (peak.start, peak.end)
        if coefficients is not None:
            area = integrate_polynomial(spectrum, int_start, int_end, coefficients)
        else:
            area = integrate(spectrum, int_start, int_end, offset)
        quantified.append(QuantifiedPeak(peak, float(area), int(int_start), int(int_end)))

    if coefficients is not None:
        baseline = tuple(float(c) for c in coefficients)
    else:
        baseline = (float(offset),)
    return Quantification(peaks=tuple(quantified), baseline=baseline)


@dataclass(frozen=True)
class PickResult:
    spectrum: Spectrum
    detection: Detection
    location: Location
    quantification: Quantification

    @property
    def peaks(self) -> List[Peak]:
        return self.quantification.to_peaks()


class PeakPicker:
    """
    Class-based interface for the full pipeline.

    Runs normalise -> smooth -> detect -> locate -> quantify on a copy of the
    input spectrum according to a :class:`~peakpick.config.PickConfig`.
    """

    def __init__(self, config: Union[PickConfig, Mapping[str, Any], None] = None):
        if config is None:
            config = PickConfig()
        elif not isinstance(config, PickConfig):
            config = PickConfig.from_mapping(config)
        self.config = config
        self.result: Optional[PickResult] = None

    def prepare(self, spectrum: Spectrum) -> Spectrum:
        """Return a normalised, smoothed copy of ``spectrum``."""
        cfg = self.config
        work = spectrum.copy()
        if cfg.normalise:
            normalise(work, max=cfg.normalise_max)
        if cfg.smooth_points > 0:
            options = {"polyorder": cfg.polyorder} if cfg.kernel == "savitzky-golay-scipy" else {}
            smooth(work, cfg.smooth_points, kernel=cfg.kernel, **options)
        return work

    def baseline_for(self, spectrum: Spectrum, detection: Detection) -> Dict[str, Any]:
        cfg = self.config
        if cfg.baseline == 'polynomial':
            coeffs = fit_polynomial_baseline(spectrum, cfg.baseline_degree, detection.to_peaks())
            return {"coefficients": [float(c) for c in coeffs]}
        if cfg.baseline == 'offset':
            return {"offset": cfg.baseline_offset}
        return {"offset": 0.0}

    def run(self, spectrum: Spectrum) -> PickResult:
        cfg = self.config
        work = self.prepare(spectrum)
        detection = detect(
            work, cfg.threshold, precision=cfg.precision,
            start=cfg.start, end=cfg.end, step=cfg.step,
        )
        location = locate(work, detection)
        quantification = quantify(work, location, **self.baseline_for(work, detection))
        self.result = PickResult(work, detection, location, quantification)
        logger.info(f"Picked {len(detection)} peaks (threshold={cfg.threshold:g}, baseline={cfg.baseline})")
        return self.result

    @property
    def peaks(self) -> List[Peak]:
        if self.result is None:
            raise RuntimeError("Must call run() first")
        return self.result.peaks

    def get_report(self) -> str:
        """Get formatted peak table."""
        if self.result is None:
            return "Peak picking has not been run. Call .run() first."

        spec = self.result.spectrum
        lines = [f"\n{' Peak Report ':=^50}"]
        for k, peak in enumerate(self.result.quantification.peaks, start=1):
            lines.append(
                f" ▸ #{k:<3d} x={spec.x(peak.located.max):<12.6g}"
                f" [{peak.start:>5d}, {peak.end:>5d})  area={peak.area:.6g}"
            )
        if len(lines) == 1:
            lines.append(" ▸ no peaks above threshold")
        lines.append("=" * 50)
        return "\n".join(lines)
