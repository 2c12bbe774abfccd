"""Single-pass peak segmentation.

The segmenter walks the samples once, without lookahead, and partitions the
signal into rise-then-fall regions above a threshold. It carries explicit
sequential state and is not vectorised.

Per-sample policy, with ``y`` rounded to ``1 / precision``:

- ``y <= threshold`` closes any open region. A region that only rose is
  dropped; a falling region is emitted with ``end = i`` and a new region is
  seeded at ``i``. ``pos_predes`` moves to ``i`` and ``predes`` is kept.
- ``y > predes`` opens (start at ``pos_predes``) or extends a rise. Rising
  out of a falling region emits it at ``pos_predes``, seeds a new region at
  ``i`` and skips the rest of the sample.
- ``y < predes`` marks the region as falling. Equal values keep the state.
  A NaN sample compares false both ways and is handled like a plateau.

A region still open when the scan ends is never emitted.
"""

from __future__ import annotations

import logging
import math
from enum import IntEnum
from typing import Iterator, List, Optional

from peakpick.peak import Peak
from peakpick.spectrum import Spectrum

logger = logging.getLogger(__name__)

__all__ = ["PeakState", "PeakSegmenter", "pick_peaks", "round_to_precision"]


class PeakState(IntEnum):
    CLOSED = 0
    RISING = 1
    FALLING = 2


def round_to_precision(value: float, precision: float) -> float:
    """Round ``value`` to ``1 / precision``, halves away from zero.

    NaN and infinities pass through unchanged.
    """
    scaled = precision * value
    if not math.isfinite(scaled):
        return scaled / precision
    magnitude = abs(scaled)
    rounded = math.floor(magnitude)
    # floor(magnitude + 0.5) would round 0.49999999999999994 up
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, scaled) / precision


class PeakSegmenter:
    """Streaming rise/fall state machine fed one sample at a time."""

    def __init__(self, threshold: float, precision: float = 1000):
        self.threshold = float(threshold)
        self.precision = float(precision)
        self.state = PeakState.CLOSED
        self.predes = 0.0
        self.pos_predes = 0
        self._start = 0
        self._max = 0
        self._end = 0

    def _emit(self, end: int) -> Peak:
        return Peak(start=self._start, end=end, max=self._max)

    def _reseed(self, i: int) -> None:
        self._start = self._max = self._end = i
        self.state = PeakState.CLOSED

    def feed(self, i: int, value: float) -> Optional[Peak]:
        """Advance by sample ``i``; return the peak closed by it, if any."""
        y = round_to_precision(value, self.precision)
        emitted: Optional[Peak] = None

        if y <= self.threshold:
            if self.state == PeakState.RISING:
                self.state = PeakState.CLOSED
            elif self.state == PeakState.FALLING:
                emitted = self._emit(i)
                self._reseed(i)
            self.pos_predes = i
            return emitted

        if y > self.predes:
            if self.state == PeakState.RISING:
                self._max = i
            elif self.state == PeakState.CLOSED:
                self._start = self.pos_predes
            else:
                # double peak: close the falling run where the new rise begins
                emitted = self._emit(self.pos_predes)
                self._reseed(i)
                return emitted
            self.state = PeakState.RISING
        elif y < self.predes:
            self.state = PeakState.FALLING

        self.pos_predes = i
        self.predes = y
        return None

    def scan(self, spectrum: Spectrum, start: int = 0, end: int = 0, step: int = 1) -> Iterator[Peak]:
        if end == 0:
            end = spectrum.size()
        y = spectrum.y_values
        for i in range(start, end, step):
            peak = self.feed(i, float(y[i]))
            if peak is not None:
                yield peak


def pick_peaks(
    spectrum: Spectrum,
    threshold: float,
    precision: float = 1000,
    start: int = 0,
    end: int = 0,
    step: int = 1,
) -> List[Peak]:
    """Partition ``spectrum`` into peak regions in one pass.

    Args:
        spectrum: Smoothed spectrum to scan
        threshold: Values at or below it close open regions
        precision: Values are rounded to ``1 / precision`` before comparison
        start: First index scanned
        end: Index after the last one scanned, ``0`` for the whole spectrum
        step: Index stride

    Returns:
        Peaks in scan order, strictly increasing in ``start``
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")
    segmenter = PeakSegmenter(threshold, precision)
    peaks = list(segmenter.scan(spectrum, start=start, end=end, step=step))
    logger.debug(
        f"Picked {len(peaks)} peaks above {threshold:g} "
        f"(trailing state {segmenter.state.name})"
    )
    return peaks
