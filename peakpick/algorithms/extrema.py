"""Index of the tallest / shortest sample inside a peak region."""

from __future__ import annotations

import numpy as np

from peakpick.peak import Peak
from peakpick.spectrum import Spectrum

__all__ = ["find_maximum", "find_minimum", "find_maximum_in", "find_minimum_in"]


def find_maximum_in(spectrum: Spectrum, start: int, end: int) -> int:
    """Index of the largest y in ``[start, end)``; ties resolve to the earliest.

    A window with ``end <= start`` returns ``start``.
    """
    if end <= start:
        return start
    return start + int(np.argmax(spectrum.y_values[start:end]))


def find_minimum_in(spectrum: Spectrum, start: int, end: int) -> int:
    """Index of the smallest y in ``[start, end)``; ties resolve to the earliest."""
    if end <= start:
        return start
    return start + int(np.argmin(spectrum.y_values[start:end]))


def find_maximum(spectrum: Spectrum, peak: Peak) -> int:
    """Index of the tallest sample of ``peak``. The peak is not modified."""
    return find_maximum_in(spectrum, peak.start, peak.end)


def find_minimum(spectrum: Spectrum, peak: Peak) -> int:
    """Index of the shortest sample of ``peak``. The peak is not modified."""
    return find_minimum_in(spectrum, peak.start, peak.end)
