"""Tests for the extremum finder."""

import numpy as np
import pytest

from peakpick.algorithms.extrema import (
    find_maximum,
    find_maximum_in,
    find_minimum,
    find_minimum_in,
)
from peakpick.algorithms.segmentation import pick_peaks
from peakpick.peak import Peak
from peakpick.spectrum import Spectrum


class TestFindMaximum:

    def test_triangle(self, triangle):
        peak, = pick_peaks(triangle, threshold=0.5)
        assert find_maximum(triangle, peak) == 2

    def test_ties_resolve_to_earliest(self):
        spec = Spectrum.from_y([1.0, 3.0, 3.0, 2.0])
        assert find_maximum(spec, Peak(start=0, end=4)) == 1

    def test_start_is_initial_candidate(self):
        spec = Spectrum.from_y([-5.0, -3.0, -4.0])
        assert find_maximum(spec, Peak(start=0, end=3)) == 1
        assert find_maximum(spec, Peak(start=2, end=3)) == 2

    def test_end_is_exclusive(self):
        spec = Spectrum.from_y([0.0, 1.0, 2.0, 9.0])
        assert find_maximum(spec, Peak(start=0, end=3)) == 2

    def test_does_not_mutate_peak(self, triangle):
        peak = Peak(start=0, end=4, max=0)
        find_maximum(triangle, peak)
        find_minimum(triangle, peak)
        assert peak.max == 0 and peak.min == 0

    def test_index_is_absolute(self):
        spec = Spectrum.from_y([9.0, 0.0, 1.0, 5.0, 5.0, 9.0])
        assert find_maximum_in(spec, 2, 5) == 3
        assert find_minimum_in(spec, 2, 5) == 2

    @pytest.mark.parametrize("start, end", [(3, 3), (3, 1)])
    def test_degenerate_window(self, triangle, start, end):
        assert find_maximum_in(triangle, start, end) == start
        assert find_minimum_in(triangle, start, end) == start


class TestFindMinimum:

    def test_ties_resolve_to_earliest(self):
        spec = Spectrum.from_y([2.0, 0.0, 0.0, 1.0])
        assert find_minimum(spec, Peak(start=0, end=4)) == 1

    def test_start_is_initial_candidate(self):
        spec = Spectrum.from_y([-5.0, -3.0, -4.0])
        assert find_minimum(spec, Peak(start=0, end=3)) == 0

    def test_detected_peaks(self, two_triangles):
        peaks = pick_peaks(two_triangles, threshold=0.1)
        assert [find_maximum(two_triangles, p) for p in peaks] == [6, 15]
        assert [find_minimum(two_triangles, p) for p in peaks] == [1, 12]

    def test_within_bounds(self, noisy_sine_wave):
        x, noisy_y, _ = noisy_sine_wave
        spec = Spectrum(x, noisy_y)
        for peak in pick_peaks(spec, threshold=0.0):
            lo = find_minimum(spec, peak)
            hi = find_maximum(spec, peak)
            assert peak.start <= lo <= peak.end
            assert peak.start <= hi <= peak.end
            window = noisy_y[peak.start:peak.end]
            assert noisy_y[hi] == np.max(window)
            assert noisy_y[lo] == np.min(window)
