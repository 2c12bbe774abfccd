"""Pytest tests for numerical integration."""

import numpy as np
import pytest
from scipy.integrate import trapezoid

from peakpick.algorithms.integration import (
    integrate,
    integrate_arrays,
    integrate_peak,
    integrate_polynomial,
    window_in_bounds,
)
from peakpick.peak import Peak
from peakpick.spectrum import Spectrum


class TestIntegrateArrays:
    """Plain integration over paired arrays."""

    def test_triangle_area(self, triangle):
        # 0.5 + 2.0 + 2.0 + 0.5
        area = integrate_arrays(triangle.x_values, triangle.y_values, 0, 4)
        assert area == pytest.approx(5.0)

    def test_partial_window(self, triangle):
        area = integrate_arrays(triangle.x_values, triangle.y_values, 1, 3)
        assert area == pytest.approx(4.0)

    def test_single_segment(self):
        assert integrate_arrays([0.0, 2.0], [1.0, 3.0], 0, 1) == pytest.approx(4.0)

    def test_non_uniform_spacing(self):
        x = np.array([0.0, 0.5, 2.0, 2.25])
        y = np.array([1.0, 2.0, 4.0, 0.0])
        expected = trapezoid(y, x)
        assert integrate_arrays(x, y, 0, 3) == pytest.approx(expected)

    def test_sign_change_within_segment(self):
        assert integrate_arrays([0.0, 1.0], [-1.0, 1.0], 0, 1) == pytest.approx(0.0)
        assert integrate_arrays([0.0, 1.0], [-1.0, 3.0], 0, 1) == pytest.approx(1.0)

    def test_negative_signal(self):
        assert integrate_arrays([0.0, 1.0, 2.0], [0.0, -2.0, 0.0], 0, 2) == pytest.approx(-2.0)

    def test_matches_trapezoid(self, noisy_sine_wave):
        x, noisy_y, _ = noisy_sine_wave
        area = integrate_arrays(x, noisy_y, 10, 80)
        assert area == pytest.approx(trapezoid(noisy_y[10:81], x[10:81]), rel=1e-10, abs=1e-12)

    def test_constant_offset(self, triangle):
        area = integrate_arrays(triangle.x_values, triangle.y_values, 0, 4, offset=1.0)
        assert area == pytest.approx(1.0)


class TestDegenerateInput:
    """Degenerate windows return exactly zero."""

    def test_mismatched_lengths(self):
        assert integrate_arrays([0.0, 1.0, 2.0], [1.0, 2.0], 0, 1) == 0.0

    @pytest.mark.parametrize("start, end", [(2, 2), (3, 1), (0, 0)])
    def test_empty_window(self, triangle, start, end):
        assert integrate(triangle, start, end) == 0.0

    @pytest.mark.parametrize("start, end", [(0, 5), (-1, 3), (2, 9)])
    def test_out_of_bounds(self, triangle, start, end):
        assert integrate(triangle, start, end) == 0.0

    def test_window_in_bounds(self):
        assert window_in_bounds(5, 0, 4)
        assert not window_in_bounds(5, 0, 5)
        assert not window_in_bounds(5, -1, 2)
        assert not window_in_bounds(5, 3, 3)


class TestBaselines:
    """Constant and polynomial baseline subtraction."""

    def test_offset_invariance(self, triangle):
        c = 2.5
        shifted = Spectrum(triangle.x_values, triangle.y_values + c)
        assert integrate(shifted, 0, 4, offset=c) == pytest.approx(integrate(triangle, 0, 4))

    def test_constant_polynomial_equals_offset(self, gaussian_spectrum):
        by_offset = integrate(gaussian_spectrum, 100, 400, offset=2.0)
        by_poly = integrate_polynomial(gaussian_spectrum, 100, 400, [2.0])
        assert by_poly == pytest.approx(by_offset)

    def test_linear_baseline_removed(self, triangle):
        x = triangle.x_values
        tilted = Spectrum(x, triangle.y_values + 2.0 + 0.5 * x)
        assert integrate_polynomial(tilted, 0, 4, [2.0, 0.5]) == pytest.approx(5.0)

    def test_gaussian_area_above_baseline(self, gaussian_spectrum):
        # full Gaussian area: amplitude * sigma * sqrt(2 pi)
        area = integrate(gaussian_spectrum, 0, 500, offset=2.0)
        assert area == pytest.approx(10.0 * 4.0 * np.sqrt(2 * np.pi), rel=1e-4)

    def test_empty_polynomial_is_zero_baseline(self, triangle):
        assert integrate_polynomial(triangle, 0, 4, []) == pytest.approx(5.0)

    def test_polynomial_degenerate_window(self, triangle):
        assert integrate_polynomial(triangle, 4, 0, [1.0]) == 0.0


class TestIntegratePeak:
    """Integration on Peak records."""

    def test_writes_integ_num(self, triangle):
        peak = Peak(start=0, end=4)
        area = integrate_peak(triangle, peak)
        assert area == pytest.approx(5.0)
        assert peak.integ_num == area

    def test_uses_integration_bounds(self, triangle):
        peak = Peak(start=0, end=4)
        peak.set_integration_range(1, 3)
        assert integrate_peak(triangle, peak) == pytest.approx(4.0)
        assert (peak.start, peak.end) == (0, 4)

    def test_integration_range_from_x(self, triangle):
        peak = Peak(start=0, end=4)
        peak.set_integration_range_x(triangle, 0.9, 3.2)
        assert (peak.int_start, peak.int_end) == (1, 3)

    def test_polynomial_baseline(self, triangle):
        peak = Peak(start=0, end=4)
        area = integrate_peak(triangle, peak, offset=99.0, coefficients=[1.0])
        assert area == pytest.approx(1.0)
        assert peak.integ_num == area

    def test_degenerate_peak_stores_zero(self, triangle):
        peak = Peak(start=3, end=3, integ_num=7.0)
        assert integrate_peak(triangle, peak) == 0.0
        assert peak.integ_num == 0.0
