"""Pytest configuration and fixtures for peakpick tests."""

import numpy as np
import pytest

from peakpick.spectrum import Spectrum


@pytest.fixture
def triangle():
    """Single triangular bump on a unit grid."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    y = np.array([0.0, 1.0, 3.0, 1.0, 0.0])
    return Spectrum(x, y)


@pytest.fixture
def two_triangles():
    """Two separated triangles; the second rises above the first one's tail."""
    y = np.array([
        0.0, 0.0, 0.2, 0.4, 0.6, 0.8, 1.0, 0.8, 0.6, 0.4,
        0.2, 0.0, 0.0, 0.3, 0.6, 0.9, 0.6, 0.3, 0.0, 0.0,
    ])
    return Spectrum.from_y(y)


@pytest.fixture
def double_peak():
    """Rise, partial fall, second rise, fall below threshold."""
    return Spectrum.from_y([0.0, 0.5, 1.0, 0.5, 0.8, 0.4, 0.0])


@pytest.fixture
def clean_sine_wave():
    """Generate a clean sine wave for testing."""
    x = np.linspace(0, 2 * np.pi, 100)
    y = np.sin(x)
    return x, y


@pytest.fixture
def noisy_sine_wave(clean_sine_wave):
    """Generate a noisy sine wave for testing smoothing algorithms."""
    x, clean_y = clean_sine_wave
    np.random.seed(42)  # Reproducible noise
    noise = 0.1 * np.random.randn(len(clean_y))
    noisy_y = clean_y + noise
    return x, noisy_y, clean_y


@pytest.fixture
def gaussian_spectrum():
    """Single Gaussian peak on a positive baseline."""
    x = np.linspace(0, 100, 501)
    y = 2.0 + 10.0 * np.exp(-0.5 * ((x - 50.0) / 4.0) ** 2)
    return Spectrum(x, y)


@pytest.fixture(params=[1, 2, 3, 4])
def half_windows(request):
    """Parametrized kernel sizes (coefficients per offset)."""
    return request.param


@pytest.fixture(autouse=True)
def reset_random_seed():
    """Reset random seed before each test for reproducibility."""
    np.random.seed(42)
