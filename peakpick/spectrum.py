"""Sampled one-dimensional signal container.

A :class:`Spectrum` holds ordered ``(x, y)`` samples with strictly increasing
``x``. The y-values are mutable in place; aggregate statistics (``max``,
``min``, ``mean``, ``std``) are cached and recomputed by :meth:`Spectrum.analyse`
after mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)

__all__ = ["Spectrum", "SpectrumStats"]


@dataclass(frozen=True)
class SpectrumStats:
    minimum: float
    maximum: float
    mean: float
    std: float


def _as_1d_float(a: ArrayLike, name: str) -> NDArray[np.float64]:
    arr = np.array(a, dtype=float).reshape(-1)
    if arr.size == 0:
        raise ValueError(f"{name} is empty")
    return arr


class Spectrum:
    """Ordered x/y samples with cached aggregates."""

    def __init__(self, x: ArrayLike, y: ArrayLike):
        x = _as_1d_float(x, "x")
        y = _as_1d_float(y, "y")
        if x.size != y.size:
            raise ValueError(f"x and y must have same size, got {x.size} and {y.size}")
        if x.size > 1 and not np.all(np.diff(x) > 0):
            raise ValueError("x values must be strictly increasing")
        self._x = x
        self._y = y
        self._stats: Optional[SpectrumStats] = None

    @classmethod
    def from_y(cls, y: ArrayLike, x0: float = 0.0, dx: float = 1.0) -> "Spectrum":
        """Build a spectrum on a uniform axis starting at ``x0``."""
        y = _as_1d_float(y, "y")
        return cls(x0 + dx * np.arange(y.size, dtype=float), y)

    def __len__(self) -> int:
        return int(self._y.size)

    def __repr__(self) -> str:
        if self._x.size == 0:
            return "Spectrum(size=0)"
        return f"Spectrum(size={self.size()}, x=[{self._x[0]:g} .. {self._x[-1]:g}])"

    def size(self) -> int:
        return int(self._y.size)

    def x(self, i: int) -> float:
        return float(self._x[i])

    def y(self, i: int) -> float:
        return float(self._y[i])

    def set_y(self, i: int, value: float) -> None:
        self._y[i] = value
        self._stats = None

    @property
    def x_values(self) -> NDArray[np.float64]:
        """Raw x array (not a copy)."""
        return self._x

    @property
    def y_values(self) -> NDArray[np.float64]:
        """Raw y array (not a copy). Call :meth:`analyse` after writing to it."""
        return self._y

    def set_spectrum(self, values: ArrayLike) -> None:
        """Replace the y-values with ``values``.

        A buffer shorter than the x axis drops the leading x coordinates, so
        that each remaining sample keeps the coordinate of the input sample it
        was computed for.
        """
        values = np.array(values, dtype=float).reshape(-1)
        if values.size > self._x.size:
            raise ValueError(
                f"Buffer of {values.size} samples does not fit an axis of {self._x.size}"
            )
        if values.size < self._x.size:
            logger.debug(f"Dropping {self._x.size - values.size} leading x coordinates")
            self._x = self._x[self._x.size - values.size:].copy()
        self._y = values
        self._stats = None

    def analyse(self) -> SpectrumStats:
        """Recompute and cache the aggregate statistics."""
        y = self._y
        if y.size == 0:
            stats = SpectrumStats(np.nan, np.nan, np.nan, np.nan)
        else:
            stats = SpectrumStats(
                minimum=float(np.min(y)),
                maximum=float(np.max(y)),
                mean=float(np.mean(y)),
                std=float(np.std(y)),
            )
        self._stats = stats
        return stats

    @property
    def stats(self) -> SpectrumStats:
        if self._stats is None:
            return self.analyse()
        return self._stats

    def max(self) -> float:
        return self.stats.maximum

    def min(self) -> float:
        return self.stats.minimum

    def mean(self) -> float:
        return self.stats.mean

    def std(self) -> float:
        return self.stats.std

    def x_to_index(self, x: float) -> int:
        """Index of the sample nearest to coordinate ``x``.

        Ties resolve to the lower index; coordinates outside the axis clamp to
        the first or last sample. An empty spectrum maps everything to 0.
        """
        axis = self._x
        if axis.size == 0:
            return 0
        if x <= axis[0]:
            return 0
        if x >= axis[-1]:
            return int(axis.size - 1)
        right = int(np.searchsorted(axis, x, side="left"))
        left = right - 1
        if (x - axis[left]) <= (axis[right] - x):
            return left
        return right

    def copy(self) -> "Spectrum":
        # bypasses __init__, which rejects the empty result of smoothing one sample
        clone = Spectrum.__new__(Spectrum)
        clone._x = self._x.copy()
        clone._y = self._y.copy()
        clone._stats = self._stats
        return clone
