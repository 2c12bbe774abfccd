from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

import numpy as np


"""
Smoothing kernel registry

A kernel is a symmetric convolution: a normalisation divisor plus one weight
per offset from the centre sample (offset 0 is the centre, offset j applies
to both y[i+j] and y[i-j]). Builders register themselves on import, the same
way the bundled modules in this package do.
"""


@dataclass(frozen=True)
class SmoothingKernel:
    name: str
    norm: float
    coefficients: Tuple[float, ...]

    @property
    def points(self) -> int:
        return len(self.coefficients)

    def coefficient(self, offset: int) -> float:
        return self.coefficients[abs(offset)]

    def as_array(self) -> np.ndarray:
        return np.asarray(self.coefficients, dtype=float)


@dataclass(frozen=True)
class KernelSpec:
    name: str
    builder: Callable[..., SmoothingKernel]
    description: str


REGISTRY: Dict[str, KernelSpec] = {}


def register_kernel(spec: KernelSpec) -> None:
    REGISTRY[spec.name] = spec


def get_kernel(name: str) -> KernelSpec:
    try:
        return REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown smoothing kernel {name!r}; available: {available_kernels()}") from None


def available_kernels() -> List[str]:
    return sorted(REGISTRY)


def build_kernel(name: str, points: int, **options) -> SmoothingKernel:
    """Look up ``name`` and build its kernel for a half window of ``points``."""
    points = int(points)
    if points < 1:
        raise ValueError(f"points must be >= 1, got {points}")
    return get_kernel(name).builder(points, **options)
