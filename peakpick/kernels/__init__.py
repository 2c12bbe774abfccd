"""Smoothing kernel providers.

Importing this package registers the bundled kernels.
"""

from .registry import (
    KernelSpec,
    SmoothingKernel,
    REGISTRY,
    available_kernels,
    build_kernel,
    get_kernel,
    register_kernel,
)
from . import boxcar, savitzky_golay  # noqa: F401  (registration side effects)

__all__ = [
    "KernelSpec",
    "SmoothingKernel",
    "REGISTRY",
    "available_kernels",
    "build_kernel",
    "get_kernel",
    "register_kernel",
]
