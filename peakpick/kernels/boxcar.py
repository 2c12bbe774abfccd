from __future__ import annotations

from peakpick.kernels.registry import KernelSpec, SmoothingKernel, register_kernel


def boxcar_kernel(points: int) -> SmoothingKernel:
    """Uniform moving-average weights over ``2 * points - 1`` samples."""
    return SmoothingKernel(
        name="boxcar",
        norm=float(2 * points - 1),
        coefficients=(1.0,) * points,
    )


register_kernel(
    KernelSpec(
        name="boxcar",
        builder=boxcar_kernel,
        description="Moving average (uniform weights).",
    )
)
