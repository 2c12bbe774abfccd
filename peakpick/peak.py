from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from peakpick.spectrum import Spectrum

__all__ = ["Peak"]


@dataclass
class Peak:
    """Index region of a spectrum detected as a rise-then-fall above threshold.

    ``start``/``end`` are the detection bounds. ``int_start``/``int_end`` bound
    the integration window and default to the detection bounds. ``max``/``min``
    and ``integ_num`` are filled by the extremum finder and the integrator.
    ``deconv_x``, ``deconv_y`` and ``integ_analyt`` are reserved for analytic
    peak-shape results and stay at their defaults here.
    """

    start: int = 0
    end: int = 0
    max: int = 0
    min: int = 0
    int_start: Optional[int] = None
    int_end: Optional[int] = None
    deconv_x: float = 0.0
    deconv_y: float = 0.0
    integ_num: float = 0.0
    integ_analyt: float = field(default=0.0)

    def __post_init__(self) -> None:
        if self.int_start is None:
            self.int_start = self.start
        if self.int_end is None:
            self.int_end = self.end

    def set_integration_range(self, start: int, end: int) -> None:
        self.int_start = int(start)
        self.int_end = int(end)

    def set_integration_range_x(self, spectrum: "Spectrum", x_start: float, x_end: float) -> None:
        """Set the integration window from x coordinates."""
        self.set_integration_range(spectrum.x_to_index(x_start), spectrum.x_to_index(x_end))

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
