"""Peak picking configuration with shared defaults."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional

logger = logging.getLogger(__name__)

__all__ = ["PickConfig", "DEFAULT_CONFIG", "BASELINE_MODES"]

BaselineMode = Literal['none', 'offset', 'polynomial']
BASELINE_MODES = ('none', 'offset', 'polynomial')

# Legacy key -> field name
_ALIASES = {
    "points": "smooth_points",
    "order": "polyorder",
    "window": "smooth_points",
    "offset": "baseline_offset",
}


@dataclass(frozen=True)
class PickConfig:
    threshold: float = 0.05
    precision: float = 1000
    normalise: bool = True
    normalise_max: float = 1.0
    smooth_points: int = 3
    kernel: str = "savitzky-golay"
    polyorder: int = 2
    start: int = 0
    end: int = 0
    step: int = 1
    baseline: BaselineMode = 'none'
    baseline_offset: float = 0.0
    baseline_degree: int = 1

    def __post_init__(self) -> None:
        if self.baseline not in BASELINE_MODES:
            raise ValueError(f"baseline must be one of {BASELINE_MODES}, got {self.baseline!r}")
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.smooth_points < 0:
            raise ValueError(f"smooth_points must be >= 0, got {self.smooth_points}")
        if self.step < 1:
            raise ValueError(f"step must be >= 1, got {self.step}")
        if self.baseline_degree < 0:
            raise ValueError(f"baseline_degree must be >= 0, got {self.baseline_degree}")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "PickConfig":
        """Merge ``data`` over the defaults.

        ``None`` values keep the default, legacy aliases are renamed and
        unknown keys are logged and ignored.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        resolved: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if value is None:
                continue
            name = _ALIASES.get(key, key)
            if name not in known:
                logger.warning(f"Ignoring unknown peak picking option {key!r}")
                continue
            if name in resolved and key != name:
                # explicit field name wins over its alias
                continue
            resolved[name] = value
        return cls(**resolved)

    def replace(self, **changes: Any) -> "PickConfig":
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULT_CONFIG = PickConfig()
