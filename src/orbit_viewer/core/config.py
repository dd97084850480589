from __future__ import annotations

import math
from dataclasses import dataclass

from orbit_viewer.core.constants import DEFAULT_SAMPLE_COUNT, DEFAULT_PHASE_STEP_RAD


@dataclass(frozen=True)
class EngineConfig:
    """
    Tunables for the orbit geometry engine.

    sample_count: points in the closed orbit curve (>= 2)
    phase_step_rad: phase advance per tick in radians (> 0)
    rotate_focus_marker: rotate the central-body marker with the orbit.
        False reproduces the original viewer, which left it at (-c, 0, 0).
    """
    sample_count: int = DEFAULT_SAMPLE_COUNT
    phase_step_rad: float = DEFAULT_PHASE_STEP_RAD
    rotate_focus_marker: bool = True

    def __post_init__(self):
        if self.sample_count < 2:
            raise ValueError(f"Sample count must be at least 2. Got: {self.sample_count}")
        if not math.isfinite(self.phase_step_rad) or self.phase_step_rad <= 0:
            raise ValueError(f"Phase step must be positive and finite. Got: {self.phase_step_rad}")
