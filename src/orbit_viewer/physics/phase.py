from __future__ import annotations

import math
from dataclasses import dataclass

from orbit_viewer.core.constants import DEFAULT_PHASE_STEP_RAD


def advance_phase(current_rad: float, step_rad: float = DEFAULT_PHASE_STEP_RAD) -> float:
    """
    new = current + step.
    No wrap to [0, 2pi): sin/cos are periodic, so the phase is left to grow.
    """
    return current_rad + step_rad


@dataclass(frozen=True)
class OrbitalPhase:
    """
    Animation phase for the active orbit.
    Replaced, never mutated: the driver holds the current cell and swaps it each tick.
    """
    theta_rad: float = 0.0
    tick: int = 0

    def __post_init__(self):
        if not math.isfinite(self.theta_rad):
            raise ValueError(f"Phase must be finite. Got: {self.theta_rad}")

    def advanced(self, step_rad: float = DEFAULT_PHASE_STEP_RAD) -> "OrbitalPhase":
        return OrbitalPhase(theta_rad=advance_phase(self.theta_rad, step_rad), tick=self.tick + 1)
