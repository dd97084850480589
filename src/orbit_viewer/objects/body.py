from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from orbit_viewer.physics.orbit import OrbitalElements, derive_shape, position_at_phase
from orbit_viewer.core.frames import Vector3


@dataclass
class Body:
    """
    A named body on a closed heliocentric orbit (asteroid or comet).
    Purely kinematic: position comes from the orbit geometry at a given phase.
    """
    body_id: str
    name: str
    elements: OrbitalElements

    # Last sampled state
    last_theta_rad: Optional[float] = None
    last_position_au: Optional[Vector3] = None

    def __post_init__(self):
        if not self.body_id.strip():
            raise ValueError("Body ID cannot be empty or whitespace.")
        if not self.name.strip():
            raise ValueError("Body name cannot be empty or whitespace.")

    def position_at(self, theta_rad: float) -> Vector3:
        """
        Heliocentric ecliptic position (AU) at phase theta_rad.
        """
        shape = derive_shape(self.elements)
        r = position_at_phase(shape, theta_rad, *self.elements.orientation())

        self.last_theta_rad = theta_rad
        self.last_position_au = r

        return r
