from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.physics.phase import OrbitalPhase
from orbit_viewer.simulation.engine import AnimationLog, OrbitGeometryEngine


@dataclass
class PositionRecorderSystem:
    name: str = "position_recorder"

    def on_tick(self, phase: OrbitalPhase, engine: OrbitGeometryEngine, log: AnimationLog) -> None:
        r = engine.position(phase.theta_rad)
        log.record_position(phase.theta_rad, r)
