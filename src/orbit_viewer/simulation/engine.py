from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

from orbit_viewer.core.config import EngineConfig
from orbit_viewer.core.errors import MissingElementsError
from orbit_viewer.core.frames import Vector3
from orbit_viewer.physics.orbit import (
    EllipseShape,
    OrbitalElements,
    Orientation,
    build_orbit_curve,
    derive_shape,
    focus_marker_position,
    position_at_phase,
)
from orbit_viewer.physics.phase import OrbitalPhase
from orbit_viewer.simulation.catalog import BodyCatalog

logger = logging.getLogger(__name__)

CurveKey = Tuple[EllipseShape, Orientation, int]


class OrbitGeometryEngine:
    """
    Geometry for the active orbit.

    Holds the selected elements, the derived ellipse shape, the cached
    orbit curve and the current phase. All math is delegated to the pure
    functions in physics.orbit; this class only owns lifetimes.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self._elements: Optional[OrbitalElements] = None
        self._shape: Optional[EllipseShape] = None
        self._orientation: Optional[Orientation] = None
        self._phase = OrbitalPhase()
        self._curve_key: Optional[CurveKey] = None
        self._curve: Optional[List[Vector3]] = None

        if self.config.rotate_focus_marker:
            logger.debug("Focus marker will be rotated with the orbit")
        else:
            logger.debug("Focus marker left unrotated at (-c, 0, 0)")

    # --- selection lifecycle ---

    def select(self, elements: OrbitalElements) -> EllipseShape:
        """
        Activate an orbit. The shape is derived immediately so a DomainError
        surfaces before any curve is built. Phase restarts at zero.
        """
        shape = derive_shape(elements)
        self._elements = elements
        self._shape = shape
        self._orientation = elements.orientation()
        self._phase = OrbitalPhase()
        logger.debug("Selected orbit a=%.6f b=%.6f c=%.6f; phase reset", shape.a, shape.b, shape.c)
        return shape

    def deselect(self) -> None:
        self._elements = None
        self._shape = None
        self._orientation = None
        self._phase = OrbitalPhase()
        self._curve_key = None
        self._curve = None

    @property
    def has_selection(self) -> bool:
        return self._elements is not None

    @property
    def elements(self) -> OrbitalElements:
        self._require_selection()
        return self._elements

    @property
    def shape(self) -> EllipseShape:
        self._require_selection()
        return self._shape

    @property
    def orientation(self) -> Orientation:
        self._require_selection()
        return self._orientation

    @property
    def phase(self) -> OrbitalPhase:
        return self._phase

    # --- geometry ---

    def curve(self) -> List[Vector3]:
        """
        Closed orbit curve. Rebuilt only when the shape, orientation or
        sample count change.
        """
        self._require_selection()
        key: CurveKey = (self._shape, self._orientation, self.config.sample_count)
        if self._curve is None or key != self._curve_key:
            logger.debug("Orbit curve cache miss; building %d samples", self.config.sample_count)
            self._curve = build_orbit_curve(self._shape, *self._orientation,
                                            sample_count=self.config.sample_count)
            self._curve_key = key
        return list(self._curve)

    def focus_marker(self) -> Vector3:
        self._require_selection()
        if self.config.rotate_focus_marker:
            return focus_marker_position(self._shape, self._orientation)
        return focus_marker_position(self._shape)

    def position(self, theta_rad: float) -> Vector3:
        self._require_selection()
        return position_at_phase(self._shape, theta_rad, *self._orientation)

    def tick(self) -> Tuple[Vector3, OrbitalPhase]:
        """
        Sample the body at the current phase, then advance the phase one step.
        Returns (position, new phase).
        """
        r = self.position(self._phase.theta_rad)
        self._phase = self._phase.advanced(self.config.phase_step_rad)
        return r, self._phase

    def _require_selection(self) -> None:
        if self._elements is None:
            raise MissingElementsError("No orbital elements selected.")


class System(Protocol):
    """
    Plugin interface for animation systems.
    Each system runs per tick and can write to the log.
    """
    name: str

    def on_tick(self, phase: OrbitalPhase, engine: OrbitGeometryEngine, log: "AnimationLog") -> None:
        ...


@dataclass
class AnimationLog:
    """
    Outputs from an animation run for one orbit.
    Keep it simple and serializable.
    """
    body_id: Optional[str] = None
    curve_au: List[Vector3] = field(default_factory=list)
    focus_marker_au: Optional[Vector3] = None

    # (theta, r) per tick
    positions_au: List[Tuple[float, Vector3]] = field(default_factory=list)

    events: List[Dict[str, Any]] = field(default_factory=list)

    def record_position(self, theta_rad: float, r: Vector3) -> None:
        self.positions_au.append((theta_rad, r))

    @property
    def is_empty(self) -> bool:
        return not self.curve_au and not self.positions_au


@dataclass
class AnimationDriver:
    """
    Fixed-step animation loop.
    Deterministic replay: same elements + config + tick count => same output.
    """
    config: EngineConfig = field(default_factory=EngineConfig)
    systems: List[System] = field(default_factory=list)

    def run(self, catalog: BodyCatalog, n_ticks: int) -> AnimationLog:
        if n_ticks < 0:
            raise ValueError("n_ticks must be non-negative.")

        log = AnimationLog()
        body = catalog.selected
        if body is None:
            # Nothing selected is a valid state: render nothing
            logger.warning("No body selected in catalog %s; nothing to animate", catalog.name)
            log.events.append({"type": "no_selection"})
            return log

        engine = OrbitGeometryEngine(self.config)
        engine.select(body.elements)

        log.body_id = body.body_id
        log.curve_au = engine.curve()
        log.focus_marker_au = engine.focus_marker()

        for _ in range(n_ticks):
            for sys in self.systems:
                sys.on_tick(engine.phase, engine, log)
            engine.tick()

        logger.info("Animated %s for %d ticks", body.body_id, n_ticks)
        return log
