# Orbit geometry: Keplerian elements -> focus-centred ellipse in 3D

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, NamedTuple, Optional

from orbit_viewer.core.constants import DEFAULT_SAMPLE_COUNT, TWO_PI
from orbit_viewer.core.errors import DomainError, MissingElementsError
from orbit_viewer.core.frames import Vector3, rotate_to_ecliptic_frame

# Column names used by the near-Earth comet element table
RECORD_FIELDS = {
    "e": "e",
    "i_deg": "i_deg",
    "w_deg": "w_deg",
    "node_deg": "node_deg",
    "q1_au": "q_au_1",
    "q2_au": "q_au_2",
}


class Orientation(NamedTuple):
    """Orbit orientation angles in radians."""
    argp_rad: float
    inc_rad: float
    raan_rad: float


IDENTITY_ORIENTATION = Orientation(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class OrbitalElements:
    """
    Orbital elements of a closed heliocentric orbit, as published in
    element tables.

    Units:
        e: eccentricity (0<=e<1)
        i_deg: inclination in degrees
        w_deg: argument of perihelion in degrees
        node_deg: longitude of ascending node in degrees
        q1_au: perihelion distance in AU
        q2_au: aphelion distance in AU
    """
    e: float
    i_deg: float
    w_deg: float
    node_deg: float
    q1_au: float
    q2_au: float

    def __post_init__(self):
        for name in ("e", "i_deg", "w_deg", "node_deg", "q1_au", "q2_au"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise DomainError(f"{name} must be finite. Got: {value}")
        if not (0.0 <= self.e < 1.0):
            raise DomainError(f"Eccentricity must be in range [0, 1) for a closed orbit. Got: {self.e}")
        if self.q1_au < 0 or self.q2_au < 0:
            raise DomainError(
                f"Perihelion and aphelion distances must be non-negative. Got: q1={self.q1_au}, q2={self.q2_au}"
            )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "OrbitalElements":
        """
        Build elements from one row of the comet element table.
        Values may be numbers or numeric strings.
        """
        missing = [col for col in RECORD_FIELDS.values() if record.get(col) in (None, "")]
        if missing:
            raise MissingElementsError(f"Record is missing orbital element field(s): {', '.join(missing)}")

        values = {}
        for attr, col in RECORD_FIELDS.items():
            try:
                values[attr] = float(record[col])
            except (TypeError, ValueError) as exc:
                raise DomainError(f"Field '{col}' is not numeric. Got: {record[col]!r}") from exc
        return cls(**values)

    def orientation(self) -> Orientation:
        return Orientation(
            math.radians(self.w_deg),
            math.radians(self.i_deg),
            math.radians(self.node_deg),
        )


@dataclass(frozen=True)
class EllipseShape:
    """
    Ellipse geometry derived from elements.

    a: semi-major axis, b: semi-minor axis, c: centre-to-focus offset (same unit as q1/q2)
    """
    a: float
    b: float
    c: float
    e: float

    @property
    def perihelion(self) -> float:
        return self.a - self.c

    @property
    def aphelion(self) -> float:
        return self.a + self.c


def derive_shape(elements: OrbitalElements) -> EllipseShape:
    """
    a = (q1 + q2) / 2, b = a * sqrt(1 - e^2), c = a * e.

    Raises DomainError rather than returning degenerate (NaN or zero-width) geometry.
    """
    e = elements.e
    if not (0.0 <= e < 1.0):
        raise DomainError(f"Eccentricity must be in range [0, 1) for a closed orbit. Got: {e}")

    a = (elements.q1_au + elements.q2_au) / 2.0
    if not a > 0:
        raise DomainError(f"Semi-major axis must be positive. Got: {a}")

    b = a * math.sqrt(1.0 - e * e)
    if not (math.isfinite(b) and b > 0):
        raise DomainError(f"Semi-minor axis must be positive and finite. Got: {b}")

    return EllipseShape(a=a, b=b, c=a * e, e=e)


def in_plane_position(shape: EllipseShape, theta_rad: float) -> Vector3:
    # Ellipse centre sits at (-c, 0) so the occupied focus is the origin
    return (
        shape.a * math.cos(theta_rad) - shape.c,
        shape.b * math.sin(theta_rad),
        0.0,
    )


def position_at_phase(shape: EllipseShape, theta_rad: float,
                      argp_rad: float, inc_rad: float, raan_rad: float) -> Vector3:
    """
    Body position at phase theta, focus at the origin.
    theta=0 is perihelion, at distance a(1-e).
    """
    x, y, z = in_plane_position(shape, theta_rad)
    return rotate_to_ecliptic_frame(x, y, z, argp_rad, inc_rad, raan_rad)


def iter_orbit_curve(shape: EllipseShape, argp_rad: float, inc_rad: float, raan_rad: float,
                     sample_count: int = DEFAULT_SAMPLE_COUNT) -> Iterator[Vector3]:
    """
    Lazily yield sample_count points at theta_k = 2*pi*k/(sample_count-1).
    The first and last points coincide, closing the loop.
    """
    if sample_count < 2:
        raise ValueError(f"Sample count must be at least 2. Got: {sample_count}")
    last = sample_count - 1
    for k in range(sample_count):
        theta = TWO_PI * k / last
        yield position_at_phase(shape, theta, argp_rad, inc_rad, raan_rad)


def build_orbit_curve(shape: EllipseShape, argp_rad: float, inc_rad: float, raan_rad: float,
                      sample_count: int = DEFAULT_SAMPLE_COUNT) -> List[Vector3]:
    return list(iter_orbit_curve(shape, argp_rad, inc_rad, raan_rad, sample_count))


def focus_marker_position(shape: EllipseShape, orientation: Optional[Orientation] = None) -> Vector3:
    """
    Central-body marker at (-c, 0, 0) in the orbital plane.

    With no orientation the point is left unrotated, matching the original
    viewer. Passing the orbit's orientation keeps it consistent with the curve.
    """
    if orientation is None:
        return (-shape.c, 0.0, 0.0)
    return rotate_to_ecliptic_frame(-shape.c, 0.0, 0.0, *orientation)


def ellipse_residual(shape: EllipseShape, point: Vector3) -> float:
    """((x+c)/a)^2 + (y/b)^2 - 1 for an unrotated in-plane point."""
    x, y, _z = point
    return ((x + shape.c) / shape.a) ** 2 + (y / shape.b) ** 2 - 1.0
