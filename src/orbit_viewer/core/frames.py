from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def rot3(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (c * x - s * y, s * x + c * y, z)


def rot1(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (x, c * y - s * z, s * y + c * z)


def rotate_to_ecliptic_frame(x: float, y: float, z: float,
                             argp_rad: float, inc_rad: float, raan_rad: float) -> Vector3:
    """
    Orbital-plane point -> reference (ecliptic) frame.

    Rotation sequence: R3(argp), then R1(inc), then R3(raan).
    The order matters; swapping steps changes the orbit orientation.

    Args:
        x, y, z: Point in the orbital plane's own frame (z is normally 0)
        argp_rad: Argument of perihelion (radians)
        inc_rad: Inclination (radians)
        raan_rad: Longitude of the ascending node (radians)
    """
    # In-plane orientation
    v = rot3(argp_rad, (x, y, z))
    # Tilt out of the reference plane
    v = rot1(inc_rad, v)
    # Swing the line of nodes
    return rot3(raan_rad, v)


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def scale(v: Vector3, k: float) -> Vector3:
    return (v[0] * k, v[1] * k, v[2] * k)
