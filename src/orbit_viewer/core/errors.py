from __future__ import annotations


class OrbitError(Exception):
    """Base class for errors raised by the orbit geometry core."""


class DomainError(OrbitError, ValueError):
    """
    Orbital elements that do not describe a closed ellipse
    (e outside [0, 1), non-positive semi-major axis, non-finite values).
    """


class MissingElementsError(OrbitError, LookupError):
    """No active orbital elements, or a record lacking element fields."""
