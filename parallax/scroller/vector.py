"""Vector value types for layer and reference positions.

Positions are 3D (x, y, depth). Parallax only ever moves x and y; z is the
layer's depth and is read by adaptive scaling.
"""

import math
from dataclasses import dataclass

INF = math.inf


def sign(value):
    """Sign of a number, with sign(0) == 1.0 (matches the engine convention)."""
    return -1.0 if value < 0 else 1.0


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector used for per-axis settings (axes, wrap length, offsets)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def to_vector3(self, z=0.0):
        return Vector3(self.x, self.y, z)

    @classmethod
    def infinite(cls):
        return cls(INF, INF)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + getattr(other, "z", 0.0))

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - getattr(other, "z", 0.0))

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def to_vector2(self):
        return Vector2(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y, self.z)


def as_vector2(value):
    """Coerce a Vector2/Vector3/sequence into a Vector2 (extra components dropped)."""
    if isinstance(value, Vector2):
        return value
    if isinstance(value, Vector3):
        return value.to_vector2()
    x, y = list(value)[:2]
    return Vector2(float(x), float(y))


def as_vector3(value):
    """Coerce a Vector2/Vector3/sequence into a Vector3 (missing z becomes 0)."""
    if isinstance(value, Vector3):
        return value
    if isinstance(value, Vector2):
        return value.to_vector3()
    parts = [float(v) for v in value]
    while len(parts) < 3:
        parts.append(0.0)
    return Vector3(parts[0], parts[1], parts[2])
