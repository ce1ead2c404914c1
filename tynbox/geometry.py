"""Small vector types and interpolation helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def negate(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vec2(self.x / length, self.y / length)
        return Vec2(0.0, 0.0)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def lerp(self, other: Vec2, t: float) -> Vec2:
        return Vec2(lerp(self.x, other.x, t), lerp(self.y, other.y, t))

    def angle(self, other: Vec2) -> float:
        """Signed angle in radians from this vector to ``other``."""
        det = self.x * other.y - self.y * other.x
        return math.atan2(det, self.dot(other))

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vec2:
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return self.negate()


@dataclass(frozen=True)
class Vec3:
    """Immutable three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vec3:
        return self.scale(factor)

    __rmul__ = __mul__


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation: ``a + (b - a) * t``."""
    return a + (b - a) * t


def dlerp(a: float, b: float, decay: float, dt: float) -> float:
    """Frame-rate independent decay towards ``b``: ``b + (a - b) * exp(-decay * dt)``."""
    return b + (a - b) * math.exp(-decay * dt)


def get_barycentric_coordinates(v0: Vec3, v1: Vec3, v2: Vec3, p: Vec3) -> Vec3:
    """Barycentric weights (u, v, w) of ``p`` relative to triangle v0, v1, v2."""
    v0v1 = v1 - v0
    v0v2 = v2 - v0
    p_v0 = p - v0

    d00 = v0v1.dot(v0v1)
    d01 = v0v1.dot(v0v2)
    d11 = v0v2.dot(v0v2)
    d20 = p_v0.dot(v0v1)
    d21 = p_v0.dot(v0v2)

    denom = d00 * d11 - d01 * d01
    if denom == 0:
        raise ValueError("degenerate triangle")

    v = (d11 * d20 - d01 * d21) / denom
    w = (d00 * d21 - d01 * d20) / denom
    u = 1.0 - v - w
    return Vec3(u, v, w)


def barycentric_to_cartesian(bc: Vec3, v0: Vec3, v1: Vec3, v2: Vec3) -> Vec3:
    """Point given by barycentric weights ``bc`` over triangle v0, v1, v2."""
    return v0.scale(bc.x) + v1.scale(bc.y) + v2.scale(bc.z)


def clamp_barycentric(bc: Vec3) -> Vec3:
    """Clamp weights to [0, 1] and renormalise so they sum to one."""
    x, y, z = (min(max(c, 0.0), 1.0) for c in (bc.x, bc.y, bc.z))
    total = x + y + z
    if total == 0:
        raise ValueError("barycentric weights clamp to zero")
    return Vec3(x / total, y / total, z / total)