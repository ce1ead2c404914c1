"""Axis-aligned bounding boxes and a push-out collision resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from tynbox.geometry import Vec2


def _half(value: float) -> int:
    """Half of an integer size, truncated towards zero."""
    return int(int(value) / 2)


@dataclass
class AABB:
    """Axis-aligned box given by its lower and upper corners."""

    lower: Vec2 = field(default_factory=Vec2)
    upper: Vec2 = field(default_factory=Vec2)

    @classmethod
    def from_center_size(cls, x: float, y: float, w: float, h: float) -> AABB:
        """Box of integer size ``w`` x ``h`` centred on integer point (x, y)."""
        box = cls()
        box.set(x, y, w, h)
        return box

    def set(self, x: float, y: float, w: float, h: float) -> None:
        """Move and resize the box to centre (x, y) and size ``w`` x ``h``."""
        x, y = int(x), int(y)
        hw, hh = _half(w), _half(h)
        self.lower = Vec2(float(x - hw), float(y - hh))
        self.upper = Vec2(float(x + hw), float(y + hh))

    def set_position(self, x: float, y: float) -> None:
        """Re-centre the box on (x, y), keeping its integer size."""
        width = int(self.upper.x - self.lower.x)
        height = int(self.upper.y - self.lower.y)
        self.set(x, y, width, height)

    def extend_by_size(self, w: float, h: float) -> AABB:
        """New box grown by half of ``w`` and ``h`` on every side."""
        hw, hh = _half(w), _half(h)
        return AABB(
            Vec2(self.lower.x - hw, self.lower.y - hh),
            Vec2(self.upper.x + hw, self.upper.y + hh),
        )

    def center(self) -> Vec2:
        return Vec2(
            0.5 * (self.lower.x + self.upper.x),
            0.5 * (self.lower.y + self.upper.y),
        )

    def extents(self) -> Vec2:
        """Half-widths of the box."""
        return Vec2(
            0.5 * (self.upper.x - self.lower.x),
            0.5 * (self.upper.y - self.lower.y),
        )

    def overlaps(self, other: AABB) -> bool:
        """True if the boxes intersect; touching edges count as overlap."""
        if other.lower.x - self.upper.x > 0 or other.lower.y - self.upper.y > 0:
            return False
        if self.lower.x - other.upper.x > 0 or self.lower.y - other.upper.y > 0:
            return False
        return True

    def union(self, other: AABB) -> AABB:
        """Smallest box containing both boxes."""
        return AABB(
            Vec2(min(self.lower.x, other.lower.x), min(self.lower.y, other.lower.y)),
            Vec2(max(self.upper.x, other.upper.x), max(self.upper.y, other.upper.y)),
        )


def simple_aabb_collision(
    collider: AABB, colliders: Iterable[AABB], extend_margin: int = 0
) -> Vec2:
    """Centre to which ``collider`` must move to leave every overlapping box.

    Each overlap is resolved along the axis of least penetration (both axes
    when the penetrations are equal), in the order the boxes are given.
    ``extend_margin`` is accepted for symmetry with swept resolution and does
    not affect the result.
    """
    extents = collider.extents()
    pos_x, pos_y = collider.center().x, collider.center().y

    for box in colliders:
        d1x = box.lower.x - (pos_x + extents.x)
        d1y = box.lower.y - (pos_y + extents.y)
        d2x = (pos_x - extents.x) - box.upper.x
        d2y = (pos_y - extents.y) - box.upper.y

        if d1x > 0 or d1y > 0:
            continue
        if d2x > 0 or d2y > 0:
            continue

        x = int(-max(d1x, d2x))
        y = int(-max(d1y, d2y))
        normal_y = 1 if d1y > d2y else -1
        normal_x = 1 if d1x > d2x else -1

        if x < y:
            pos_x -= x * normal_x
        elif x > y:
            pos_y -= y * normal_y
        else:
            pos_x -= x * normal_x
            pos_y -= y * normal_y

    return Vec2(pos_x, pos_y)