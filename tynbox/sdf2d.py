"""Packing of 2D signed-distance shapes into a pixel dataset."""

from __future__ import annotations

import enum
import math

from tynbox.geometry import Vec2

DATASET_SIZE = 2048
DATASET_ROWS = 2
ENTITY_HEADER = (4, 0, 0, 0)
ENTITY_PIXELS = 5

Color = tuple[int, int, int, int]
BLANK: Color = (0, 0, 0, 0)


class ShapeType(enum.IntEnum):
    CIRCLE = 0
    BOX = 1


def pos_to_color(x: int, y: int) -> Color:
    """Pack two 16-bit values into the four byte channels of a colour."""
    x, y = int(x), int(y)
    return (x & 0xFF, (x >> 8) & 0xFF, y & 0xFF, (y >> 8) & 0xFF)


def color_to_pos(color: Color) -> Vec2:
    """Unpack a colour written by :func:`pos_to_color`."""
    r, g, b, a = color
    return Vec2(float(r | (g << 8)), float(b | (a << 8)))


def index_to_pos(index: int, xdimension: int) -> Vec2:
    """Pixel coordinates of a linear index in rows of ``xdimension``."""
    return Vec2(float(index % xdimension), float(math.floor(index / xdimension)))


class Dataset:
    """Pixel buffer written with additive, saturating blending."""

    def __init__(self, width: int = DATASET_SIZE, height: int = DATASET_ROWS) -> None:
        self.width = width
        self.height = height
        self._pixels: dict[tuple[int, int], Color] = {}

    def clear(self) -> None:
        """Reset every pixel to blank."""
        self._pixels.clear()

    def pixel(self, x: int, y: int) -> Color:
        """Colour stored at pixel (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self._pixels.get((x, y), BLANK)

    def _blend(self, index: int, color: Color) -> None:
        pos = index_to_pos(index, self.width)
        x, y = int(pos.x), int(pos.y)
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        current = self._pixels.get((x, y), BLANK)
        self._pixels[(x, y)] = tuple(min(c + d, 255) for c, d in zip(current, color))

    def write_entity(
        self,
        shift: int,
        shape: ShapeType,
        position: Vec2,
        size: Vec2,
        rotation: int,
    ) -> int:
        """Write one shape starting at index ``shift``; return the next free index."""
        self._blend(shift, ENTITY_HEADER)
        self._blend(shift + 1, (int(shape), 0, 0, 0))
        self._blend(shift + 2, pos_to_color(int(position.x), int(position.y)))
        self._blend(shift + 3, pos_to_color(int(size.x), int(size.y)))
        self._blend(shift + 4, pos_to_color(int(rotation), 0))
        return shift + ENTITY_PIXELS