"""Grid maze walked one cell at a time, with first-person and top-down cameras."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from tynbox.geometry import Vec2, Vec3, lerp

TAGS_LIMIT = 10
TAG_DISTANCE = 0.25
CAMERA_FOLLOW = 0.5
TOPDOWN_TARGET_FOLLOW = 0.55
FP_EYE_HEIGHT = 0.5
TOPDOWN_HEIGHT = 5.0
FREE_HEIGHT = 40.0
WALL = "#"

_KEYS = frozenset({"w", "s", "a", "d", "e"})


class ViewMode(enum.Enum):
    PAWN_FP = "fp"
    FREE = "free"
    PAWN_TOPDOWN = "topdown"


_COMMANDS = {
    "mode fp": ViewMode.PAWN_FP,
    "mode topdown": ViewMode.PAWN_TOPDOWN,
    "mode free": ViewMode.FREE,
}
_HELP = "aaa"


def _roundf(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def distlerp(a: float, b: float, t: float) -> float:
    """Interpolate towards ``b`` only when it is within about one unit of ``a``.

    The damping factor is ``1 / (|b - a| + 0.01)`` truncated to an integer
    and capped at one, so distant targets leave ``a`` unchanged.
    """
    damping = min(1, int(1.0 / (abs(b - a) + 0.01)))
    return a + (b - a) * t * damping


@dataclass(frozen=True)
class MazeMap:
    """Rectangular grid of wall and floor cells, indexed by (x, y)."""

    cells: tuple[tuple[bool, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence]) -> MazeMap:
        """Build a map from rows: in strings ``#`` marks a wall, otherwise truthy values do."""
        grid = []
        for row in rows:
            if isinstance(row, str):
                grid.append(tuple(ch == WALL for ch in row))
            else:
                grid.append(tuple(bool(cell) for cell in row))
        if not grid or not grid[0]:
            raise ValueError("maze map must have at least one cell")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("maze map rows must all have the same length")
        return cls(tuple(grid))

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def is_wall(self, x: int, y: int) -> bool:
        """True for wall cells; anything outside the map counts as wall."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return True
        return self.cells[y][x]


@dataclass
class MazePawn:
    """The walker: grid position, facing, step count and dropped tags."""

    map_position: Vec3 = field(default_factory=Vec3)
    input_direction: Vec2 = field(default_factory=Vec2)
    player_position: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    player_turn: float = 0.0
    camera_rot: float = 180.0
    steps: int = 0
    tags_count: int = 0
    tag_index: int = 0
    tag_positions: list[Vec2] = field(default_factory=lambda: [Vec2()] * TAGS_LIMIT)

    @property
    def tags(self) -> list[Vec2]:
        """Tags placed so far, at most ``TAGS_LIMIT`` of them."""
        return self.tag_positions[: min(self.tags_count, TAGS_LIMIT)]


class MazeGame:
    """Maze state and per-step logic driven by single key presses."""

    def __init__(self, maze: MazeMap, view_mode: ViewMode = ViewMode.PAWN_FP) -> None:
        self.maze = maze
        self.view_mode = view_mode
        self.pawn = MazePawn()
        self.camera_position = Vec3(0.0, 0.6, 0.0)
        self.camera_target = Vec3(0.0, 0.5, 1.0)
        self.camera_up = Vec3(0.0, 1.0, 0.0)
        self.camera_fovy = 90.0

    def command(self, text: str) -> str | None:
        """Handle a console command; return a reply text or ``None``."""
        mode = _COMMANDS.get(text)
        if mode is not None:
            self.view_mode = mode
            return None
        if text == "?":
            return _HELP
        return None

    def step(self, key: str | None = None) -> None:
        """Advance one frame with ``key`` (w, s, a, d, e) pressed, or none."""
        if key is not None:
            key = key.lower()
            if key not in _KEYS:
                raise ValueError(f"unknown key {key!r}")
        if self.view_mode is ViewMode.FREE:
            self.free_camera()
        else:
            self._step_pawn(key)

    def place_tag(self) -> Vec2:
        """Drop a tag just ahead of the pawn, overwriting the oldest past the limit."""
        pawn = self.pawn
        index = pawn.tag_index % TAGS_LIMIT
        pawn.tag_index += 1
        position = Vec2(
            pawn.player_position.x + math.sin(pawn.player_turn) * TAG_DISTANCE,
            pawn.player_position.y + math.cos(pawn.player_turn) * TAG_DISTANCE,
        )
        pawn.tag_positions[index] = position
        pawn.tags_count = min(pawn.tags_count + 1, TAGS_LIMIT)
        return position

    def free_camera(self) -> None:
        """Place the camera high above the middle of the map, looking down."""
        centre = self.maze.width / 2.0
        self.camera_position = Vec3(centre, FREE_HEIGHT, centre)
        self.camera_target = Vec3(centre + 0.01, FREE_HEIGHT - 1.0, centre)

    def _step_pawn(self, key: str | None) -> None:
        pawn = self.pawn
        forward, turn = 0.0, 0.0
        if key == "w":
            forward = 1.0
        elif key == "s":
            forward = -1.0
        elif key == "a":
            turn = 1.0
        elif key == "d":
            turn = -1.0
        elif key == "e":
            self.place_tag()
        pawn.input_direction = Vec2(forward, turn)

        if forward:
            pawn.steps += 1

        pawn.player_turn += math.pi * 0.5 * turn

        if forward:
            newx = _roundf(pawn.player_position.x + math.sin(pawn.player_turn) * forward)
            newy = _roundf(pawn.player_position.y + math.cos(pawn.player_turn) * forward)
            if not self.maze.is_wall(int(newx), int(newy)):
                pawn.player_position = Vec2(newx, newy)

        pawn.camera_rot = lerp(pawn.camera_rot, pawn.player_turn, CAMERA_FOLLOW)
        self._follow_pawn()

    def _follow_pawn(self) -> None:
        pawn = self.pawn
        player = pawn.player_position
        rot = pawn.camera_rot
        if self.view_mode is ViewMode.PAWN_FP:
            x = lerp(self.camera_position.x, player.x, CAMERA_FOLLOW)
            z = lerp(self.camera_position.z, player.y, CAMERA_FOLLOW)
            self.camera_position = Vec3(x, FP_EYE_HEIGHT, z)
            self.camera_target = Vec3(x + math.sin(rot), FP_EYE_HEIGHT, z + math.cos(rot))
        elif self.view_mode is ViewMode.PAWN_TOPDOWN:
            behind_x = player.x - math.sin(rot)
            behind_y = player.y - math.cos(rot)
            self.camera_position = Vec3(
                lerp(self.camera_position.x, behind_x, CAMERA_FOLLOW),
                TOPDOWN_HEIGHT,
                lerp(self.camera_position.z, behind_y, CAMERA_FOLLOW),
            )
            self.camera_target = Vec3(
                lerp(self.camera_target.x, player.x, TOPDOWN_TARGET_FOLLOW),
                FP_EYE_HEIGHT,
                lerp(self.camera_target.z, player.y, TOPDOWN_TARGET_FOLLOW),
            )