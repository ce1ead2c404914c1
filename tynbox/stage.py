"""Stages, their flags, and the frame loop that drives them."""

from __future__ import annotations

import enum
from typing import Callable

VIEWPORT_WIDTH = 512
VIEWPORT_HEIGHT = 512
TARGET_FPS = 60
APP_STAGES_TOTAL = 8
RESIZE_THRESHOLD = 0.3


class StageFlag(enum.IntFlag):
    """State flags a stage carries and returns from each step."""

    DEFAULT = 1 << 0
    DISABLEDDRAW = 1 << 1
    DISABLEDSTEP = 1 << 2
    DISABLED = DISABLEDDRAW | DISABLEDSTEP
    BLOCKSTEP = 1 << 3
    BLOCKDRAW = 1 << 4


class CmdFlag(enum.IntFlag):
    """Flags attached to console commands."""

    DEFAULT = 1 << 0
    BROADCAST = 1 << 1


class Stage:
    """A scene driven frame by frame; subclasses override the hooks."""

    def __init__(self, flags: StageFlag = StageFlag(0)) -> None:
        self.flags = flags
        self.disposed = False

    def dispose(self) -> None:
        """Release the stage's resources."""
        self.disposed = True

    def step(self, flags: StageFlag) -> StageFlag:
        """Advance one frame and return the resulting flags."""
        return flags

    def draw(self) -> None:
        """Render the current frame."""


class ResizeThrottle:
    """Applies window resizes only once the requested size has settled.

    The first resize is applied at once; later ones wait until the size
    has stayed unchanged for longer than ``threshold`` seconds.
    """

    def __init__(
        self,
        width: int = VIEWPORT_WIDTH,
        height: int = VIEWPORT_HEIGHT,
        threshold: float = RESIZE_THRESHOLD,
    ) -> None:
        self.viewport = (width, height)
        self.requested = (width, height)
        self.threshold = threshold
        self.timestamp = -1.0

    def update(self, width: int, height: int, now: float) -> tuple[int, int] | None:
        """Report the current window size; return the new viewport if it changes."""
        if self.requested != (width, height):
            self.requested = (width, height)
            if self.timestamp > 0:
                self.timestamp = now
                return None

        resized = self.requested != self.viewport
        if resized and now - self.timestamp > self.threshold:
            self.timestamp = now
            self.viewport = (width, height)
            return self.viewport
        return None


def run_loop(stage: Stage, should_close: Callable[[], bool]) -> int:
    """Step and draw ``stage`` until closed or disabled; return frames drawn.

    The stage is disposed when the loop ends.
    """
    frames = 0
    try:
        while not should_close():
            flags = stage.step(stage.flags)
            if flags & StageFlag.DISABLED:
                break
            stage.draw()
            frames += 1
    finally:
        stage.dispose()
    return frames