from __future__ import annotations
import math
from typing import List, Sequence

from .config import (
    WALKER_MIN_DISTANCE,
    WALKER_MIN_TILES_TO_RUN,
    WALKER_MOVE_SPEED,
    WALKER_START_DELAY,
    WALKER_WALK_FACTOR,
)
from .point import Point


class Walker:
    """Character that follows the current path from start to goal."""

    def __init__(
        self,
        move_speed: float = WALKER_MOVE_SPEED,
        start_delay: float = WALKER_START_DELAY,
        min_tiles_to_run: int = WALKER_MIN_TILES_TO_RUN,
    ) -> None:
        """
        move_speed: running speed in tiles per second.
        start_delay: seconds to stand still after spawning.
        min_tiles_to_run: paths with fewer positions than this are walked slowly.
        """
        self.move_speed = move_speed
        self.start_delay = start_delay
        self.min_tiles_to_run = min_tiles_to_run
        self.x = 0.0
        self.y = 0.0
        # Facing direction in radians
        self.angle = 0.0
        self.active = False
        self.moving = False
        self._positions: List[Point] = []
        self._next_index = 0
        self._delay = 0.0
        self._speed = 0.0

    def set_path(self, positions: Sequence[Point]) -> None:
        """Positions must include the start cell first."""
        self._positions = list(positions)

    @property
    def has_path(self) -> bool:
        return len(self._positions) > 1

    @property
    def running(self) -> bool:
        """True if the walker moves at full speed for the current path."""
        return len(self._positions) >= self.min_tiles_to_run

    def spawn(self) -> bool:
        """Place the walker on the first path position. Returns False if there is no path."""
        if not self.has_path:
            return False
        first, second = self._positions[0], self._positions[1]
        self.x, self.y = float(first.x), float(first.y)
        self.angle = math.atan2(second.y - first.y, second.x - first.x)
        self._next_index = 1
        self._delay = self.start_delay
        self._speed = self.move_speed if self.running else self.move_speed * WALKER_WALK_FACTOR
        self.active = True
        self.moving = self._delay <= 0
        return True

    def stop(self) -> None:
        self.active = False
        self.moving = False

    def update(self, dt: float) -> None:
        """Advance toward the next waypoint; stops when the goal is reached."""
        if not self.active:
            return
        if self._delay > 0:
            self._delay -= dt
            if self._delay <= 0:
                self.moving = True
            return
        if not self.moving:
            return
        step = self._speed * dt
        while step > 0 and self.moving:
            target = self._positions[self._next_index]
            dx = target.x - self.x
            dy = target.y - self.y
            dist = math.hypot(dx, dy)
            if dist > 1e-9:
                self.angle = math.atan2(dy, dx)
            if dist <= step:
                self.x, self.y = float(target.x), float(target.y)
                step -= dist
            else:
                self.x += dx / dist * step
                self.y += dy / dist * step
                step = 0.0
            if math.hypot(target.x - self.x, target.y - self.y) <= WALKER_MIN_DISTANCE:
                self.x, self.y = float(target.x), float(target.y)
                self._next_index += 1
                if self._next_index >= len(self._positions):
                    # Reached the goal
                    self.moving = False

    @property
    def finished(self) -> bool:
        return self.active and not self.moving and self._next_index >= len(self._positions)

    def __repr__(self) -> str:
        return f"<Walker x={self.x:.2f} y={self.y:.2f} active={self.active}>"
