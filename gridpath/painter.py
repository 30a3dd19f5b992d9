"""
Grid painter: the editing operations a user performs on the board.
"""

from __future__ import annotations
import enum
import logging
from typing import Callable, List

from .grid import Grid
from .point import Point

logger = logging.getLogger(__name__)


class PlacingMode(enum.IntEnum):
    OBSTACLE = 0
    START = 1
    GOAL = 2


class GridPainter:
    """
    Applies cursor input to a grid and notifies listeners after each real change.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.mode = PlacingMode.OBSTACLE
        self._listeners: List[Callable[[Grid], None]] = []
        # Set by the first cell of a stroke: paint obstacles or clear them
        self._paint_only_obstacles = False
        self._paint_only_traversable = False

    def on_change(self, callback: Callable[[Grid], None]) -> None:
        """Register a callback invoked with the grid after every edit."""
        self._listeners.append(callback)

    def _changed(self) -> None:
        for callback in self._listeners:
            callback(self.grid)

    def set_mode(self, mode: PlacingMode) -> None:
        self.mode = PlacingMode(mode)

    def apply(self, point: Point) -> bool:
        """Apply the current placing mode at `point`. Returns True if the grid changed."""
        if not self.grid.in_bounds(point):
            return False
        if self.mode is PlacingMode.OBSTACLE:
            return self.toggle_obstacle(point)
        if self.mode is PlacingMode.START:
            return self.place_start(point)
        return self.place_goal(point)

    def end_stroke(self) -> None:
        """Mouse released: the next touched cell decides the stroke direction again."""
        self._paint_only_obstacles = False
        self._paint_only_traversable = False

    def toggle_obstacle(self, point: Point) -> bool:
        """
        Flip the traversability of the cell at `point`, unless it holds start or
        goal. While a stroke is in progress only flips in the stroke's direction,
        so dragging over mixed cells paints them all the same way.
        """
        if self.grid.is_start_or_goal(point):
            return False
        node = self.grid.node_at(point)
        if not self._paint_only_obstacles and not self._paint_only_traversable:
            self._paint_only_obstacles = node.traversable
            self._paint_only_traversable = not node.traversable
        if self._paint_only_obstacles and not node.traversable:
            return False
        if self._paint_only_traversable and node.traversable:
            return False
        node.traversable = not node.traversable
        logger.debug(
            "Cell %s is now %s", point, "empty" if node.traversable else "an obstacle"
        )
        self._changed()
        return True

    def place_start(self, point: Point) -> bool:
        if not self._can_place(point, "start"):
            return False
        self.grid.start = point
        self._changed()
        return True

    def place_goal(self, point: Point) -> bool:
        if not self._can_place(point, "goal"):
            return False
        self.grid.goal = point
        self._changed()
        return True

    def _can_place(self, point: Point, name: str) -> bool:
        if not self.grid.node_at(point).traversable:
            logger.info("Cannot place %s on obstacle at %s", name, point)
            return False
        # Placing on an existing endpoint would either overlap or change nothing
        return not self.grid.is_start_or_goal(point)

    def invert(self) -> None:
        """Flip every cell except start and goal."""
        for node in self.grid:
            if self.grid.is_start_or_goal(node.point):
                continue
            node.traversable = not node.traversable
        self._changed()
