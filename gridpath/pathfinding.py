"""
Pathfinding: grid-based A* over persistent nodes using a slot-indexed heap.

Movement is restricted to four directions with unit step cost, so the
Manhattan distance is both admissible and consistent as the heuristic.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Set

from .errors import PreconditionError
from .grid import Grid
from .heap import Heap
from .node import Node
from .point import Point

logger = logging.getLogger(__name__)


def heuristic(a: Point, b: Point) -> int:
    """Manhattan distance heuristic for grid."""
    return a.manhattan(b)


class Pathfinder:
    """
    A* search bound to one grid size. The open set heap and the closed set are
    allocated once and reused by every call to find_path.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise PreconditionError(
                f"Pathfinder dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        # Every cell could be queued at once, so the heap never grows
        self._open_set: Heap[Node] = Heap(width * height)
        self._closed_set: Set[Node] = set()
        # Number of nodes expanded by the last search
        self.expanded = 0

    def find_path(self, grid: Grid, start: Point, goal: Point) -> Optional[List[Point]]:
        """
        Find the shortest path on `grid` from `start` to `goal`.
        Returns the waypoints after start up to and including goal (an empty
        list when start == goal), or None if the goal cannot be reached.
        """
        start, goal = Point(*start), Point(*goal)
        self._check_preconditions(grid, start, goal)
        open_set = self._open_set
        closed_set = self._closed_set
        open_set.clear()
        closed_set.clear()
        # Scratch state from earlier searches must not leak into this one
        for node in grid:
            node.reset_search_state()
        self.expanded = 0

        start_node = grid.node_at(start)
        goal_node = grid.node_at(goal)
        start_node.h_cost = heuristic(start, goal)
        open_set.push(start_node)

        while open_set:
            current = open_set.pop()
            closed_set.add(current)
            self.expanded += 1

            if current is goal_node:
                path = self._retrace_path(start_node, goal_node)
                logger.debug(
                    "Path %s -> %s found: %d steps, %d nodes expanded",
                    start,
                    goal,
                    len(path),
                    self.expanded,
                )
                return path

            for neighbour in grid.neighbours(current):
                if not neighbour.traversable or neighbour in closed_set:
                    continue
                tentative_g = current.g_cost + 1
                queued = neighbour in open_set
                if tentative_g < neighbour.g_cost or not queued:
                    neighbour.g_cost = tentative_g
                    neighbour.h_cost = heuristic(neighbour.point, goal)
                    neighbour.parent = current
                    if queued:
                        open_set.update(neighbour)
                    else:
                        open_set.push(neighbour)

        logger.debug(
            "No path %s -> %s after %d nodes expanded", start, goal, self.expanded
        )
        return None

    def _check_preconditions(self, grid: Grid, start: Point, goal: Point) -> None:
        if grid is None:
            raise PreconditionError("find_path needs a grid")
        if grid.width != self.width or grid.height != self.height:
            raise PreconditionError(
                f"Grid is {grid.width}x{grid.height} but pathfinder was built "
                f"for {self.width}x{self.height}"
            )
        for name, point in (("start", start), ("goal", goal)):
            if not grid.in_bounds(point):
                raise PreconditionError(f"{name} {point} is outside the grid")

    @staticmethod
    def _retrace_path(start_node: Node, goal_node: Node) -> List[Point]:
        """Follow parent links back from goal; the start cell is left out."""
        path = []
        current = goal_node
        while current is not start_node:
            path.append(current.point)
            current = current.parent
        path.reverse()
        return path


def find_path(start: Point, goal: Point, grid: Grid) -> Optional[List[Point]]:
    """One-off search helper that builds a throwaway Pathfinder for `grid`."""
    return Pathfinder(grid.width, grid.height).find_path(grid, start, goal)
