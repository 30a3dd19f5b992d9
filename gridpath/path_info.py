"""
Path result classification: why a path could or could not be shown.
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field
from typing import List

from .config import (
    INFO_NO_GOAL_TEXT,
    INFO_NO_START_NO_GOAL_TEXT,
    INFO_NO_START_TEXT,
    INFO_NO_VALID_PATH_TEXT,
    INFO_VALID_PATH_TEXT,
)
from .grid import Grid
from .pathfinding import Pathfinder
from .point import Point

logger = logging.getLogger(__name__)


class PathInfo(enum.Enum):
    VALID_PATH = "valid_path"
    NO_START_NO_GOAL = "no_start_no_goal"
    NO_START = "no_start"
    NO_GOAL = "no_goal"
    NO_VALID_PATH = "no_valid_path"


_MESSAGES = {
    PathInfo.NO_START_NO_GOAL: INFO_NO_START_NO_GOAL_TEXT,
    PathInfo.NO_START: INFO_NO_START_TEXT,
    PathInfo.NO_GOAL: INFO_NO_GOAL_TEXT,
    PathInfo.NO_VALID_PATH: INFO_NO_VALID_PATH_TEXT,
    PathInfo.VALID_PATH: INFO_VALID_PATH_TEXT,
}


@dataclass
class PathResult:
    info: PathInfo
    start: Point = Point.UNSET
    # Waypoints from the cell next to start through goal
    path: List[Point] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.info is PathInfo.VALID_PATH

    @property
    def length(self) -> int:
        return len(self.path)

    def positions(self) -> List[Point]:
        """Start followed by every waypoint; empty unless a path was found."""
        if not self.found:
            return []
        return [self.start] + self.path

    def message(self) -> str:
        return message(self.info, self.length)


def message(info: PathInfo, length: int = 0) -> str:
    """UI text for a path outcome."""
    return _MESSAGES[info].format(length=length)


def solve(pathfinder: Pathfinder, grid: Grid) -> PathResult:
    """
    Classify the grid's start/goal placement and, when both are placed,
    search for the shortest path between them.
    """
    start, goal = grid.start, grid.goal
    if start.is_unset() and goal.is_unset():
        return PathResult(PathInfo.NO_START_NO_GOAL)
    if start.is_unset():
        return PathResult(PathInfo.NO_START)
    if goal.is_unset():
        return PathResult(PathInfo.NO_GOAL, start=start)
    path = pathfinder.find_path(grid, start, goal)
    if path is None:
        logger.debug("Path from %s to %s is obstructed", start, goal)
        return PathResult(PathInfo.NO_VALID_PATH, start=start)
    return PathResult(PathInfo.VALID_PATH, start=start, path=path)
