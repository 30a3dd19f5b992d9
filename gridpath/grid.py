"""
Grid: fixed-size 2D array of nodes plus the current start and goal points.
"""

from __future__ import annotations
import json
import logging
from typing import Iterator, List, Sequence

import numpy as np

from .config import TILE_EMPTY, TILE_OBSTACLE
from .errors import LayoutError, PreconditionError
from .node import Node
from .point import Point

logger = logging.getLogger(__name__)

# Neighbour order matters for tie-breaking: left, right, down, up
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """Owns every node of the board. Dimensions never change after construction."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise PreconditionError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        # Row-major storage: nodes[y][x]
        self.nodes: List[List[Node]] = [
            [Node(True, x, y) for x in range(width)] for y in range(height)
        ]
        self.start = Point.UNSET
        self.goal = Point.UNSET

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from row-major tile values (0 = empty, 1 = obstacle).
        rows[y][x] addresses the tile at (x, y).
        """
        if not rows:
            raise LayoutError("Layout map must have at least one row and column")
        for y, row in enumerate(rows):
            if not isinstance(row, (list, tuple)):
                raise LayoutError(f"Layout row {y} is not a list: {row!r}")
        width = len(rows[0])
        if width == 0:
            raise LayoutError("Layout map must have at least one row and column")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise LayoutError(
                    f"Layout row {y} has {len(row)} tiles, expected {width}"
                )
            for x, tile in enumerate(row):
                if tile not in (TILE_EMPTY, TILE_OBSTACLE):
                    raise LayoutError(f"Unknown tile value {tile!r} at ({x}, {y})")
                grid.nodes[y][x].traversable = tile == TILE_EMPTY
        return grid

    @classmethod
    def from_mask(cls, mask: np.ndarray) -> Grid:
        """Build a grid from a boolean traversability array indexed [y, x]."""
        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 2:
            raise LayoutError(f"Traversability mask must be 2D, got shape {mask.shape}")
        height, width = mask.shape
        grid = cls(width, height)
        for y in range(height):
            for x in range(width):
                grid.nodes[y][x].traversable = bool(mask[y, x])
        return grid

    @classmethod
    def load(cls, path: str) -> Grid:
        """
        Load a JSON layout file of the form
        {"map": [[0, 1, ...], ...], "start": [x, y], "goal": [x, y]}.
        start and goal are optional.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read layout %s: %s", path, e)
            raise LayoutError(f"Failed to load layout from {path}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("map"), list):
            raise LayoutError(f"Layout {path} has no 'map' list")
        grid = cls.from_rows(data["map"])
        grid.start = grid._parse_endpoint(data.get("start"), "start")
        grid.goal = grid._parse_endpoint(data.get("goal"), "goal")
        if not grid.start.is_unset() and grid.start == grid.goal:
            raise LayoutError("Layout start and goal must differ")
        logger.debug(
            "Loaded %dx%d layout from %s (start=%s goal=%s)",
            grid.width,
            grid.height,
            path,
            grid.start,
            grid.goal,
        )
        return grid

    def _parse_endpoint(self, raw, name: str) -> Point:
        if raw is None:
            return Point.UNSET
        if not (isinstance(raw, (list, tuple)) and len(raw) == 2):
            raise LayoutError(f"Layout {name} must be an [x, y] pair, got {raw!r}")
        # bool is an int subclass but never a valid coordinate
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in raw):
            raise LayoutError(f"Layout {name} must hold integers, got {raw!r}")
        point = Point(raw[0], raw[1])
        if not self.in_bounds(point):
            raise LayoutError(f"Layout {name} {point} is outside the grid")
        if not self.node_at(point).traversable:
            raise LayoutError(f"Layout {name} {point} is on an obstacle")
        return point

    def to_mask(self) -> np.ndarray:
        """Return traversability as a boolean array indexed [y, x]."""
        return np.array(
            [[node.traversable for node in row] for row in self.nodes], dtype=bool
        )

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def node_at(self, point: Point) -> Node:
        """Return the node at `point`; the point must be in bounds."""
        if not self.in_bounds(point):
            raise PreconditionError(
                f"{point} is outside the {self.width}x{self.height} grid"
            )
        return self.nodes[point.y][point.x]

    def is_traversable(self, point: Point) -> bool:
        """Return True if `point` is inside the grid and not an obstacle."""
        return self.in_bounds(point) and self.nodes[point.y][point.x].traversable

    def neighbours(self, node: Node) -> List[Node]:
        """Orthogonally adjacent in-bounds nodes (left, right, down, up)."""
        x, y = node.point
        out = []
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                out.append(self.nodes[ny][nx])
        return out

    def is_start_or_goal(self, point: Point) -> bool:
        return point == self.start or point == self.goal

    def __iter__(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"<Grid {self.width}x{self.height} start={self.start} goal={self.goal}>"

