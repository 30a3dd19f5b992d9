"""
Point: immutable integer cell address on the grid.
"""

from __future__ import annotations
from typing import NamedTuple


class Point(NamedTuple):
    """Grid cell coordinates. Any negative component marks the point as unset."""

    x: int
    y: int

    def equals(self, x: int, y: int) -> bool:
        """Return True if this point lies on (x, y)."""
        return self.x == x and self.y == y

    def is_unset(self) -> bool:
        """Return True if either coordinate is negative."""
        return self.x < 0 or self.y < 0

    def manhattan(self, other: Point) -> int:
        """Manhattan distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


# Sentinel used for start/goal before they are placed
Point.UNSET = Point(-1, -1)
