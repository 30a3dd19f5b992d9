"""
Node module: a single grid cell with its per-search A* bookkeeping.
"""

from __future__ import annotations
from typing import Optional

from .point import Point


class Node:
    """Grid cell: static traversability plus scratch state used by one search."""

    __slots__ = ("point", "traversable", "g_cost", "h_cost", "parent", "heap_index")

    def __init__(self, traversable: bool, x: int, y: int) -> None:
        self.point = Point(x, y)
        self.traversable = traversable
        # Search scratch state, only valid for nodes touched by the current search
        self.g_cost = 0
        self.h_cost = 0
        self.parent: Optional[Node] = None
        # Slot inside the open set heap; written only by Heap
        self.heap_index = -1

    @property
    def f_cost(self) -> int:
        return self.g_cost + self.h_cost

    def reset_search_state(self) -> None:
        """Forget everything a previous search wrote into this node."""
        self.g_cost = 0
        self.h_cost = 0
        self.parent = None
        self.heap_index = -1

    def has_priority_over(self, other: Node) -> bool:
        """
        Return True if this node should be expanded before `other`.
        Lower f cost wins; on a tie the node closer to the goal (lower h cost) wins.
        """
        if self.f_cost != other.f_cost:
            return self.f_cost < other.f_cost
        return self.h_cost < other.h_cost

    def __repr__(self) -> str:
        return (
            f"<Node x={self.point.x} y={self.point.y} "
            f"traversable={self.traversable} g={self.g_cost} h={self.h_cost}>"
        )
