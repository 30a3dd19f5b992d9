"""
Fixed-capacity binary heap whose items track their own slot index.

Items must expose a writable integer `heap_index` attribute and a
`has_priority_over(other)` method. The item that has priority over every
other item is the one returned by `pop()`. Because each item knows its slot,
membership tests and decrease-key are O(1) lookups instead of scans.
"""

from __future__ import annotations
from typing import Generic, List, Optional, TypeVar

from .errors import HeapOverflowError

T = TypeVar("T")


class Heap(Generic[T]):
    """Array-backed priority queue used as the A* open set."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Heap capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: List[Optional[T]] = [None] * capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: T) -> bool:
        index = item.heap_index
        return 0 <= index < self._count and self._items[index] is item

    def push(self, item: T) -> None:
        """Add an item and sift it up to its place."""
        if self._count >= self.capacity:
            raise HeapOverflowError(
                f"Heap is full ({self.capacity} items), cannot push {item!r}"
            )
        if item in self:
            raise RuntimeError(f"{item!r} is already queued")
        item.heap_index = self._count
        self._items[self._count] = item
        self._count += 1
        self._sift_up(item)

    def pop(self) -> T:
        """Remove and return the highest-priority item."""
        if self._count == 0:
            raise IndexError("pop from empty heap")
        first = self._items[0]
        self._count -= 1
        last = self._items[self._count]
        self._items[self._count] = None
        if self._count > 0:
            self._items[0] = last
            last.heap_index = 0
            self._sift_down(last)
        # Stale slot must not look like membership
        first.heap_index = -1
        return first

    def update(self, item: T) -> None:
        """Re-sift a queued item whose priority has improved (decrease-key)."""
        if item not in self:
            raise ValueError(f"{item!r} is not queued")
        self._sift_up(item)

    def clear(self) -> None:
        """Drop all items so the heap can be reused for another search."""
        for i in range(self._count):
            self._items[i].heap_index = -1
            self._items[i] = None
        self._count = 0

    def _sift_up(self, item: T) -> None:
        while item.heap_index > 0:
            parent = self._items[(item.heap_index - 1) // 2]
            if not item.has_priority_over(parent):
                break
            self._swap(item, parent)

    def _sift_down(self, item: T) -> None:
        while True:
            left = item.heap_index * 2 + 1
            right = left + 1
            if left >= self._count:
                return
            # Pick the child with higher priority
            swap_index = left
            if right < self._count and self._items[right].has_priority_over(
                self._items[left]
            ):
                swap_index = right
            child = self._items[swap_index]
            if not child.has_priority_over(item):
                return
            self._swap(item, child)

    def _swap(self, a: T, b: T) -> None:
        ia, ib = a.heap_index, b.heap_index
        self._items[ia], self._items[ib] = b, a
        a.heap_index, b.heap_index = ib, ia
