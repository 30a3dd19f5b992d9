"""
Exception types raised by the pathfinding core and layout loader.
"""


class GridPathError(Exception):
    """Base class for all gridpath errors."""


class PreconditionError(GridPathError, ValueError):
    """Raised when a caller passes arguments that break a documented contract."""


class LayoutError(GridPathError, ValueError):
    """Raised when a layout file or grid definition cannot be parsed."""


class HeapOverflowError(GridPathError, RuntimeError):
    """Raised when more items are pushed than the heap was sized for."""
