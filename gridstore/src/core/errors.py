"""Exceptions raised by the grid storage engine."""

from __future__ import annotations

__all__ = [
    "GridError",
    "OutOfBounds",
    "ShapeError",
    "CapacityOverflow",
    "StaleViewError",
]


class GridError(Exception):
    """Base class for grid failures."""


class OutOfBounds(GridError, IndexError):
    """Raised when a coordinate, index or count falls outside the grid."""


class ShapeError(GridError, ValueError):
    """Raised when a row or column length does not match the grid."""


class CapacityOverflow(GridError, OverflowError):
    """Raised when reserving would push an axis past the capacity limit."""


class StaleViewError(GridError, RuntimeError):
    """Raised when a mutable view is used after another one replaced it."""
