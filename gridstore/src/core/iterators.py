"""Cursors walking a grid, a row or a column.

Every cursor is a regular Python iterator that also remembers where the last
produced element lives, so callers can recover coordinates without keeping
their own counters::

    cursor = grid.row(2).iterator()
    for coordinate, value in cursor.enumerate_coordinate():
        ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Tuple, TypeVar

from gridstore.src.core.geometry import Coordinate

if TYPE_CHECKING:  # pragma: no cover
    from gridstore.src.core.column import Column
    from gridstore.src.core.grid import GridStore
    from gridstore.src.core.row import Row

T = TypeVar("T")

__all__ = ["GridIterator", "GridCursor", "RowCursor", "ColumnCursor"]


class GridIterator(ABC, Generic[T]):
    """Iterator that reports the coordinate of the element it produced last."""

    def __init__(self) -> None:
        self._current: Optional[Coordinate] = None

    def __iter__(self) -> "GridIterator[T]":
        return self

    @abstractmethod
    def __next__(self) -> T:
        ...

    def current_coordinate(self) -> Optional[Coordinate]:
        """Return the coordinate of the last produced element, ``None`` before the first."""
        return self._current

    def enumerate_coordinate(self) -> Iterator[Tuple[Coordinate, T]]:
        """Yield ``(coordinate, value)`` pairs for the remaining elements."""
        for value in self:
            yield self._current, value


class GridCursor(GridIterator[T]):
    """Row-major walk over a whole grid, top-left first."""

    def __init__(self, grid: "GridStore[T]"):
        super().__init__()
        self._grid = grid
        self._x = 0
        self._y = 0

    def __next__(self) -> T:
        size = self._grid.size()
        if size.width == 0 or self._y >= size.height:
            raise StopIteration
        coordinate = Coordinate(self._x, self._y)
        value = self._grid.value(coordinate)
        self._current = coordinate
        self._x += 1
        if self._x >= size.width:
            self._x = 0
            self._y += 1
        return value


class RowCursor(GridIterator[T]):
    """Left-to-right walk over one row."""

    def __init__(self, row: "Row[T]"):
        super().__init__()
        self._row = row
        self._position = 0

    def __next__(self) -> T:
        if self._position >= self._row.length():
            raise StopIteration
        value = self._row.value(self._position)
        self._current = Coordinate(self._position, self._row.index)
        self._position += 1
        return value


class ColumnCursor(GridIterator[T]):
    """Top-to-bottom walk over one column."""

    def __init__(self, column: "Column[T]"):
        super().__init__()
        self._column = column
        self._position = 0

    def __next__(self) -> T:
        if self._position >= self._column.length():
            raise StopIteration
        value = self._column.value(self._position)
        self._current = Coordinate(self._column.index, self._position)
        self._position += 1
        return value
