"""Column views over a :class:`~gridstore.src.core.grid.GridStore`.

Columns are not contiguous in the row-major backing store, so every mutation
here is expressed as single-element writes or pairwise swaps through
:meth:`GridStore.swap_value`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from gridstore.src.core.errors import OutOfBounds, StaleViewError
from gridstore.src.core.geometry import Coordinate
from gridstore.src.core.iterators import ColumnCursor

if TYPE_CHECKING:  # pragma: no cover
    from gridstore.src.core.grid import GridStore, ValueRef

T = TypeVar("T")

__all__ = ["Column", "ColumnMut"]


class Column(Generic[T]):
    """Read-only window on column ``index``; positions run top to bottom."""

    def __init__(self, grid: "GridStore[T]", index: int):
        self._grid = grid
        self.index = index

    def _store(self) -> "GridStore[T]":
        return self._grid

    def length(self) -> int:
        return self._store().size().height

    def value(self, position: int) -> T:
        return self._store().value(Coordinate(self.index, position))

    def values(self) -> List[T]:
        return list(self.iterator())

    def top(self) -> T:
        """Return the first element of the column."""
        return self.value(0)

    def bottom(self) -> T:
        """Return the last element of the column."""
        return self.value(self.length() - 1)

    def iterator(self) -> ColumnCursor[T]:
        return ColumnCursor(Column(self._store(), self.index))

    def left(self) -> Optional["Column[T]"]:
        """Return the column to the left, or ``None`` on the first column."""
        grid = self._store()
        if self.index == 0:
            return None
        return grid.column(self.index - 1)

    def right(self) -> Optional["Column[T]"]:
        """Return the column to the right, or ``None`` on the last column."""
        grid = self._store()
        if self.index + 1 >= grid.size().width:
            return None
        return grid.column(self.index + 1)

    def __len__(self) -> int:
        return self.length()

    def __getitem__(self, position: int) -> T:
        return self.value(position)

    def __iter__(self) -> ColumnCursor[T]:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self._grid is other._grid and self.index == other.index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index})"


class ColumnMut(Column[T]):
    """Mutable window on column ``index``.

    Same single-writer rule as :class:`~gridstore.src.core.row.RowMut`.
    """

    def __init__(self, grid: "GridStore[T]", index: int, epoch: int):
        super().__init__(grid, index)
        self._epoch = epoch

    def _store(self) -> "GridStore[T]":
        if not self._grid._is_current(self._epoch):
            raise StaleViewError(f"Mutable view of column {self.index} is no longer valid")
        return self._grid

    def value_mut(self, position: int) -> "ValueRef[T]":
        return self._store().value_mut(Coordinate(self.index, position))

    def set_value(self, position: int, value: T) -> None:
        self._store().set_value(Coordinate(self.index, position), value)

    def swap_value(self, a: int, b: int) -> None:
        self._store().swap_value(Coordinate(self.index, a), Coordinate(self.index, b))

    def swap(self, a: int, b: int) -> None:
        self.swap_value(a, b)

    def top_mut(self) -> "ValueRef[T]":
        return self.value_mut(0)

    def bottom_mut(self) -> "ValueRef[T]":
        return self.value_mut(self.length() - 1)

    def left_mut(self) -> Optional["ColumnMut[T]"]:
        """Return a mutable view of the column to the left; this view is retired."""
        grid = self._store()
        if self.index == 0:
            return None
        return grid.column_mut(self.index - 1)

    def right_mut(self) -> Optional["ColumnMut[T]"]:
        """Return a mutable view of the column to the right; this view is retired."""
        grid = self._store()
        if self.index + 1 >= grid.size().width:
            return None
        return grid.column_mut(self.index + 1)

    def _reverse_range(self, start: int, stop: int) -> None:
        stop -= 1
        while start < stop:
            self.swap_value(start, stop)
            start += 1
            stop -= 1

    def reverse(self) -> None:
        self._reverse_range(0, self.length())

    def rotate_top(self, count: int) -> None:
        """Shift elements ``count`` places up, wrapping the top ones to the bottom."""
        length = self.length()
        if not (0 <= count <= length):
            raise OutOfBounds(f"Cannot rotate a column of length {length} by {count}")
        self._reverse_range(0, count)
        self._reverse_range(count, length)
        self._reverse_range(0, length)

    def rotate_bottom(self, count: int) -> None:
        """Shift elements ``count`` places down, wrapping the bottom ones to the top."""
        length = self.length()
        if not (0 <= count <= length):
            raise OutOfBounds(f"Cannot rotate a column of length {length} by {count}")
        self._reverse_range(0, length)
        self._reverse_range(0, count)
        self._reverse_range(count, length)

    def __setitem__(self, position: int, value: T) -> None:
        self.set_value(position, value)
