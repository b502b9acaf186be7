"""Row views over a :class:`~gridstore.src.core.grid.GridStore`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from gridstore.src.core.errors import OutOfBounds, StaleViewError
from gridstore.src.core.geometry import Coordinate
from gridstore.src.core.iterators import RowCursor

if TYPE_CHECKING:  # pragma: no cover
    from gridstore.src.core.grid import GridStore, ValueRef

T = TypeVar("T")

__all__ = ["Row", "RowMut"]


def _check_rotation(count: int, length: int) -> None:
    if not (0 <= count <= length):
        raise OutOfBounds(f"Cannot rotate a row of length {length} by {count}")


class Row(Generic[T]):
    """Read-only window on row ``index``; positions run left to right."""

    def __init__(self, grid: "GridStore[T]", index: int):
        self._grid = grid
        self.index = index

    def _store(self) -> "GridStore[T]":
        return self._grid

    def length(self) -> int:
        return self._store().size().width

    def value(self, position: int) -> T:
        return self._store().value(Coordinate(position, self.index))

    def values(self) -> List[T]:
        return list(self.iterator())

    def left(self) -> T:
        """Return the first element of the row."""
        return self.value(0)

    def right(self) -> T:
        """Return the last element of the row."""
        return self.value(self.length() - 1)

    def iterator(self) -> RowCursor[T]:
        return RowCursor(Row(self._store(), self.index))

    def top(self) -> Optional["Row[T]"]:
        """Return the row above, or ``None`` on the first row."""
        grid = self._store()
        if self.index == 0:
            return None
        return grid.row(self.index - 1)

    def bottom(self) -> Optional["Row[T]"]:
        """Return the row below, or ``None`` on the last row."""
        grid = self._store()
        if self.index + 1 >= grid.size().height:
            return None
        return grid.row(self.index + 1)

    def __len__(self) -> int:
        return self.length()

    def __getitem__(self, position: int) -> T:
        return self.value(position)

    def __iter__(self) -> RowCursor[T]:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._grid is other._grid and self.index == other.index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index})"


class RowMut(Row[T]):
    """Mutable window on row ``index``.

    Only the most recently acquired mutable view of a store is usable; once
    another one is handed out, or the store changes shape, every method raises
    :class:`StaleViewError`.
    """

    def __init__(self, grid: "GridStore[T]", index: int, epoch: int):
        super().__init__(grid, index)
        self._epoch = epoch

    def _store(self) -> "GridStore[T]":
        if not self._grid._is_current(self._epoch):
            raise StaleViewError(f"Mutable view of row {self.index} is no longer valid")
        return self._grid

    def value_mut(self, position: int) -> "ValueRef[T]":
        return self._store().value_mut(Coordinate(position, self.index))

    def set_value(self, position: int, value: T) -> None:
        self._store().set_value(Coordinate(position, self.index), value)

    def swap_value(self, a: int, b: int) -> None:
        self._store().swap_value(Coordinate(a, self.index), Coordinate(b, self.index))

    def swap(self, a: int, b: int) -> None:
        self.swap_value(a, b)

    def left_mut(self) -> "ValueRef[T]":
        return self.value_mut(0)

    def right_mut(self) -> "ValueRef[T]":
        return self.value_mut(self.length() - 1)

    def top_mut(self) -> Optional["RowMut[T]"]:
        """Return a mutable view of the row above; this view is retired."""
        grid = self._store()
        if self.index == 0:
            return None
        return grid.row_mut(self.index - 1)

    def bottom_mut(self) -> Optional["RowMut[T]"]:
        """Return a mutable view of the row below; this view is retired."""
        grid = self._store()
        if self.index + 1 >= grid.size().height:
            return None
        return grid.row_mut(self.index + 1)

    def reverse(self) -> None:
        self._store().row_slice(self.index).reverse()

    def rotate_left(self, count: int) -> None:
        """Shift elements ``count`` places to the left, wrapping around."""
        buffer = self._store().row_slice(self.index)
        _check_rotation(count, len(buffer))
        buffer[:] = buffer[count:] + buffer[:count]

    def rotate_right(self, count: int) -> None:
        """Shift elements ``count`` places to the right, wrapping around."""
        buffer = self._store().row_slice(self.index)
        _check_rotation(count, len(buffer))
        split = len(buffer) - count
        buffer[:] = buffer[split:] + buffer[:split]

    def __setitem__(self, position: int, value: T) -> None:
        self.set_value(position, value)
