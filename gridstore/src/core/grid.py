"""Dynamic two-dimensional array with per-axis capacity.

The store keeps one Python list per row ("row-buffer").  Buffers beyond the
current height form a spare pool that is reused when the grid grows again, and
``row_capacity`` records the width every buffer is reserved for.  Capacity is
therefore tracked independently on each axis:

* ``capacity().width`` is ``row_capacity``
* ``capacity().height`` is the number of row-buffers, spares included

Neither shrinks, except through a rotation, which rebuilds the store at its
rotated size.  Elements are addressed with :class:`Coordinate` where
``x`` selects the column and ``y`` the row.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, Iterable, List, Sequence, TypeVar

from gridstore.src.core.column import Column, ColumnMut
from gridstore.src.core.errors import CapacityOverflow, OutOfBounds, ShapeError
from gridstore.src.core.geometry import (
    Coordinate,
    CoordinateLike,
    Size,
    SizeLike,
    as_coordinate,
    as_size,
)
from gridstore.src.core.iterators import GridCursor
from gridstore.src.core.row import Row, RowMut
from gridstore.src.utils import config_loader
from gridstore.src.utils.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _clone(value: Any) -> Any:
    if config_loader.DEEP_COPY_FILL:
        return copy.deepcopy(value)
    return value


def _clones(value: Any, count: int) -> List[Any]:
    return [_clone(value) for _ in range(count)]


class ValueRef(Generic[T]):
    """Writable handle on a single element of a :class:`GridStore`.

    Bounds are checked on every access, so a handle outliving a shrink of its
    store raises :class:`OutOfBounds` instead of touching a stale slot.
    """

    __slots__ = ("_grid", "coordinate")

    def __init__(self, grid: "GridStore[T]", coordinate: Coordinate):
        self._grid = grid
        self.coordinate = coordinate

    def get(self) -> T:
        return self._grid.value(self.coordinate)

    def set(self, value: T) -> None:
        self._grid.set_value(self.coordinate, value)

    def update(self, func: Callable[[T], T]) -> T:
        """Replace the element with ``func(element)`` and return the new value."""
        new_value = func(self.get())
        self.set(new_value)
        return new_value

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def __repr__(self) -> str:
        return f"ValueRef({self.coordinate.x}, {self.coordinate.y})"


class GridStore(Generic[T]):
    """Resizable 2D grid of arbitrary values stored row-major."""

    def __init__(self) -> None:
        self._size = Size(0, 0)
        self._rows: List[List[T]] = []
        self._row_capacity = 0
        self._borrow_epoch = 0

    # Construction --------------------------------------------------------

    @classmethod
    def empty(cls) -> "GridStore[T]":
        """Return a grid of size (0, 0) with no reserved capacity."""
        return cls()

    zero = empty

    @classmethod
    def with_size(cls, size: SizeLike, value: T) -> "GridStore[T]":
        """Return a grid of ``size`` where every element is a clone of ``value``."""
        size = as_size(size)
        grid = cls()
        grid._rows = [_clones(value, size.width) for _ in range(size.height)]
        grid._size = size
        grid._row_capacity = size.width
        return grid

    @classmethod
    def with_capacity(cls, capacity: SizeLike) -> "GridStore[T]":
        """Return an empty grid with ``capacity`` reserved on both axes."""
        capacity = as_size(capacity)
        grid = cls()
        grid._rows = [[] for _ in range(capacity.height)]
        grid._row_capacity = capacity.width
        return grid

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> "GridStore[T]":
        """Return a grid whose rows are copies of ``rows``.

        Raises
        ------
        ShapeError
            If the rows do not all have the same length.
        """

        buffers = [list(row) for row in rows]
        width = len(buffers[0]) if buffers else 0
        for r, row in enumerate(buffers):
            if len(row) != width:
                raise ShapeError(f"Row {r} has length {len(row)}, expected {width}")

        grid = cls()
        grid._rows = buffers
        grid._size = Size(width, len(buffers))
        grid._row_capacity = width
        return grid

    @classmethod
    def from_columns(cls, columns: Iterable[Sequence[T]]) -> "GridStore[T]":
        """Return a grid whose columns are copies of ``columns``."""
        grid = cls.from_rows(columns)
        grid.flip_horizontally()
        grid.rotate_left()
        return grid

    # Shape & capacity ----------------------------------------------------

    def size(self) -> Size:
        return self._size

    def capacity(self) -> Size:
        """Return ``(row_capacity, number of allocated row-buffers)``."""
        return Size(self._row_capacity, len(self._rows))

    def reserve(self, additional: SizeLike) -> None:
        """Reserve ``additional`` extra columns and rows on top of the current capacity.

        Raises
        ------
        CapacityOverflow
            If either axis would exceed the configured capacity limit.
        """

        additional = as_size(additional)
        limit = config_loader.MAX_CAPACITY
        if self._row_capacity + additional.width > limit:
            raise CapacityOverflow(
                f"row capacity {self._row_capacity} + {additional.width} exceeds {limit}"
            )
        if len(self._rows) + additional.height > limit:
            raise CapacityOverflow(
                f"row-buffer count {len(self._rows)} + {additional.height} exceeds {limit}"
            )

        self._row_capacity += additional.width
        self._rows.extend([] for _ in range(additional.height))
        logger.debug("reserve %s -> capacity %s", additional, self.capacity())

    def resize(self, size: SizeLike, value: T) -> None:
        """Resize to ``size``, filling new elements with clones of ``value``.

        Rows dropped by a shrink are emptied but kept as spare buffers.
        """

        size = as_size(size)
        buffer_count = len(self._rows)

        # Produce every clone before touching a buffer.
        new_rows = [_clones(value, size.width) for _ in range(max(0, size.height - buffer_count))]
        extensions = []
        for r in range(min(size.height, buffer_count)):
            missing = size.width - len(self._rows[r])
            extensions.append(_clones(value, missing) if missing > 0 else None)

        for r, extension in enumerate(extensions):
            if extension is None:
                del self._rows[r][size.width:]
            else:
                self._rows[r].extend(extension)
        for r in range(size.height, buffer_count):
            self._rows[r].clear()
        self._rows.extend(new_rows)

        old_size = self._size
        self._size = size
        self._row_capacity = max(self._row_capacity, size.width)
        self._retire_views()
        logger.debug("resize %s -> %s", old_size, size)

    def fill(self, value: T) -> None:
        """Overwrite every element with a clone of ``value``."""
        filled = [_clones(value, self._size.width) for _ in range(self._size.height)]
        for r, clones in enumerate(filled):
            self._rows[r][:] = clones

    def clear(self) -> None:
        """Drop every element, keeping the reserved capacity."""
        for row in self._rows:
            row.clear()
        self._size = Size(0, 0)
        self._retire_views()
        logger.debug("clear -> capacity %s", self.capacity())

    # Element access ------------------------------------------------------

    def _check(self, coordinate: CoordinateLike) -> Coordinate:
        coordinate = as_coordinate(coordinate)
        if not (0 <= coordinate.x < self._size.width and 0 <= coordinate.y < self._size.height):
            raise OutOfBounds(
                f"Coordinate ({coordinate.x}, {coordinate.y}) out of bounds for size "
                f"{self._size.width}x{self._size.height}"
            )
        return coordinate

    def _check_row(self, index: int) -> None:
        if not (0 <= index < self._size.height):
            raise OutOfBounds(f"Row index {index} out of bounds [0, {self._size.height})")

    def _check_column(self, index: int) -> None:
        if not (0 <= index < self._size.width):
            raise OutOfBounds(f"Column index {index} out of bounds [0, {self._size.width})")

    def value(self, coordinate: CoordinateLike) -> T:
        c = self._check(coordinate)
        return self._rows[c.y][c.x]

    def value_mut(self, coordinate: CoordinateLike) -> ValueRef[T]:
        """Return a writable handle on the element at ``coordinate``."""
        return ValueRef(self, self._check(coordinate))

    def set_value(self, coordinate: CoordinateLike, value: T) -> None:
        c = self._check(coordinate)
        self._rows[c.y][c.x] = value

    def swap_value(self, a: CoordinateLike, b: CoordinateLike) -> None:
        """Exchange the elements at ``a`` and ``b``.

        This is the only operation writing two slots at once.  Both positions
        are runtime values, so they are bounds-checked here on every call; once
        both pass, distinct coordinates name either two row-buffers or two
        offsets of one buffer, and the exchange cannot clobber a third slot.
        """

        a = self._check(a)
        b = self._check(b)
        if a == b:
            return
        row_a = self._rows[a.y]
        row_b = self._rows[b.y]
        row_a[a.x], row_b[b.x] = row_b[b.x], row_a[a.x]

    def values(self) -> List[T]:
        """Return every element in row-major order."""
        return list(self.iterator())

    def iterator(self) -> GridCursor[T]:
        return GridCursor(self)

    def row_slice(self, index: int) -> List[T]:
        """Return the live buffer of row ``index``.

        Callers may reorder it in place but must not change its length.
        """

        self._check_row(index)
        return self._rows[index]

    # Rows ----------------------------------------------------------------

    def row(self, index: int) -> Row[T]:
        self._check_row(index)
        return Row(self, index)

    def row_mut(self, index: int) -> RowMut[T]:
        """Return a mutable view of row ``index``, retiring earlier mutable views."""
        self._check_row(index)
        return RowMut(self, index, self._retire_views())

    def rows(self) -> List[Row[T]]:
        return [Row(self, index) for index in range(self._size.height)]

    def swap_row(self, a: int, b: int) -> None:
        self._check_row(a)
        self._check_row(b)
        self._rows[a], self._rows[b] = self._rows[b], self._rows[a]

    def insert_row(self, index: int, row: Sequence[T]) -> None:
        """Insert ``row`` so that it becomes row ``index``.

        Raises
        ------
        OutOfBounds
            If ``index`` is greater than the height.
        ShapeError
            If ``row`` is not exactly as long as the grid is wide.
        """

        if not (0 <= index <= self._size.height):
            raise OutOfBounds(f"Row index {index} out of bounds [0, {self._size.height}]")
        if len(row) != self._size.width:
            raise ShapeError(f"Row has length {len(row)}, expected {self._size.width}")

        if self._size.height < len(self._rows):
            # Consume one spare buffer so the buffer count stays put.
            self._rows.pop()
        self._rows.insert(index, list(row))
        self._size = Size(self._size.width, self._size.height + 1)
        self._retire_views()
        logger.debug("insert_row %d -> size %s", index, self._size)

    def remove_row(self, index: int) -> None:
        """Remove row ``index``; a fresh spare buffer takes its place in the pool."""
        self._check_row(index)
        del self._rows[index]
        self._rows.append([])
        self._size = Size(self._size.width, self._size.height - 1)
        self._retire_views()
        logger.debug("remove_row %d -> size %s", index, self._size)

    # Columns -------------------------------------------------------------

    def column(self, index: int) -> Column[T]:
        self._check_column(index)
        return Column(self, index)

    def column_mut(self, index: int) -> ColumnMut[T]:
        """Return a mutable view of column ``index``, retiring earlier mutable views."""
        self._check_column(index)
        return ColumnMut(self, index, self._retire_views())

    def columns(self) -> List[Column[T]]:
        return [Column(self, index) for index in range(self._size.width)]

    def swap_column(self, a: int, b: int) -> None:
        """Exchange columns ``a`` and ``b`` one element per row."""
        self._check_column(a)
        self._check_column(b)
        for y in range(self._size.height):
            self.swap_value(Coordinate(a, y), Coordinate(b, y))

    def insert_column(self, index: int, column: Sequence[T]) -> None:
        """Insert ``column`` so that it becomes column ``index``."""
        if not (0 <= index <= self._size.width):
            raise OutOfBounds(f"Column index {index} out of bounds [0, {self._size.width}]")
        if len(column) != self._size.height:
            raise ShapeError(f"Column has length {len(column)}, expected {self._size.height}")

        for y, value in enumerate(column):
            self._rows[y].insert(index, value)
        self._size = Size(self._size.width + 1, self._size.height)
        self._row_capacity = max(self._row_capacity, self._size.width)
        self._retire_views()
        logger.debug("insert_column %d -> size %s", index, self._size)

    def remove_column(self, index: int) -> None:
        self._check_column(index)
        for y in range(self._size.height):
            del self._rows[y][index]
        self._size = Size(self._size.width - 1, self._size.height)
        self._retire_views()
        logger.debug("remove_column %d -> size %s", index, self._size)

    # Transforms ----------------------------------------------------------

    def flip_horizontally(self) -> None:
        """Mirror the grid left-to-right."""
        for index in range(self._size.height):
            self.row_mut(index).reverse()

    def flip_vertically(self) -> None:
        """Mirror the grid top-to-bottom."""
        for index in range(self._size.width):
            self.column_mut(index).reverse()

    def rotate_left(self) -> None:
        """Rotate 90 degrees counter-clockwise. The result is ``height x width``."""
        width, height = self._size.width, self._size.height
        rotated: GridStore[T] = GridStore.with_capacity(Size(height, width))
        for y in range(height):
            source = self._rows[y]
            for x in range(width):
                rotated._rows[x].append(source[width - 1 - x])
        rotated._size = Size(height, width)
        self._replace(rotated)
        logger.debug("rotate_left -> size %s", self._size)

    def rotate_right(self) -> None:
        """Rotate 90 degrees clockwise. The result is ``height x width``."""
        width, height = self._size.width, self._size.height
        rotated: GridStore[T] = GridStore.with_capacity(Size(height, width))
        for y in reversed(range(height)):
            source = self._rows[y]
            for x in reversed(range(width)):
                rotated._rows[x].append(source[x])
        rotated._size = Size(height, width)
        self._replace(rotated)
        logger.debug("rotate_right -> size %s", self._size)

    def _replace(self, other: "GridStore[T]") -> None:
        self._rows, self._size, self._row_capacity = other._rows, other._size, other._row_capacity
        self._retire_views()

    # Borrow tracking -----------------------------------------------------

    def _retire_views(self) -> int:
        """Advance the borrow epoch, invalidating outstanding mutable views."""
        self._borrow_epoch += 1
        return self._borrow_epoch

    def _is_current(self, epoch: int) -> bool:
        return epoch == self._borrow_epoch

    # Python protocol -----------------------------------------------------

    def __getitem__(self, coordinate: CoordinateLike) -> T:
        return self.value(coordinate)

    def __setitem__(self, coordinate: CoordinateLike, value: T) -> None:
        self.set_value(coordinate, value)

    def __iter__(self) -> GridCursor[T]:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridStore):
            return NotImplemented
        if self._size != other._size:
            return False
        height = self._size.height
        return self._rows[:height] == other._rows[:height]

    __hash__ = None  # type: ignore[assignment]

    def to_list(self) -> List[List[T]]:
        """Return the rows as a list of list copies."""
        return [list(row) for row in self._rows[: self._size.height]]

    def __repr__(self) -> str:
        return (
            f"GridStore(size={self._size.width}x{self._size.height}, "
            f"capacity={self._row_capacity}x{len(self._rows)})"
        )


__all__ = ["GridStore", "ValueRef"]
