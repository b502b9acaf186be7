"""Core grid storage engine: store, views, cursors and value objects."""

from .geometry import Coordinate, Offset, Size
from .errors import CapacityOverflow, GridError, OutOfBounds, ShapeError, StaleViewError
from .grid import GridStore, ValueRef
from .row import Row, RowMut
from .column import Column, ColumnMut
from .iterators import ColumnCursor, GridCursor, GridIterator, RowCursor
from .grid_array import from_numpy, to_numpy

__all__ = [
    "Coordinate",
    "Offset",
    "Size",
    "GridError",
    "OutOfBounds",
    "ShapeError",
    "CapacityOverflow",
    "StaleViewError",
    "GridStore",
    "ValueRef",
    "Row",
    "RowMut",
    "Column",
    "ColumnMut",
    "GridIterator",
    "GridCursor",
    "RowCursor",
    "ColumnCursor",
    "to_numpy",
    "from_numpy",
]
