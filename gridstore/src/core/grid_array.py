"""Conversions between :class:`GridStore` and ``numpy`` arrays."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .errors import ShapeError
from .geometry import Size
from .grid import GridStore


def to_numpy(grid: GridStore, dtype: Optional[Any] = None) -> np.ndarray:
    """Return the elements of ``grid`` as an array of shape ``(height, width)``.

    Empty grids keep their shape; their dtype defaults to ``object``.
    """

    size = grid.size()
    if size.width == 0 or size.height == 0:
        return np.empty((size.height, size.width), dtype=dtype if dtype is not None else object)
    return np.array(grid.to_list(), dtype=dtype)


def from_numpy(arr: Any) -> GridStore:
    """Return a :class:`GridStore` holding the elements of the 2D array ``arr``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ShapeError(f"Expected a 2-dimensional array, got {arr.ndim} dimensions")
    height, width = arr.shape
    if height == 0:
        grid: GridStore = GridStore.empty()
        grid.resize(Size(width, 0), None)
        return grid
    return GridStore.from_rows(arr.tolist())


__all__ = ["to_numpy", "from_numpy"]
