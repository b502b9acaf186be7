"""Grid loading and rendering helpers."""

from __future__ import annotations

from typing import Any, Dict

from gridstore.src.core.errors import ShapeError
from gridstore.src.core.grid import GridStore


def render_grid(grid: GridStore) -> str:
    """Return ``grid`` as text, one line per row and cells separated by a space."""
    return "\n".join(" ".join(str(v) for v in row) for row in grid.to_list())


def load_grid(data: Dict[str, Any]) -> GridStore:
    """Build a grid from a mapping holding either ``"rows"`` or ``"columns"``.

    Raises
    ------
    ShapeError
        If neither key is present or the sequences are ragged.
    """

    if not isinstance(data, dict):
        raise ShapeError("Grid document must be a mapping")
    if "rows" in data:
        return GridStore.from_rows(data["rows"])
    if "columns" in data:
        return GridStore.from_columns(data["columns"])
    raise ShapeError("Grid document needs a 'rows' or 'columns' entry")


__all__ = ["render_grid", "load_grid"]
