"""Plain value objects used to address and size grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Coordinate:
    """Element address: ``x`` is the column, ``y`` the row, ``(0, 0)`` is top-left."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> "Coordinate":
        return cls(0, 0)


@dataclass(frozen=True)
class Size:
    """Logical ``(width, height)`` element counts of a grid."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Size cannot be negative, got {self.width}x{self.height}")

    @classmethod
    def zero(cls) -> "Size":
        return cls(0, 0)


@dataclass(frozen=True)
class Offset:
    """Signed displacement along both axes."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> "Offset":
        return cls(0, 0)


CoordinateLike = Union[Coordinate, Tuple[int, int]]
SizeLike = Union[Size, Tuple[int, int]]


def as_coordinate(value: CoordinateLike) -> Coordinate:
    """Return ``value`` as a :class:`Coordinate`, accepting ``(x, y)`` tuples."""
    if isinstance(value, Coordinate):
        return value
    x, y = value
    return Coordinate(x, y)


def as_size(value: SizeLike) -> Size:
    """Return ``value`` as a :class:`Size`, accepting ``(width, height)`` tuples."""
    if isinstance(value, Size):
        return value
    width, height = value
    return Size(width, height)


__all__ = ["Coordinate", "Size", "Offset", "as_coordinate", "as_size"]
