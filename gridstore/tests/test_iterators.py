from gridstore.src.core.geometry import Coordinate
from gridstore.src.core.grid import GridStore
from gridstore.src.core.iterators import GridCursor, GridIterator


def _grid():
    return GridStore.from_rows([[1, 2, 3], [4, 5, 6]])


def test_grid_cursor_row_major():
    grid = _grid()
    cursor = grid.iterator()
    assert isinstance(cursor, GridIterator)
    assert list(cursor) == [1, 2, 3, 4, 5, 6]
    assert list(grid) == [1, 2, 3, 4, 5, 6]
    assert grid.values() == [1, 2, 3, 4, 5, 6]


def test_grid_cursor_current_coordinate():
    cursor = GridCursor(_grid())
    assert cursor.current_coordinate() is None
    assert next(cursor) == 1
    assert cursor.current_coordinate() == Coordinate(0, 0)
    next(cursor)
    next(cursor)
    assert cursor.current_coordinate() == Coordinate(2, 0)
    assert next(cursor) == 4
    assert cursor.current_coordinate() == Coordinate(0, 1)


def test_grid_cursor_enumerate_coordinate():
    pairs = list(_grid().iterator().enumerate_coordinate())
    assert pairs[0] == (Coordinate(0, 0), 1)
    assert pairs[4] == (Coordinate(1, 1), 5)
    assert len(pairs) == 6


def test_enumerate_coordinate_continues_from_cursor():
    cursor = _grid().iterator()
    next(cursor)
    next(cursor)
    pairs = list(cursor.enumerate_coordinate())
    assert pairs[0] == (Coordinate(2, 0), 3)
    assert len(pairs) == 4


def test_grid_cursor_stops_on_zero_width():
    grid = GridStore.empty()
    grid.resize((0, 3), None)
    assert list(grid.iterator()) == []
    assert list(GridStore.empty()) == []


def test_row_cursor():
    cursor = _grid().row(1).iterator()
    assert cursor.current_coordinate() is None
    assert list(cursor.enumerate_coordinate()) == [
        (Coordinate(0, 1), 4),
        (Coordinate(1, 1), 5),
        (Coordinate(2, 1), 6),
    ]
    assert cursor.current_coordinate() == Coordinate(2, 1)


def test_column_cursor():
    cursor = _grid().column(2).iterator()
    assert list(cursor.enumerate_coordinate()) == [
        (Coordinate(2, 0), 3),
        (Coordinate(2, 1), 6),
    ]


def test_cursor_sees_writes_ahead_of_it():
    grid = _grid()
    cursor = grid.iterator()
    next(cursor)
    grid.set_value((1, 0), 20)
    assert next(cursor) == 20


def test_coordinates_from_cursor_round_trip():
    grid = GridStore.from_rows([[i * 4 + j for j in range(4)] for i in range(3)])
    for coordinate, value in grid.iterator().enumerate_coordinate():
        assert grid.value(coordinate) == value
