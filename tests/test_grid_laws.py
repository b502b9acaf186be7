import numpy as np
import pytest

from gridstore.src.core.errors import OutOfBounds
from gridstore.src.core.geometry import Size
from gridstore.src.core.grid import GridStore


def _random_grid(rng, max_side=6):
    width = int(rng.integers(0, max_side))
    height = int(rng.integers(0, max_side))
    if width == 0 or height == 0:
        grid = GridStore.empty()
        grid.resize((width, height), 0)
        return grid
    return GridStore.from_rows(rng.integers(0, 10, size=(height, width)).tolist())


@pytest.mark.parametrize("seed", range(10))
def test_rotate_round_trip(seed):
    rng = np.random.default_rng(seed)
    grid = _random_grid(rng)
    before = grid.to_list()
    size = grid.size()

    grid.rotate_left()
    assert grid.size() == Size(size.height, size.width)
    grid.rotate_right()
    assert grid.size() == size
    assert grid.to_list() == before

    for _ in range(4):
        grid.rotate_left()
    assert grid.to_list() == before


@pytest.mark.parametrize("seed", range(10))
def test_double_flip_is_identity(seed):
    rng = np.random.default_rng(seed)
    grid = _random_grid(rng)
    before = grid.to_list()
    grid.flip_horizontally()
    grid.flip_horizontally()
    assert grid.to_list() == before
    grid.flip_vertically()
    grid.flip_vertically()
    assert grid.to_list() == before


@pytest.mark.parametrize("seed", range(10))
def test_insert_then_remove_restores(seed):
    rng = np.random.default_rng(seed)
    grid = GridStore.from_rows(rng.integers(0, 10, size=(3, 4)).tolist())
    before = grid.to_list()

    index = int(rng.integers(0, 4))
    grid.insert_row(index, [-1] * 4)
    assert grid.row(index).values() == [-1] * 4
    grid.remove_row(index)
    assert grid.to_list() == before

    index = int(rng.integers(0, 5))
    grid.insert_column(index, [-1] * 3)
    assert grid.column(index).values() == [-1] * 3
    grid.remove_column(index)
    assert grid.to_list() == before


@pytest.mark.parametrize("seed", range(5))
def test_bounds_match_size(seed):
    rng = np.random.default_rng(seed)
    grid = _random_grid(rng)
    size = grid.size()
    for x in range(-1, size.width + 2):
        for y in range(-1, size.height + 2):
            if 0 <= x < size.width and 0 <= y < size.height:
                grid.value((x, y))
            else:
                with pytest.raises(OutOfBounds):
                    grid.value((x, y))


@pytest.mark.parametrize("seed", range(10))
def test_swap_matches_reference(seed):
    rng = np.random.default_rng(seed)
    grid = GridStore.from_rows(rng.integers(0, 100, size=(4, 5)).tolist())
    reference = grid.to_list()
    for _ in range(50):
        ax, bx = (int(v) for v in rng.integers(0, 5, size=2))
        ay, by = (int(v) for v in rng.integers(0, 4, size=2))
        grid.swap_value((ax, ay), (bx, by))
        reference[ay][ax], reference[by][bx] = reference[by][bx], reference[ay][ax]
        assert grid.to_list() == reference


@pytest.mark.parametrize("seed", range(10))
def test_capacity_never_shrinks(seed):
    rng = np.random.default_rng(seed)
    grid = GridStore.empty()
    last = grid.capacity()
    for _ in range(40):
        op = int(rng.integers(0, 7))
        size = grid.size()
        if op == 0:
            grid.resize((int(rng.integers(0, 7)), int(rng.integers(0, 7))), 1)
        elif op == 1:
            grid.clear()
        elif op == 2:
            grid.insert_row(int(rng.integers(0, size.height + 1)), [2] * size.width)
        elif op == 3 and size.height:
            grid.remove_row(int(rng.integers(0, size.height)))
        elif op == 4 and size.height:
            grid.insert_column(int(rng.integers(0, size.width + 1)), [3] * size.height)
        elif op == 5 and size.width:
            grid.remove_column(int(rng.integers(0, size.width)))
        elif op == 6:
            extra = (int(rng.integers(0, 3)), int(rng.integers(0, 3)))
            grid.reserve(extra)
            assert grid.capacity() == Size(last.width + extra[0], last.height + extra[1])

        capacity = grid.capacity()
        assert capacity.width >= last.width
        assert capacity.height >= last.height
        assert capacity.width >= grid.size().width
        assert capacity.height >= grid.size().height
        assert len(grid.values()) == grid.size().width * grid.size().height
        last = capacity
