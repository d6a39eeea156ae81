import pytest

from dsadrills.maze import find_paths

STEPS = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}

SOURCE_MAZE = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]


def _follows(grid, path):
    size = len(grid)
    row = col = 0
    seen = {(0, 0)}
    for move in path:
        d_row, d_col = STEPS[move]
        row, col = row + d_row, col + d_col
        if not (0 <= row < size and 0 <= col < size) or not grid[row][col]:
            return False
        if (row, col) in seen:
            return False
        seen.add((row, col))
    return (row, col) == (size - 1, size - 1)


def test_source_maze():
    assert find_paths(SOURCE_MAZE) == ["DDRDRR", "DRDDRR"]


def test_every_path_is_valid_on_open_grid():
    grid = [[1] * 3 for _ in range(3)]
    paths = find_paths(grid)
    assert paths
    assert len(set(paths)) == len(paths)
    assert all(_follows(grid, path) for path in paths)


def test_single_cell():
    assert find_paths([[1]]) == [""]


def test_blocked_start():
    assert find_paths([[0, 1], [1, 1]]) == []


def test_blocked_goal():
    assert find_paths([[1, 1], [1, 0]]) == []


def test_empty_grid():
    assert find_paths([]) == []


def test_walled_off():
    grid = [[1, 0, 0], [0, 0, 0], [0, 0, 1]]
    assert find_paths(grid) == []


def test_non_square_rejected():
    with pytest.raises(ValueError):
        find_paths([[1, 1, 1], [1, 1, 1]])