"""Enumerate every simple path through a square grid maze."""

from collections.abc import Sequence

_MOVES = (("D", 1, 0), ("U", -1, 0), ("L", 0, -1), ("R", 0, 1))


def find_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of ``grid``.

    Cells holding a falsy value are walls. Each path is a string of the
    moves ``D``, ``U``, ``L`` and ``R``; no cell is visited twice in one
    path. Moves are tried in that order, which fixes the order of the result.
    """
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    goal = (size - 1, size - 1)

    def walk(row: int, col: int, path: str) -> None:
        if not (0 <= row < size and 0 <= col < size):
            return
        if not grid[row][col] or (row, col) in visited:
            return
        if (row, col) == goal:
            paths.append(path)
            return
        visited.add((row, col))
        for step, d_row, d_col in _MOVES:
            walk(row + d_row, col + d_col, path + step)
        visited.discard((row, col))

    walk(0, 0, "")
    return paths