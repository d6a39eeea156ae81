"""Row and diagonal sums over square or rectangular integer matrices."""

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def max_row_sum(matrix: Matrix) -> int:
    """Return the largest sum of any single row of ``matrix``."""
    if not matrix:
        raise ValueError("matrix has no rows")
    return max(sum(row) for row in matrix)


def diagonal_sum(matrix: Matrix) -> int:
    """Return the sum of both diagonals of a square matrix.

    A cell on both diagonals (the centre of an odd-sized matrix) is
    counted once.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    total = 0
    for i, row in enumerate(matrix):
        total += row[i]
        mirror = size - i - 1
        if mirror != i:
            total += row[mirror]
    return total