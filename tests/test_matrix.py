import pytest

from dsadrills.matrix import diagonal_sum, max_row_sum


def test_max_row_sum_picks_largest_single_column_row():
    assert max_row_sum([[10], [3], [7]]) == 10


def test_max_row_sum_all_negative_rows():
    assert max_row_sum([[-5], [-9], [-12]]) == -5


def test_max_row_sum_is_at_least_every_row_sum():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    best = max_row_sum(matrix)
    assert all(best >= sum(row) for row in matrix)
    assert best in {sum(row) for row in matrix}


def test_max_row_sum_worked_example():
    assert max_row_sum([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 24


def test_max_row_sum_empty_raises():
    with pytest.raises(ValueError):
        max_row_sum([])


def test_diagonal_sum_single_cell():
    assert diagonal_sum([[7]]) == 7


def test_diagonal_sum_counts_centre_once():
    assert diagonal_sum([[0, 0, 0], [0, 4, 0], [0, 0, 0]]) == 4


def test_diagonal_sum_includes_anti_diagonal():
    assert diagonal_sum([[0, 0, 9], [0, 0, 0], [0, 0, 0]]) == 9


def test_diagonal_sum_ignores_off_diagonal_cells():
    assert diagonal_sum([[0, 5, 0], [6, 0, 8], [0, 3, 0]]) == 0


def test_diagonal_sum_worked_example():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    assert diagonal_sum(matrix) == 68


def test_diagonal_sum_empty_matrix_is_zero():
    assert diagonal_sum([]) == 0


def test_diagonal_sum_non_square_raises():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])