"""Tests for AlignmentMatrix storage and best-score tracking."""

import numpy as np
import pytest

from PairAlign.seq_alignment import AlignmentMatrix, Direction


def test_new_matrix_is_zeroed_and_untagged():
    matrix = AlignmentMatrix(3, 4)
    assert matrix.shape == (3, 4)
    assert np.all(matrix.scores() == 0.0)
    assert np.all(matrix.paths() == Direction.NONE)
    assert (matrix.best_score, matrix.best_row, matrix.best_col) == (0.0, 0, 0)


def test_set_and_get_use_row_major_cells():
    matrix = AlignmentMatrix(2, 3)
    matrix.set_score(1, 2, 7.5)
    matrix.set_path(1, 2, Direction.LEFT)
    assert matrix.get(1, 2) == 7.5
    assert matrix.get_path(1, 2) == Direction.LEFT
    assert matrix.scores()[1, 2] == 7.5
    assert matrix.get(0, 2) == 0.0


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_out_of_range_access_raises(cell):
    matrix = AlignmentMatrix(2, 3)
    with pytest.raises(IndexError):
        matrix.get(*cell)
    with pytest.raises(IndexError):
        matrix.set_path(*cell, Direction.DIAG)


def test_record_if_best_keeps_first_of_ties():
    matrix = AlignmentMatrix(3, 3)
    assert matrix.record_if_best(1, 1, 4.0)
    assert not matrix.record_if_best(2, 2, 4.0)
    assert (matrix.best_row, matrix.best_col) == (1, 1)
    assert matrix.record_if_best(2, 1, 5.0)
    assert (matrix.best_score, matrix.best_row, matrix.best_col) == (5.0, 2, 1)


def test_record_if_best_ignores_non_positive():
    matrix = AlignmentMatrix(2, 2)
    assert not matrix.record_if_best(1, 1, 0.0)
    assert not matrix.record_if_best(1, 1, -3.0)
    assert matrix.best_score == 0.0


def test_views_are_copies():
    matrix = AlignmentMatrix(2, 2)
    scores = matrix.scores()
    scores[1, 1] = 99.0
    assert matrix.get(1, 1) == 0.0


def test_rejects_empty_shape():
    with pytest.raises(ValueError):
        AlignmentMatrix(0, 3)
