"""
Dense score / direction tables for the alignment recurrence
"""

from enum import IntEnum
from typing import Tuple

import numpy as np


class Direction(IntEnum):
    """Which recurrence branch produced a cell (values follow candidate order)"""
    NONE = -1
    DIAG = 0
    UP = 1
    LEFT = 2
    RESET = 3


class AlignmentMatrix:
    """
    (rows x cols) score table plus a parallel direction table

    Both tables live in flat row-major numpy buffers; cell (i, j) is at
    i * cols + j. The matrix also tracks the best score seen so far and the
    cell it was first seen in, which local alignment starts from.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Matrix needs at least one row and column, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._scores = np.zeros(rows * cols, dtype=np.float64)
        self._paths = np.full(rows * cols, int(Direction.NONE), dtype=np.int8)
        self.best_score = 0.0
        self.best_row = 0
        self.best_col = 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"Cell ({i}, {j}) outside {self._rows}x{self._cols} matrix")
        return i * self._cols + j

    def get(self, i: int, j: int) -> float:
        return float(self._scores[self._index(i, j)])

    def set_score(self, i: int, j: int, value: float) -> None:
        self._scores[self._index(i, j)] = value

    def set_path(self, i: int, j: int, direction: Direction) -> None:
        self._paths[self._index(i, j)] = int(direction)

    def get_path(self, i: int, j: int) -> int:
        return int(self._paths[self._index(i, j)])

    def record_if_best(self, i: int, j: int, score: float) -> bool:
        """Remember (i, j) if score beats the best so far; ties keep the earlier cell"""
        if score > self.best_score:
            self.best_score = score
            self.best_row = i
            self.best_col = j
            return True
        return False

    def scores(self) -> np.ndarray:
        """2-D copy of the score table"""
        return self._scores.reshape(self._rows, self._cols).copy()

    def paths(self) -> np.ndarray:
        """2-D copy of the direction table"""
        return self._paths.reshape(self._rows, self._cols).copy()

    def __repr__(self) -> str:
        return (f"AlignmentMatrix({self._rows}x{self._cols}, best={self.best_score} "
                f"at ({self.best_row}, {self.best_col}))")
