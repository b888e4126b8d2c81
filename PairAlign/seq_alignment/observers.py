"""
Diagnostic hooks called by PairwiseAligner

The aligner never prints or logs from inside the recurrence. It calls each
observer once after the fill and once after the backtrack.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .matrix import AlignmentMatrix

LOGGER = logging.getLogger(__name__)


class AlignmentObserver:
    """No-op base; subclass and override what you need"""

    def on_fill(self, matrix: AlignmentMatrix, mode) -> None:
        pass

    def on_backtrack(self, matrix: AlignmentMatrix, path: List[Tuple[int, int]], result) -> None:
        pass


class LoggingObserver(AlignmentObserver):
    """Log the filled matrix and the backtrack path"""

    def __init__(self, logger: Optional[logging.Logger] = None,
                 level: int = logging.DEBUG, max_cells: int = 400):
        self.logger = logger or LOGGER
        self.level = level
        self.max_cells = max_cells

    def on_fill(self, matrix, mode):
        if not self.logger.isEnabledFor(self.level):
            return
        rows, cols = matrix.shape
        self.logger.log(self.level, "%s matrix filled: %d x %d, best %.4g at (%d, %d)",
                        mode, rows, cols, matrix.best_score, matrix.best_row, matrix.best_col)
        if rows * cols <= self.max_cells:
            table = np.array2string(matrix.scores(), precision=2, suppress_small=True)
            self.logger.log(self.level, "Scores:\n%s", table)

    def on_backtrack(self, matrix, path, result):
        if not self.logger.isEnabledFor(self.level):
            return
        self.logger.log(self.level, "Backtrack visited %d cells: %s",
                        len(path), " -> ".join(f"({p},{q})" for p, q in path))
        self.logger.log(self.level, "Alignment length %d, score %.4g",
                        len(result.seq1_aligned), result.score)


class MatrixRecorder(AlignmentObserver):
    """Keep copies of the last filled tables and path, e.g. for plot_matrix()"""

    def __init__(self):
        self.scores: Optional[np.ndarray] = None
        self.paths: Optional[np.ndarray] = None
        self.path: List[Tuple[int, int]] = []
        self.mode: Optional[str] = None

    def on_fill(self, matrix, mode):
        self.scores = matrix.scores()
        self.paths = matrix.paths()
        self.mode = str(mode)
        self.path = []

    def on_backtrack(self, matrix, path, result):
        self.path = list(path)
