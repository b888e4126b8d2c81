"""
Error types raised by the pairwise aligner
"""


class AlignmentError(Exception):
    """Base class for every error raised by the aligner"""


class InvalidInputError(AlignmentError, ValueError):
    """Sequences, alphabet, mode or scoring values cannot be aligned"""


class UnconfiguredScoringError(AlignmentError):
    """solve() was called before any scoring scheme was set"""


class ScoringAlreadySetError(AlignmentError):
    """The scoring scheme is frozen once set"""


class InternalInconsistencyError(AlignmentError):
    """The direction table holds a tag no recurrence branch produces"""

    def __init__(self, row: int, col: int, tag: int):
        self.row = row
        self.col = col
        self.tag = tag
        super().__init__(
            f"Invalid direction tag {tag!r} at cell ({row}, {col}) during backtrack"
        )
