"""
Global and local alignment as two instances of one strategy record

The engine runs a single fill / backtrack skeleton; everything that differs
between Needleman-Wunsch and Smith-Waterman is one of the hooks below.
"""

from dataclasses import dataclass
from typing import Callable, Hashable, Sequence, Tuple, Union

from .errors import InvalidInputError
from .matrix import AlignmentMatrix, Direction
from .scoring import ScoringPolicy

Candidate = Tuple[float, Direction]


@dataclass(frozen=True)
class AlignmentMode:
    """
    Mode-specific hooks used by PairwiseAligner

    init_boundary(matrix, seq_a, seq_b, policy)
        Fill row 0 and column 0 before the recurrence runs.
    extra_candidates
        Candidates appended after diagonal, up and left.
    start_cell(matrix) -> (row, col)
        Where backtracking begins.
    continue_backtrack(matrix, p, q) -> bool
        Whether backtracking takes another step from (p, q).
    final_score(matrix) -> float
        The alignment score once the matrix is filled.
    """
    name: str
    init_boundary: Callable[[AlignmentMatrix, Sequence[Hashable], Sequence[Hashable], ScoringPolicy], None]
    extra_candidates: Tuple[Candidate, ...]
    start_cell: Callable[[AlignmentMatrix], Tuple[int, int]]
    continue_backtrack: Callable[[AlignmentMatrix, int, int], bool]
    final_score: Callable[[AlignmentMatrix], float]
    track_best: bool
    boundary_gaps: bool

    def __str__(self) -> str:
        return self.name


# ---------- global ----------
def _global_boundary(matrix, seq_a, seq_b, policy):
    step = policy.boundary_gap()
    matrix.set_score(0, 0, 0.0)
    for i in range(1, len(seq_a) + 1):
        matrix.set_score(i, 0, matrix.get(i - 1, 0) + step)
        matrix.set_path(i, 0, Direction.UP)
    for j in range(1, len(seq_b) + 1):
        matrix.set_score(0, j, matrix.get(0, j - 1) + step)
        matrix.set_path(0, j, Direction.LEFT)


def _global_start(matrix):
    rows, cols = matrix.shape
    return rows - 1, cols - 1


def _global_continue(matrix, p, q):
    return p > 0 or q > 0


def _global_score(matrix):
    rows, cols = matrix.shape
    return matrix.get(rows - 1, cols - 1)


# ---------- local ----------
def _local_boundary(matrix, seq_a, seq_b, policy):
    # row 0 and column 0 stay at zero: a local alignment may begin anywhere
    pass


def _local_start(matrix):
    return matrix.best_row, matrix.best_col


def _local_continue(matrix, p, q):
    return matrix.get(p, q) > 0


def _local_score(matrix):
    return matrix.best_score


GLOBAL = AlignmentMode(
    name="global",
    init_boundary=_global_boundary,
    extra_candidates=(),
    start_cell=_global_start,
    continue_backtrack=_global_continue,
    final_score=_global_score,
    track_best=False,
    boundary_gaps=True,
)

LOCAL = AlignmentMode(
    name="local",
    init_boundary=_local_boundary,
    extra_candidates=((0.0, Direction.RESET),),
    start_cell=_local_start,
    continue_backtrack=_local_continue,
    final_score=_local_score,
    track_best=True,
    boundary_gaps=False,
)

MODES = {mode.name: mode for mode in (GLOBAL, LOCAL)}


def resolve_mode(mode: Union[str, AlignmentMode]) -> AlignmentMode:
    """Accept "global" / "local" (any case) or an AlignmentMode"""
    if isinstance(mode, AlignmentMode):
        return mode
    try:
        return MODES[str(mode).lower()]
    except KeyError:
        raise InvalidInputError(
            f"Unknown alignment mode {mode!r}; expected one of {sorted(MODES)}"
        ) from None
