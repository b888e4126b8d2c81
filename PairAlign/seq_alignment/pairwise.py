"""
Pairwise Sequence Alignment Module
Exact global (Needleman-Wunsch) and local (Smith-Waterman) alignment
with a linear gap scoring scheme
"""

import logging
from dataclasses import dataclass
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import (
    InternalInconsistencyError,
    InvalidInputError,
    ScoringAlreadySetError,
    UnconfiguredScoringError,
)
from .matrix import AlignmentMatrix, Direction
from .modes import AlignmentMode, resolve_mode
from .observers import AlignmentObserver
from .scoring import GAP, ScoringConfig, ScoringPolicy

LOGGER = logging.getLogger(__name__)

# Past this many cells the O(n*m) tables start to hurt
LARGE_MATRIX_CELLS = 10 ** 8

SymbolSeq = Union[str, Sequence[Hashable]]
Aligned = Union[str, Tuple[Hashable, ...]]


@dataclass(frozen=True)
class AlignmentResult:
    """Store alignment results and metadata"""
    seq1_aligned: Aligned
    seq2_aligned: Aligned
    score: float
    start1: int
    end1: int
    start2: int
    end2: int
    alignment_type: str
    match_string: str
    identity: float
    similarity: float
    gaps: int

    def __len__(self) -> int:
        return len(self.seq1_aligned)

    def format(self, width: int = 80) -> str:
        """Render the alignment in blocks with match indicators"""
        row1 = _display(self.seq1_aligned)
        row2 = _display(self.seq2_aligned)

        lines = []
        lines.append(f"Type: {self.alignment_type}")
        lines.append(f"Identity: {self.identity:.2%}")
        lines.append(f"Similarity: {self.similarity:.2%}")
        lines.append(f"Gaps: {self.gaps}")
        lines.append(f"Score: {self.score:g}")
        lines.append("")

        for start in range(0, len(row1), width):
            end = min(start + width, len(row1))
            lines.append(f"pattern: {row1[start:end]}")
            lines.append(f"         {self.match_string[start:end]}")
            lines.append(f"subject: {row2[start:end]}")
            lines.append("")

        return "\n".join(lines)

    def view(self, width: int = 80) -> None:
        """Print format()"""
        print(self.format(width))

    def nmatch(self) -> int:
        """Number of matching positions"""
        return self.match_string.count("|")


def _display(aligned: Aligned) -> str:
    if isinstance(aligned, str):
        return aligned
    return "".join(str(s) for s in aligned)


class PairwiseAligner:
    """
    Align two sequences with the full dynamic-programming matrix

    One aligner owns one pair of sequences and, once set, one frozen
    scoring scheme. Every solve() builds a fresh matrix, so repeated calls
    return identical results.
    """

    def __init__(
        self,
        mode: Union[str, AlignmentMode],
        seq1: SymbolSeq,
        seq2: SymbolSeq,
        alphabet: Optional[Iterable[Hashable]] = None,
        gap: Hashable = GAP,
        scoring: Optional[ScoringConfig] = None,
        observers: Optional[Iterable[AlignmentObserver]] = None,
    ):
        """
        Parameters:
        -----------
        mode : str or AlignmentMode
            "global" or "local"
        seq1 : str or sequence
            First sequence (pattern)
        seq2 : str or sequence
            Second sequence (subject)
        alphabet : iterable, optional
            Allowed symbols. If given, any other symbol is rejected here;
            if None the alphabet is open and taken from the sequences
        gap : hashable
            Gap marker, must not occur in either sequence (default "-")
        scoring : ScoringConfig, optional
            Scoring scheme; otherwise call set_scoring() before solve()
        observers : iterable of AlignmentObserver, optional
            Called after the fill and after the backtrack
        """
        self._mode = resolve_mode(mode)
        self._gap = gap
        self._seq1 = tuple(seq1)
        self._seq2 = tuple(seq2)
        self._as_text = (isinstance(seq1, str) and isinstance(seq2, str)
                         and isinstance(gap, str) and len(gap) == 1)
        self._alphabet = self._check_symbols(alphabet)
        self._policy: Optional[ScoringPolicy] = None
        self._observers: List[AlignmentObserver] = list(observers or [])

        if scoring is not None:
            self._set_config(scoring)

    def _check_symbols(self, alphabet: Optional[Iterable[Hashable]]) -> frozenset:
        gap = self._gap
        for label, seq in (("seq1", self._seq1), ("seq2", self._seq2)):
            if gap in seq:
                raise InvalidInputError(
                    f"{label} contains the gap marker {gap!r} at position {seq.index(gap)}"
                )

        if alphabet is None:
            return frozenset(self._seq1) | frozenset(self._seq2)

        allowed = frozenset(alphabet)
        if gap in allowed:
            raise InvalidInputError(f"Alphabet must not contain the gap marker {gap!r}")
        for label, seq in (("seq1", self._seq1), ("seq2", self._seq2)):
            unknown = set(seq) - allowed
            if unknown:
                shown = ", ".join(sorted(repr(s) for s in unknown))
                raise InvalidInputError(f"{label} has symbols outside the alphabet: {shown}")
        return allowed

    # ---------- configuration ----------
    @property
    def mode(self) -> AlignmentMode:
        return self._mode

    @property
    def alphabet(self) -> frozenset:
        return self._alphabet

    @property
    def scoring(self) -> Optional[ScoringConfig]:
        return None if self._policy is None else self._policy.config

    def set_scoring(
        self,
        match_bonus: float,
        mismatch_penalty: float,
        indel_penalty: float,
        gap_penalty: Optional[float] = None,
    ) -> ScoringConfig:
        """
        Freeze the scoring scheme; allowed exactly once

        gap_penalty is the cost of each leading end gap in global mode and
        defaults to indel_penalty.
        """
        config = ScoringConfig.linear(match_bonus, mismatch_penalty, indel_penalty, gap_penalty)
        self._set_config(config)
        return config

    def _set_config(self, config: ScoringConfig) -> None:
        if self._policy is not None:
            raise ScoringAlreadySetError(
                f"Scoring already set to {self._policy.config.as_dict()}"
            )
        self._policy = ScoringPolicy(config, gap=self._gap)

    def add_observer(self, observer: AlignmentObserver) -> None:
        self._observers.append(observer)

    # ---------- algorithm ----------
    def _initialize_matrix(self) -> AlignmentMatrix:
        """Allocate the (n+1) x (m+1) tables and set row/column 0"""
        rows, cols = len(self._seq1) + 1, len(self._seq2) + 1
        if rows * cols > LARGE_MATRIX_CELLS:
            LOGGER.warning("Aligning %d x %d symbols needs %d cells; memory is O(n*m)",
                           rows - 1, cols - 1, rows * cols)
        matrix = AlignmentMatrix(rows, cols)
        self._mode.init_boundary(matrix, self._seq1, self._seq2, self._policy)
        return matrix

    def _possible_scores(self, matrix: AlignmentMatrix, i: int, j: int) -> List[Tuple[float, Direction]]:
        """Candidates for cell (i, j) in fixed order: diagonal, up, left, mode extras"""
        score = self._policy.score
        a = self._seq1[i - 1]
        b = self._seq2[j - 1]
        candidates = [
            (matrix.get(i - 1, j - 1) + score(a, b), Direction.DIAG),
            (matrix.get(i - 1, j) + score(self._gap, a), Direction.UP),
            (matrix.get(i, j - 1) + score(b, self._gap), Direction.LEFT),
        ]
        candidates.extend(self._mode.extra_candidates)
        return candidates

    @staticmethod
    def _select(candidates: List[Tuple[float, Direction]]) -> Tuple[float, Direction]:
        """First maximum wins"""
        best = candidates[0]
        for candidate in candidates[1:]:
            if candidate[0] > best[0]:
                best = candidate
        return best

    def _fill_matrix(self, matrix: AlignmentMatrix) -> None:
        """Row-major fill; cell (i, j) only reads (i-1, j-1), (i-1, j) and (i, j-1)"""
        track_best = self._mode.track_best
        for i in range(1, len(self._seq1) + 1):
            for j in range(1, len(self._seq2) + 1):
                value, direction = self._select(self._possible_scores(matrix, i, j))
                matrix.set_score(i, j, value)
                matrix.set_path(i, j, direction)
                if track_best:
                    matrix.record_if_best(i, j, value)

    def _traceback(self, matrix: AlignmentMatrix):
        """
        Walk the direction table from the mode's start cell

        Returns the two aligned columns in forward order, the visited cells,
        and the stop and start cells.
        """
        aligned1, aligned2 = [], []
        p, q = self._mode.start_cell(matrix)
        start = (p, q)
        path = [start]

        while self._mode.continue_backtrack(matrix, p, q):
            tag = matrix.get_path(p, q)
            if tag == Direction.DIAG:
                aligned1.append(self._seq1[p - 1])
                aligned2.append(self._seq2[q - 1])
                p -= 1
                q -= 1
            elif tag == Direction.UP:
                aligned1.append(self._seq1[p - 1])
                aligned2.append(self._gap)
                p -= 1
            elif tag == Direction.LEFT:
                aligned1.append(self._gap)
                aligned2.append(self._seq2[q - 1])
                q -= 1
            else:
                raise InternalInconsistencyError(p, q, tag)
            path.append((p, q))

        aligned1.reverse()
        aligned2.reverse()
        return aligned1, aligned2, path, (p, q), start

    def _calculate_match_string(self, aligned1: Sequence[Hashable], aligned2: Sequence[Hashable]) -> str:
        """Generate match string"""
        match_str = []
        for a, b in zip(aligned1, aligned2):
            if a == self._gap or b == self._gap:
                match_str.append(' ')
            elif a == b:
                match_str.append('|')
            else:
                match_str.append('.')
        return ''.join(match_str)

    def _calculate_statistics(
        self,
        aligned1: Sequence[Hashable],
        aligned2: Sequence[Hashable]
    ) -> Tuple[float, float, int]:
        """Calculate alignment statistics"""
        gap = self._gap
        matches = sum(1 for a, b in zip(aligned1, aligned2) if a == b and a != gap)
        similar = sum(1 for a, b in zip(aligned1, aligned2) if a != gap and b != gap)
        gaps = sum(1 for a in aligned1 if a == gap) + sum(1 for b in aligned2 if b == gap)

        identity = matches / len(aligned1) if len(aligned1) > 0 else 0.0
        similarity = similar / len(aligned1) if len(aligned1) > 0 else 0.0

        return identity, similarity, gaps

    def _output(self, aligned: List[Hashable]) -> Aligned:
        if self._as_text:
            return "".join(aligned)
        return tuple(aligned)

    def solve(self) -> AlignmentResult:
        """
        Run the fill and backtrack and return the alignment

        Returns:
        --------
        AlignmentResult
            Equal-length aligned rows and the optimal score

        Raises:
        -------
        UnconfiguredScoringError
            If no scoring scheme has been set
        InternalInconsistencyError
            If the backtrack meets a cell without a valid direction tag
        """
        if self._policy is None:
            raise UnconfiguredScoringError(
                "Call set_scoring() or pass scoring= before solve()"
            )

        LOGGER.debug("Aligning %d x %d symbols in %s mode",
                     len(self._seq1), len(self._seq2), self._mode)
        matrix = self._initialize_matrix()
        self._fill_matrix(matrix)
        for observer in self._observers:
            observer.on_fill(matrix, self._mode)

        aligned1, aligned2, path, (start1, start2), (end1, end2) = self._traceback(matrix)

        identity, similarity, gaps = self._calculate_statistics(aligned1, aligned2)
        result = AlignmentResult(
            seq1_aligned=self._output(aligned1),
            seq2_aligned=self._output(aligned2),
            score=self._mode.final_score(matrix),
            start1=start1,
            end1=end1,
            start2=start2,
            end2=end2,
            alignment_type=self._mode.name,
            match_string=self._calculate_match_string(aligned1, aligned2),
            identity=identity,
            similarity=similarity,
            gaps=gaps,
        )
        for observer in self._observers:
            observer.on_backtrack(matrix, path, result)

        LOGGER.debug("Alignment score %g, length %d", result.score, len(result))
        return result

    def rescore(self, result: AlignmentResult) -> float:
        """Recompute a result's score column by column through the scoring policy"""
        if self._policy is None:
            raise UnconfiguredScoringError("No scoring scheme to replay against")
        return self._policy.replay(
            result.seq1_aligned,
            result.seq2_aligned,
            boundary_gaps=self._mode.boundary_gaps,
        )

    def __repr__(self) -> str:
        return (f"PairwiseAligner(mode={self._mode.name!r}, len1={len(self._seq1)}, "
                f"len2={len(self._seq2)}, scoring={self.scoring})")


# MAIN CONVENIENCE FUNCTION
def pairwise(
    seq1: SymbolSeq,
    seq2: SymbolSeq,
    mode: Union[str, AlignmentMode] = "global",
    match: float = 1.0,
    mismatch: float = -1.0,
    indel: float = -1.0,
    gap: Optional[float] = None,
    alphabet: Optional[Iterable[Hashable]] = None,
    observers: Optional[Iterable[AlignmentObserver]] = None,
) -> AlignmentResult:
    """
    Align two sequences in one call

    Parameters:
    -----------
    seq1, seq2 : str or sequence
        Sequences to align
    mode : str
        "global" (default) or "local"
    match, mismatch, indel : float
        Linear scoring scheme (defaults +1 / -1 / -1)
    gap : float, optional
        Leading end-gap cost in global mode (defaults to indel)
    alphabet : iterable, optional
        Reject symbols outside this alphabet

    Examples:
    ---------
    >>> result = pairwise("ACGT", "AGT")
    >>> result.seq1_aligned, result.seq2_aligned, result.score
    ('ACGT', 'A-GT', 2.0)
    >>> pairwise("TGTTACGG", "GGTTGACTA", mode="local",
    ...          match=3, mismatch=-3, indel=-2).score
    13.0
    """
    aligner = PairwiseAligner(mode, seq1, seq2, alphabet=alphabet, observers=observers)
    aligner.set_scoring(match, mismatch, indel, gap)
    return aligner.solve()
