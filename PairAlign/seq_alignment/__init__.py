"""
Sequence Alignment Module
Exact pairwise global and local alignment
"""

from .errors import (
    AlignmentError,
    InternalInconsistencyError,
    InvalidInputError,
    ScoringAlreadySetError,
    UnconfiguredScoringError,
)
from .matrix import AlignmentMatrix, Direction
from .modes import GLOBAL, LOCAL, AlignmentMode, resolve_mode
from .observers import AlignmentObserver, LoggingObserver, MatrixRecorder
from .pairwise import (
    PairwiseAligner,
    AlignmentResult,
    pairwise
)
from .scoring import GAP, ScoringConfig, ScoringPolicy, load_scoring_config

__all__ = [
    "PairwiseAligner",
    "AlignmentResult",
    "pairwise",
    "AlignmentMode",
    "GLOBAL",
    "LOCAL",
    "resolve_mode",
    "AlignmentMatrix",
    "Direction",
    "GAP",
    "ScoringConfig",
    "ScoringPolicy",
    "load_scoring_config",
    "AlignmentObserver",
    "LoggingObserver",
    "MatrixRecorder",
    "AlignmentError",
    "InvalidInputError",
    "UnconfiguredScoringError",
    "ScoringAlreadySetError",
    "InternalInconsistencyError",
]
