"""
Linear gap scoring scheme

A ScoringConfig holds the four parameters; a ScoringPolicy applies them to a
pair of symbols. Both are frozen once built.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Optional, Sequence

import yaml

from .errors import InvalidInputError

LOGGER = logging.getLogger(__name__)

GAP = "-"


@dataclass(frozen=True)
class ScoringConfig:
    """Match bonus, mismatch penalty and the two gap costs"""
    match_bonus: float
    mismatch_penalty: float
    indel_penalty: float
    gap_penalty: float

    def __post_init__(self) -> None:
        for name in ("match_bonus", "mismatch_penalty", "indel_penalty", "gap_penalty"):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise InvalidInputError(f"{name} must be a number, got {value!r}") from None
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be finite, got {value!r}")
            object.__setattr__(self, name, value)

    @classmethod
    def linear(
        cls,
        match_bonus: float,
        mismatch_penalty: float,
        indel_penalty: float,
        gap_penalty: Optional[float] = None,
    ) -> "ScoringConfig":
        """Build a config where the boundary gap cost defaults to the indel cost"""
        if gap_penalty is None:
            gap_penalty = indel_penalty
        return cls(match_bonus, mismatch_penalty, indel_penalty, gap_penalty)

    def as_dict(self) -> Dict[str, float]:
        return {
            "match": self.match_bonus,
            "mismatch": self.mismatch_penalty,
            "indel": self.indel_penalty,
            "gap": self.gap_penalty,
        }


class ScoringPolicy:
    """Score one aligned column under a ScoringConfig"""

    def __init__(self, config: ScoringConfig, gap: Hashable = GAP):
        self._config = config
        self._gap = gap

    @property
    def config(self) -> ScoringConfig:
        return self._config

    @property
    def gap(self) -> Hashable:
        return self._gap

    def score(self, a: Hashable, b: Hashable) -> float:
        """
        Score symbol a against symbol b

        Exactly one gap costs the indel penalty whichever side it is on.
        Two gaps never form a column, so that case is rejected.
        """
        a_gap = a == self._gap
        b_gap = b == self._gap
        if a_gap and b_gap:
            raise InvalidInputError("Cannot score a gap against a gap")
        if a_gap or b_gap:
            return self._config.indel_penalty
        if a == b:
            return self._config.match_bonus
        return self._config.mismatch_penalty

    def boundary_gap(self) -> float:
        """Cost of one leading end gap in the global boundary rows"""
        return self._config.gap_penalty

    def replay(
        self,
        aligned_a: Sequence[Hashable],
        aligned_b: Sequence[Hashable],
        boundary_gaps: bool = False,
    ) -> float:
        """
        Recompute the score of an alignment column by column

        Parameters:
        -----------
        aligned_a, aligned_b : sequence
            The two rows of the alignment, gaps included
        boundary_gaps : bool
            If True (global mode), the leading run of gaps on one side was
            produced by the boundary row/column and costs gap_penalty each

        Returns:
        --------
        float
            Sum of the column scores
        """
        if len(aligned_a) != len(aligned_b):
            raise InvalidInputError(
                f"Aligned rows differ in length: {len(aligned_a)} != {len(aligned_b)}"
            )

        lead = 0
        if boundary_gaps and aligned_a:
            lead_side = self._gap_side(aligned_a[0], aligned_b[0])
            if lead_side is not None:
                while lead < len(aligned_a) and self._gap_side(aligned_a[lead], aligned_b[lead]) == lead_side:
                    lead += 1

        total = lead * self.boundary_gap()
        for a, b in zip(aligned_a[lead:], aligned_b[lead:]):
            total += self.score(a, b)
        return total

    def _gap_side(self, a: Hashable, b: Hashable) -> Optional[int]:
        if a == self._gap and b != self._gap:
            return 0
        if b == self._gap and a != self._gap:
            return 1
        return None


def _scoring_from_mapping(data: Dict[str, Any], source: str) -> ScoringConfig:
    if "scoring" in data and isinstance(data["scoring"], dict):
        data = data["scoring"]
    missing = [key for key in ("match", "mismatch", "indel") if key not in data]
    if missing:
        raise InvalidInputError(f"Scoring config {source} is missing keys: {', '.join(missing)}")
    return ScoringConfig.linear(
        data["match"], data["mismatch"], data["indel"], data.get("gap")
    )


def load_scoring_config(path: str) -> ScoringConfig:
    """
    Load a scoring scheme from a YAML file

    The file holds `match`, `mismatch`, `indel` and optionally `gap`, either
    at top level or under a `scoring:` key. Unlike a general settings file,
    there is no fallback: a scheme that cannot be read is an error.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise InvalidInputError(f"Scoring config not found: {path}") from None
    except yaml.YAMLError as e:
        raise InvalidInputError(f"Error loading scoring config {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidInputError(f"Scoring config {path} must be a mapping")
    config = _scoring_from_mapping(data, path)
    LOGGER.debug("Loaded scoring %s from %s", config.as_dict(), path)
    return config
