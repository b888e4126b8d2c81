"""Shared fixtures for PairAlign tests."""

from typing import Sequence

import pytest

from PairAlign.seq_alignment import GAP, ScoringConfig


@pytest.fixture
def unit_scoring() -> ScoringConfig:
    """+1 match, -1 mismatch, -1 per gap."""
    return ScoringConfig.linear(1, -1, -1)


@pytest.fixture
def sw_scoring() -> ScoringConfig:
    """+3 / -3 / -2, the usual Smith-Waterman teaching scheme."""
    return ScoringConfig.linear(3, -3, -2)


def strip_gaps(aligned: Sequence, gap=GAP) -> list:
    return [s for s in aligned if s != gap]


SEQUENCE_PAIRS = [
    ("GATTACA", "GCATGCU"),
    ("TGTTACGG", "GGTTGACTA"),
    ("ACGT", "AGT"),
    ("AAAA", "TTTT"),
    ("ACACACTA", "AGCACACA"),
    ("HEAGAWGHEE", "PAWHEAE"),
    ("A", "ACGTACGT"),
]
