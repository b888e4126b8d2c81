"""Tests for the scoring config, policy and YAML loader."""

import math

import pytest

from PairAlign.seq_alignment import (
    GAP,
    InvalidInputError,
    ScoringConfig,
    ScoringPolicy,
    load_scoring_config,
)


class TestScoringConfig:
    def test_linear_defaults_gap_to_indel(self):
        config = ScoringConfig.linear(2, -1, -3)
        assert config.gap_penalty == -3.0
        assert config.indel_penalty == -3.0

    def test_values_are_coerced_to_float(self):
        config = ScoringConfig(1, -1, -2, -4)
        assert isinstance(config.match_bonus, float)
        assert config.as_dict() == {"match": 1.0, "mismatch": -1.0, "indel": -2.0, "gap": -4.0}

    def test_config_is_frozen(self):
        config = ScoringConfig.linear(1, -1, -1)
        with pytest.raises(AttributeError):
            config.match_bonus = 5

    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan, "abc", None])
    def test_rejects_non_finite_or_non_numeric(self, bad):
        with pytest.raises(InvalidInputError):
            ScoringConfig(bad, -1, -1, -1)


class TestScoringPolicy:
    @pytest.fixture
    def policy(self):
        return ScoringPolicy(ScoringConfig(2, -3, -1, -5))

    def test_match_and_mismatch(self, policy):
        assert policy.score("A", "A") == 2.0
        assert policy.score("A", "C") == -3.0

    def test_gap_is_order_independent(self, policy):
        assert policy.score(GAP, "A") == -1.0
        assert policy.score("A", GAP) == -1.0

    def test_gap_against_gap_is_rejected(self, policy):
        with pytest.raises(InvalidInputError):
            policy.score(GAP, GAP)

    def test_boundary_gap_uses_gap_penalty(self, policy):
        assert policy.boundary_gap() == -5.0

    def test_custom_gap_marker(self):
        policy = ScoringPolicy(ScoringConfig.linear(1, -1, -2), gap=None)
        assert policy.score(None, "x") == -2.0
        assert policy.score("-", "-") == 1.0

    def test_replay_interior_gaps(self, policy):
        # A/A match, C/- indel, G/T mismatch
        assert policy.replay("ACG", "A-T") == 2 - 1 - 3

    def test_replay_charges_leading_run_as_boundary(self, policy):
        # two leading gaps on the same side come from the boundary row
        assert policy.replay("--A", "CGA", boundary_gaps=True) == -5 - 5 + 2
        # a switch of side ends the leading run
        assert policy.replay("-A", "C-", boundary_gaps=True) == -5 - 1
        assert policy.replay("-A", "C-", boundary_gaps=False) == -1 - 1

    def test_replay_rejects_unequal_rows(self, policy):
        with pytest.raises(InvalidInputError):
            policy.replay("AC", "A")


class TestLoadScoringConfig:
    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "scoring.yaml"
        path.write_text("match: 3\nmismatch: -3\nindel: -2\n")
        config = load_scoring_config(str(path))
        assert config == ScoringConfig(3, -3, -2, -2)

    def test_nested_scoring_section_with_gap(self, tmp_path):
        path = tmp_path / "scoring.yaml"
        path.write_text("scoring:\n  match: 1\n  mismatch: -1\n  indel: -1\n  gap: -4\n")
        config = load_scoring_config(str(path))
        assert config.gap_penalty == -4.0

    def test_missing_keys(self, tmp_path):
        path = tmp_path / "scoring.yaml"
        path.write_text("match: 1\n")
        with pytest.raises(InvalidInputError, match="mismatch, indel"):
            load_scoring_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInputError):
            load_scoring_config(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "scoring.yaml"
        path.write_text("match: [1, 2\n")
        with pytest.raises(InvalidInputError):
            load_scoring_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "scoring.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(InvalidInputError):
            load_scoring_config(str(path))
