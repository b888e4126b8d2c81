"""Tests for the score matrix heatmap."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from PairAlign.seq_alignment import MatrixRecorder, PairwiseAligner, ScoringConfig  # noqa: E402
from PairAlign.seq_alignment.matrix_plot import plot_matrix  # noqa: E402


@pytest.fixture
def recorder():
    recorder = MatrixRecorder()
    aligner = PairwiseAligner("local", "TGTTACGG", "GGTTGACTA",
                              scoring=ScoringConfig.linear(3, -3, -2), observers=[recorder])
    aligner.solve()
    return recorder


def test_recorder_keeps_tables_and_path(recorder):
    assert recorder.scores.shape == (9, 10)
    assert recorder.scores.max() == 13.0
    assert recorder.path[0] == (6, 7)
    assert recorder.path[-1] == (1, 1)
    assert recorder.mode == "local"


def test_plot_matrix(recorder):
    fig = plot_matrix(recorder, "TGTTACGG", "GGTTGACTA")
    ax = fig.axes[0]
    assert ax.get_title() == "local alignment"
    assert [t.get_text() for t in ax.get_yticklabels()][1:] == list("TGTTACGG")
    plt.close(fig)


def test_plot_without_solve():
    with pytest.raises(ValueError):
        plot_matrix(MatrixRecorder())
