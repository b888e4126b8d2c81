"""
Score matrix plotting (heatmap with the backtrack path)
"""
import matplotlib.pyplot as plt
import numpy as np
from typing import Optional, Sequence, Tuple

from .observers import MatrixRecorder


def plot_matrix(
    recorder: MatrixRecorder,
    seq1: Optional[Sequence] = None,
    seq2: Optional[Sequence] = None,
    figsize: Tuple[int, int] = (8, 7),
    cmap: str = "viridis",
    annotate: Optional[bool] = None,
    font_size: int = 9,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Draw the recorded score table as a heatmap and overlay the path.
    - Rows follow seq1, columns follow seq2; row/column 0 are unlabelled.
    - Cell values are written in when the matrix is small (or annotate=True).
    """
    if recorder.scores is None:
        raise ValueError("Recorder holds no matrix; pass it as an observer and call solve() first")

    scores = recorder.scores
    rows, cols = scores.shape
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(scores, cmap=cmap, aspect="auto", interpolation="nearest")
    fig.colorbar(im, ax=ax, shrink=0.8, label="score")

    # path: backtrack order is end -> start
    if recorder.path:
        ys = [p for p, _ in recorder.path]
        xs = [q for _, q in recorder.path]
        ax.plot(xs, ys, "r-", lw=2)
        ax.plot(xs[0], ys[0], "ro", ms=6)
        ax.plot(xs[-1], ys[-1], "rs", ms=6)

    if annotate is None:
        annotate = rows * cols <= 400
    if annotate:
        for i in range(rows):
            for j in range(cols):
                ax.text(j, i, f"{scores[i, j]:g}", ha="center", va="center",
                        fontsize=font_size - 2, color="w")

    ax.set_xticks(np.arange(cols))
    ax.set_yticks(np.arange(rows))
    ax.set_xticklabels([""] + [str(s) for s in seq2] if seq2 is not None else range(cols),
                       fontsize=font_size)
    ax.set_yticklabels([""] + [str(s) for s in seq1] if seq1 is not None else range(rows),
                       fontsize=font_size)
    ax.xaxis.tick_top()

    if title is None and recorder.mode:
        title = f"{recorder.mode} alignment"
    if title:
        ax.set_title(title, fontsize=font_size + 2, fontweight="bold", pad=20)

    plt.tight_layout()
    return fig
