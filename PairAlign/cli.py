"""Command-line interface for PairAlign.

Reads two sequences from a FASTA or plain-text file, aligns them and prints
the alignment with its score.

Usage:
    pairalign input.fasta --mode global --match 1 --mismatch -1 --indel -1
    pairalign input.txt --mode local --config scoring.yaml --plot matrix.png
"""

import logging

import click

from PairAlign.seq_alignment import (
    AlignmentError,
    LoggingObserver,
    MatrixRecorder,
    PairwiseAligner,
    ScoringConfig,
    load_scoring_config,
)
from PairAlign.seq_alignment.io import read_input

LOGGER = logging.getLogger(__name__)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Align the first two sequences of INPUT_FILE (FASTA or one sequence per line).",
)
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=str),
)
@click.option(
    "-m",
    "--mode",
    default="global",
    show_default=True,
    type=click.Choice(["global", "local"], case_sensitive=False),
    help="Alignment mode.",
)
@click.option("--match", type=float, default=1.0, show_default=True, help="Match bonus.")
@click.option("--mismatch", type=float, default=-1.0, show_default=True, help="Mismatch penalty.")
@click.option("--indel", type=float, default=-1.0, show_default=True, help="Indel penalty.")
@click.option(
    "--gap",
    type=float,
    default=None,
    help="Leading end-gap penalty in global mode (defaults to --indel).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=str),
    default=None,
    help="YAML scoring file; overrides --match/--mismatch/--indel/--gap.",
)
@click.option(
    "--strict-alphabet/--open-alphabet",
    default=True,
    show_default=True,
    help="Reject symbols outside an alphabet declared in the input file.",
)
@click.option("-w", "--width", type=click.IntRange(min=1), default=80, show_default=True,
              help="Columns per alignment block.")
@click.option(
    "--plot",
    "plot_path",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Save a heatmap of the score matrix with the backtrack path.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
def main(
    input_file: str,
    mode: str,
    match: float,
    mismatch: float,
    indel: float,
    gap: float,
    config_path: str,
    strict_alphabet: bool,
    width: int,
    plot_path: str,
    verbose: bool,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        data = read_input(input_file)
        if config_path:
            scoring = load_scoring_config(config_path)
        else:
            scoring = ScoringConfig.linear(match, mismatch, indel, gap)

        observers = []
        if verbose:
            observers.append(LoggingObserver())
        recorder = None
        if plot_path:
            recorder = MatrixRecorder()
            observers.append(recorder)

        alphabet = data.alphabet if strict_alphabet and data.alphabet_declared else None
        aligner = PairwiseAligner(
            mode,
            data.seq1,
            data.seq2,
            alphabet=alphabet,
            scoring=scoring,
            observers=observers,
        )
        result = aligner.solve()
    except AlignmentError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"# {data.name1} vs {data.name2}")
    click.echo(result.format(width))

    if recorder is not None:
        import matplotlib

        matplotlib.use("Agg")
        from PairAlign.seq_alignment.matrix_plot import plot_matrix

        fig = plot_matrix(recorder, data.seq1, data.seq2)
        fig.savefig(plot_path)
        LOGGER.info("Wrote matrix plot to %s", plot_path)


if __name__ == "__main__":
    main()
