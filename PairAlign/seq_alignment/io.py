"""
Read the two sequences (and optionally their alphabet) from a file

Two layouts are accepted:
- FASTA: the first two records are aligned (parsed with Biopython)
- plain text: the first two non-blank lines are the sequences

In both, a comment line `# alphabet: ACGT` fixes the alphabet; any other
line starting with `#` is ignored.
"""

import io as _io
import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from Bio import SeqIO

from .errors import InvalidInputError
from .scoring import GAP

LOGGER = logging.getLogger(__name__)

_ALPHABET_TAG = "alphabet:"


@dataclass(frozen=True)
class SequenceInput:
    """Two named sequences plus the alphabet they are drawn from"""
    name1: str
    seq1: str
    name2: str
    seq2: str
    alphabet: FrozenSet[str]
    alphabet_declared: bool = False


def infer_alphabet(*seqs: str) -> FrozenSet[str]:
    """Symbols used by the sequences, gap marker excluded"""
    symbols = set()
    for seq in seqs:
        symbols.update(seq)
    symbols.discard(GAP)
    return frozenset(symbols)


def _split_comments(text: str) -> Tuple[List[str], Optional[FrozenSet[str]]]:
    body, alphabet = [], None
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("#"):
            comment = line[1:].strip()
            if comment.lower().startswith(_ALPHABET_TAG):
                declared = comment[len(_ALPHABET_TAG):].replace(",", "").split()
                alphabet = frozenset("".join(declared))
            continue
        body.append(line)
    return body, alphabet


def _parse_fasta(lines: List[str], path: str) -> List[Tuple[str, str]]:
    handle = _io.StringIO("\n".join(lines) + "\n")
    try:
        records = list(SeqIO.parse(handle, "fasta"))
    except ValueError as e:
        raise InvalidInputError(f"Error reading FASTA file {path}: {e}") from e
    return [(record.id, str(record.seq)) for record in records]


def _parse_plain(lines: List[str]) -> List[Tuple[str, str]]:
    seqs = [line for line in lines if line]
    return [(f"seq{k + 1}", seq) for k, seq in enumerate(seqs)]


def read_input(path: str, fmt: str = "auto", upper: bool = True) -> SequenceInput:
    """
    Read the first two sequences from a FASTA or plain-text file

    Args:
        path: Input file
        fmt: "fasta", "plain" or "auto" (FASTA if the first line starts with '>')
        upper: Upper-case sequences and alphabet

    Returns:
        SequenceInput with the declared alphabet, or one inferred from the sequences
    """
    try:
        with open(path, "r") as f:
            text = f.read()
    except FileNotFoundError:
        raise InvalidInputError(f"File does not exist: {path}") from None
    except UnicodeDecodeError:
        raise InvalidInputError(f"File is not a valid text file: {path}") from None

    lines, alphabet = _split_comments(text)
    if fmt == "auto":
        first = next((line for line in lines if line), "")
        fmt = "fasta" if first.startswith(">") else "plain"

    if fmt == "fasta":
        records = _parse_fasta(lines, path)
    elif fmt == "plain":
        records = _parse_plain(lines)
    else:
        raise InvalidInputError(f"Unknown input format: {fmt!r}")

    if len(records) < 2:
        raise InvalidInputError(
            f"Need two sequences in {path}, found {len(records)}"
        )
    if len(records) > 2:
        LOGGER.info("%s holds %d sequences; aligning the first two", path, len(records))

    (name1, seq1), (name2, seq2) = records[0], records[1]
    if upper:
        seq1, seq2 = seq1.upper(), seq2.upper()
        if alphabet is not None:
            alphabet = frozenset(s.upper() for s in alphabet)

    declared = alphabet is not None
    if not declared:
        alphabet = infer_alphabet(seq1, seq2)

    return SequenceInput(name1, seq1, name2, seq2, alphabet, declared)
