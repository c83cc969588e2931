"""
Sequence normalization utilities for ProtStudio.

The analysis engine only ever uppercases its input; it never drops
characters. Stripping non-standard characters is a pre-processing step that
belongs to whoever supplies the sequence (an editor, a dataset loader, the
CLI with ``--clean``), and :func:`clean_sequence` is provided for them.
"""

from __future__ import annotations

from typing import Optional

from .residues import STANDARD_AA


def normalize_sequence(sequence: Optional[str]) -> str:
    """
    Normalize a sequence for analysis.

    ``None`` is treated as the empty sequence. Characters are uppercased
    and otherwise kept as-is, so the normalized length equals the input
    length.
    """
    if sequence is None:
        return ""
    return str(sequence).upper()


def clean_sequence(sequence: Optional[str]) -> str:
    """
    Uppercase a sequence and drop every character outside the standard alphabet.

    Whitespace, digits, gaps, stop symbols and ambiguous codes (B, X, Z...)
    are all removed.

    Args:
        sequence: Raw sequence text

    Returns:
        Sequence containing only the 20 standard residues
    """
    return "".join(aa for aa in normalize_sequence(sequence) if aa in STANDARD_AA)


def unrecognized_residues(sequence: Optional[str]) -> set[str]:
    """Characters of the normalized sequence outside the standard alphabet."""
    return set(normalize_sequence(sequence)) - STANDARD_AA
