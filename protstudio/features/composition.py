"""
Composition analysis.

Partitions a sequence into the five composition classes and reports counts
and percentages. Membership is tested against the sets derived from
:data:`protstudio.core.residues.RESIDUE_PARTITION`; ``special`` is whatever
remains, which includes C, G, P and every unrecognized character.
"""

from __future__ import annotations

import logging
import math
from collections import Counter

from ..core.models import ClassCounts, Composition
from ..core.residues import (
    HYDROPHOBIC,
    NEGATIVE,
    POLAR,
    POSITIVE,
    ConsistencyError,
)
from ..core.sequence import normalize_sequence

logger = logging.getLogger(__name__)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round to ``ndigits`` decimals with ties going towards positive infinity.

    Python's built-in :func:`round` rounds ties to even; reported metrics
    use ``floor(x + 0.5)`` instead so that e.g. 0.25 becomes 0.3.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def pct(n: int, total: int) -> float:
    """
    Percentage of ``n`` in ``total`` rounded to one decimal.

    Defined as 0 when ``total`` is 0.
    """
    if not total:
        return 0.0
    return math.floor(n / total * 1000 + 0.5) / 10


def residue_counts(sequence: str) -> dict[str, int]:
    """Raw count of every character in the normalized sequence."""
    return dict(Counter(normalize_sequence(sequence)))


def class_counts(sequence: str) -> ClassCounts:
    """
    Count residues per composition class.

    Args:
        sequence: Protein sequence

    Returns:
        ClassCounts whose five fields sum to the sequence length

    Raises:
        ConsistencyError: If the explicit class sets overlap so that the
            special remainder would be negative
    """
    seq = normalize_sequence(sequence)
    length = len(seq)

    hydrophobic = sum(1 for aa in seq if aa in HYDROPHOBIC)
    polar = sum(1 for aa in seq if aa in POLAR)
    positive = sum(1 for aa in seq if aa in POSITIVE)
    negative = sum(1 for aa in seq if aa in NEGATIVE)
    special = length - (hydrophobic + polar + positive + negative)

    if special < 0:
        raise ConsistencyError(
            f"Composition classes overlap: {hydrophobic + polar + positive + negative} "
            f"class members counted in a sequence of length {length}"
        )

    return ClassCounts(
        hydrophobic=hydrophobic,
        polar=polar,
        positive=positive,
        negative=negative,
        special=special,
    )


def composition_from_counts(counts: ClassCounts, length: int) -> Composition:
    """Convert class counts to rounded percentages of ``length``."""
    return Composition(
        hydrophobic_pct=pct(counts.hydrophobic, length),
        polar_pct=pct(counts.polar, length),
        positive_pct=pct(counts.positive, length),
        negative_pct=pct(counts.negative, length),
        special_pct=pct(counts.special, length),
    )


def class_composition(sequence: str) -> Composition:
    """
    Class composition of a sequence as percentages.

    Each class is rounded to one decimal independently, so the total can
    differ from 100.0 by a few tenths. An empty sequence gives all zeros.
    """
    seq = normalize_sequence(sequence)
    counts = class_counts(seq)
    logger.debug(f"Class counts for {len(seq)} residues: {counts}")
    return composition_from_counts(counts, len(seq))
