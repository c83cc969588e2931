"""
Motif scanning.

A motif is a short, named sequence pattern hinting at a functional site.
Patterns are matched greedily from left to right without overlap: once a
match is found, scanning resumes right after it, so two matches never share
a residue. For patterns such as the P-loop this gives fewer hits than an
overlapping search would.

The default registry is a quick probe, not an exhaustive PROSITE scan.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..core.models import MotifMatch
from ..core.sequence import normalize_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MotifPattern:
    """
    A named sequence pattern.

    ``pattern`` is a regular expression over one-letter codes in which
    ``.`` stands for any residue or other character except a line break.
    """
    label: str
    pattern: str
    description: str = ""
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", re.compile(self.pattern))

    @classmethod
    def compile(cls, label: str, pattern: str, description: str = "") -> MotifPattern:
        """Build a pattern, raising ``re.error`` for an invalid expression."""
        return cls(label=label, pattern=pattern, description=description)

    def finditer(self, sequence: str) -> Iterable[re.Match]:
        return self.regex.finditer(sequence)

    def count(self, sequence: str) -> int:
        """Number of non-overlapping matches in an already normalized sequence."""
        return sum(1 for _ in self.regex.finditer(sequence))


DEFAULT_MOTIFS: tuple[MotifPattern, ...] = (
    MotifPattern(
        "N-glycosylation (NXS/T)",
        r"N[^P][ST]",
        "N, any residue but P, then S or T",
    ),
    MotifPattern(
        "ATP-binding P-loop",
        r"[AG]....GKT",
        "Walker A: A or G, four residues, then GKT",
    ),
    MotifPattern(
        "HExxH metalloprotease-like",
        r"HE..H",
        "Zinc-binding HExxH",
    ),
    MotifPattern(
        "C2H2-like",
        r"C..C....H..H",
        "Zinc finger C-x2-C-x4-H-x2-H",
    ),
)


def find_motif_matches(
    sequence: str,
    patterns: Optional[Sequence[MotifPattern]] = None,
) -> list[MotifMatch]:
    """
    Locate every non-overlapping occurrence of each motif.

    Args:
        sequence: Protein sequence
        patterns: Motif registry (defaults to :data:`DEFAULT_MOTIFS`)

    Returns:
        MotifMatch objects grouped by pattern in registry order, then by
        position
    """
    seq = normalize_sequence(sequence)
    if patterns is None:
        patterns = DEFAULT_MOTIFS

    matches = []
    for motif in patterns:
        for m in motif.finditer(seq):
            matches.append(MotifMatch(
                label=motif.label,
                start=m.start(),
                end=m.end(),
                sequence=m.group(),
            ))
    return matches


def scan_motifs(
    sequence: str,
    patterns: Optional[Sequence[MotifPattern]] = None,
) -> list[str]:
    """
    Count motif occurrences.

    Args:
        sequence: Protein sequence
        patterns: Motif registry (defaults to :data:`DEFAULT_MOTIFS`)

    Returns:
        ``"label: count"`` strings in registry order; motifs without a match
        are left out
    """
    seq = normalize_sequence(sequence)
    if patterns is None:
        patterns = DEFAULT_MOTIFS

    hits = []
    for motif in patterns:
        n = motif.count(seq)
        if n > 0:
            hits.append(f"{motif.label}: {n}")
    logger.debug(f"Motif scan over {len(seq)} residues: {hits or 'none'}")
    return hits


class MotifScanner:
    """
    A motif registry bundled with the scanning functions.

    The registry is copied into a tuple on construction, so extending a
    scanner never changes :data:`DEFAULT_MOTIFS` or another scanner.

    Usage:
        >>> scanner = MotifScanner().with_pattern("RGD", "RGD")
        >>> scanner.scan("AARGDKK")
        ['RGD: 1']
    """

    def __init__(self, patterns: Optional[Iterable[MotifPattern]] = None):
        self.patterns: tuple[MotifPattern, ...] = tuple(
            DEFAULT_MOTIFS if patterns is None else patterns
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(labels={self.labels!r})"

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.patterns]

    def with_pattern(self, label: str, pattern: str, description: str = "") -> MotifScanner:
        """New scanner with one more pattern appended to the registry."""
        if label in self.labels:
            raise ValueError(f"Motif label already registered: {label}")
        return MotifScanner(self.patterns + (MotifPattern.compile(label, pattern, description),))

    def scan(self, sequence: str) -> list[str]:
        return scan_motifs(sequence, self.patterns)

    def find(self, sequence: str) -> list[MotifMatch]:
        return find_motif_matches(sequence, self.patterns)
