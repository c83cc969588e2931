"""
Analysis report assembly.

Runs the composition analyzer, the physicochemical calculators and the motif
scanner over one sequence and bundles their results into an immutable
:class:`~protstudio.core.models.AnalysisReport`.

The assembler is total over strings: ``None`` is read as the empty sequence
and degenerate inputs (empty, only unrecognized characters) produce a report
of zeros and an empty motif list. The only exception that can escape is
:class:`~protstudio.core.residues.ConsistencyError`, which signals a defect
in the residue tables rather than bad input.

Every call works on its own values and the constant tables are read-only,
so an analyzer can be shared between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .core.models import AnalysisReport, ResidueDescriptor
from .core.residues import describe_residue
from .core.sequence import clean_sequence, normalize_sequence
from .features.composition import class_counts, composition_from_counts, residue_counts
from .features.motifs import DEFAULT_MOTIFS, MotifPattern, scan_motifs
from .features.physicochemical import (
    aliphatic_index,
    aromaticity,
    gravy,
    longest_hydrophobic_run,
    molecular_weight,
    net_charge,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """
    Configuration for sequence analysis.

    Attributes:
        motifs: Motif registry used by the scanner
        clean_input: Strip characters outside the standard alphabet before
            analysis. Off by default: the engine keeps every character and
            counts unrecognized ones as ``special``.
    """
    motifs: Sequence[MotifPattern] = DEFAULT_MOTIFS
    clean_input: bool = False

    def __post_init__(self):
        self.motifs = tuple(self.motifs)


class SequenceAnalyzer:
    """
    Entry point for the sequence analysis engine.

    Usage:
        >>> analyzer = SequenceAnalyzer()
        >>> report = analyzer.analyze("MQIFVKTLTGKTITLEVEPSDTIENVKAKIQDKEGIPPDQQRLIFAGKQLEDGRTLSDYNIQKESTLHLVLRLRGG")
        >>> report.length
        76
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config!r})"

    def prepare(self, sequence: Optional[str]) -> str:
        """Normalize, and clean if configured, the raw input sequence."""
        if self.config.clean_input:
            return clean_sequence(sequence)
        return normalize_sequence(sequence)

    def analyze(self, sequence: Optional[str]) -> AnalysisReport:
        """
        Compute the full statistics report for a sequence.

        Args:
            sequence: Protein sequence (any string; ``None`` counts as empty)

        Returns:
            AnalysisReport snapshot
        """
        seq = self.prepare(sequence)
        length = len(seq)

        counts = class_counts(seq)

        report = AnalysisReport(
            sequence=seq,
            length=length,
            counts=residue_counts(seq),
            class_counts=counts,
            composition=composition_from_counts(counts, length),
            net_charge=net_charge(seq),
            aromaticity_pct=aromaticity(seq),
            aliphatic_index=aliphatic_index(seq),
            molecular_weight_da=molecular_weight(seq),
            gravy=gravy(seq),
            longest_hydrophobic_run=longest_hydrophobic_run(seq),
            motifs=scan_motifs(seq, self.config.motifs),
        )

        logger.debug(
            f"Analyzed {length} residues: MW={report.molecular_weight_da} Da, "
            f"charge={report.net_charge}, motifs={len(report.motifs)}"
        )
        return report

    def describe_residue(self, code: str) -> ResidueDescriptor:
        return describe_residue(code)


_default_analyzer = SequenceAnalyzer()


def analyze(sequence: Optional[str], config: Optional[AnalysisConfig] = None) -> AnalysisReport:
    """
    Analyze a sequence with the default (or given) configuration.

    Example:
        >>> analyze("KK").net_charge
        1.8
    """
    if config is None:
        return _default_analyzer.analyze(sequence)
    return SequenceAnalyzer(config).analyze(sequence)
