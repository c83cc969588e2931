"""
ProtStudio: descriptive statistics for protein sequences.

Turns a raw amino-acid sequence into an immutable report of residue class
composition, physicochemical indices (net charge, aromaticity, aliphatic
index, molecular weight, GRAVY, longest hydrophobic run) and motif hits,
and looks up per-residue descriptors.

The engine is pure computation: no I/O, no shared mutable state, and it
never rejects a string. Characters outside the 20 standard residues are
kept and counted in the ``special`` class; stripping them is up to the
caller (see :func:`protstudio.core.sequence.clean_sequence`).

Key components:
    - core: Residue tables, data models, sequence normalization
    - features: Composition, physicochemical indices, motif scanning
    - analysis: Report assembly and configuration
    - datasets: FASTA/JSON dataset loading and the sample dataset
    - cli: Command-line interface

Basic usage:
    >>> from protstudio import analyze, describe_residue
    >>> report = analyze("MKTAYIAKQRQISFVKSHFSRQ")
    >>> report.longest_hydrophobic_run
    2
    >>> describe_residue("W").name
    'Tryptophan'
"""

__version__ = "0.1.0"

from .core.models import (
    AnalysisReport,
    ClassCounts,
    Composition,
    MotifMatch,
    ProteinRecord,
    ResidueClass,
    ResidueDescriptor,
)
from .core.residues import ConsistencyError, describe_residue, residue_track
from .analysis import AnalysisConfig, SequenceAnalyzer, analyze
from .features.motifs import DEFAULT_MOTIFS, MotifPattern, MotifScanner

__all__ = [
    # Version
    "__version__",
    # Main functions
    "analyze",
    "describe_residue",
    "residue_track",
    # Engine
    "AnalysisConfig",
    "SequenceAnalyzer",
    # Models
    "AnalysisReport",
    "ClassCounts",
    "Composition",
    "MotifMatch",
    "ProteinRecord",
    "ResidueClass",
    "ResidueDescriptor",
    # Motifs
    "DEFAULT_MOTIFS",
    "MotifPattern",
    "MotifScanner",
    # Errors
    "ConsistencyError",
]
