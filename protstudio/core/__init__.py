"""
Core data structures and residue tables for ProtStudio.

Modules:
    models: Pydantic data models for descriptors, reports and dataset records
    residues: The residue partition and the classification table derived from it
    sequence: Sequence normalization and cleaning
"""

from .models import (
    AnalysisReport,
    ClassCounts,
    Composition,
    MotifMatch,
    ProteinRecord,
    ResidueClass,
    ResidueDescriptor,
)
from .residues import (
    COMPOSITION_SETS,
    RESIDUE_PARTITION,
    RESIDUE_TABLE,
    STANDARD_AA,
    ConsistencyError,
    describe_residue,
    residue_track,
    verify_partition,
)
from .sequence import clean_sequence, normalize_sequence, unrecognized_residues

__all__ = [
    # Models
    "AnalysisReport",
    "ClassCounts",
    "Composition",
    "MotifMatch",
    "ProteinRecord",
    "ResidueClass",
    "ResidueDescriptor",
    # Residue table
    "STANDARD_AA",
    "RESIDUE_PARTITION",
    "RESIDUE_TABLE",
    "COMPOSITION_SETS",
    "ConsistencyError",
    "describe_residue",
    "residue_track",
    "verify_partition",
    # Sequence utilities
    "normalize_sequence",
    "clean_sequence",
    "unrecognized_residues",
]
