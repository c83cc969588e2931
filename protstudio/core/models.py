"""
Core data models for ProtStudio.

This module defines the value objects exchanged between the analysis engine
and its callers: residue descriptors, composition summaries, motif matches,
the analysis report itself and the dataset record used by the loaders.
All models use Pydantic for validation and serialization, and every model
produced by the engine is frozen so a report can be shared freely once
built.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ResidueClass(str, Enum):
    """
    Coarse physicochemical class of an amino acid.

    - HYDROPHOBIC: aliphatic and aromatic side chains packing the core
    - POLAR: uncharged side chains able to hydrogen bond
    - POSITIVE: basic side chains (K, R, H)
    - NEGATIVE: acidic side chains (D, E)
    - SPECIAL: conformationally unusual residues (C, G, P)
    """
    HYDROPHOBIC = "hydrophobic"
    POLAR = "polar"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    SPECIAL = "special"


class ResidueDescriptor(BaseModel):
    """Name, class and a short note for a single residue code."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="One-letter residue code")
    name: str = Field(..., description="Full amino acid name")
    residue_class: ResidueClass = Field(
        ..., serialization_alias="class", description="Composition class"
    )
    note: str = Field("", description="Short functional remark")

    def to_dict(self) -> dict:
        """JSON-compatible dictionary using the public key ``class``."""
        return self.model_dump(mode="json", by_alias=True)


class ClassCounts(BaseModel):
    """
    Absolute residue counts per composition class.

    The five counts always add up to the sequence length: every character
    that is not in one of the four explicit classes lands in ``special``.
    """
    model_config = ConfigDict(frozen=True)

    hydrophobic: int = Field(0, ge=0)
    polar: int = Field(0, ge=0)
    positive: int = Field(0, ge=0)
    negative: int = Field(0, ge=0)
    special: int = Field(0, ge=0)

    @property
    def total(self) -> int:
        return self.hydrophobic + self.polar + self.positive + self.negative + self.special


class Composition(BaseModel):
    """
    Class composition as percentages rounded to one decimal.

    Each class is rounded independently, so the five values may add up to
    slightly more or less than 100.0.
    """
    model_config = ConfigDict(frozen=True)

    hydrophobic_pct: float = 0.0
    polar_pct: float = 0.0
    positive_pct: float = 0.0
    negative_pct: float = 0.0
    special_pct: float = 0.0

    @property
    def total(self) -> float:
        """Sum of the five class percentages."""
        return (
            self.hydrophobic_pct
            + self.polar_pct
            + self.positive_pct
            + self.negative_pct
            + self.special_pct
        )


class MotifMatch(BaseModel):
    """A single motif occurrence within a sequence."""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Label of the motif pattern that matched")
    start: int = Field(..., ge=0, description="0-indexed start position (inclusive)")
    end: int = Field(..., ge=0, description="0-indexed end position (exclusive)")
    sequence: str = Field(..., min_length=1, description="Matched residues")

    @property
    def length(self) -> int:
        return self.end - self.start


class AnalysisReport(BaseModel):
    """
    Complete statistics snapshot for one sequence.

    Created fresh on every call to :func:`protstudio.analyze` and never
    modified afterwards. Containers are read-only as well: ``counts`` is a
    mapping proxy and ``motifs`` a tuple.
    """
    model_config = ConfigDict(frozen=True)

    # Input
    sequence: str = Field("", description="Normalized (uppercase) sequence")
    length: int = Field(0, ge=0)
    counts: Mapping[str, int] = Field(
        default_factory=dict,
        validate_default=True,
        description="Raw per-character counts",
    )

    # Composition
    class_counts: ClassCounts = Field(default_factory=ClassCounts)
    composition: Composition = Field(default_factory=Composition)

    # Physicochemical indices
    net_charge: float = Field(0.0, description="Approximate net charge at pH 7")
    aromaticity_pct: float = 0.0
    aliphatic_index: float = 0.0
    molecular_weight_da: int = Field(0, description="Average molecular weight (Da)")
    gravy: float = Field(0.0, description="Kyte-Doolittle grand average of hydropathy")
    longest_hydrophobic_run: int = Field(0, ge=0)

    # Motifs
    motifs: tuple[str, ...] = Field(
        default_factory=tuple, description="Detected motifs as 'label: count'"
    )

    @field_validator("counts", mode="after")
    @classmethod
    def freeze_counts(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(v))

    @field_serializer("counts")
    def serialize_counts(self, v: Mapping[str, int]) -> dict[str, int]:
        return dict(v)

    def to_dict(self) -> dict:
        """JSON-compatible dictionary of the report."""
        return self.model_dump(mode="json")


class ProteinRecord(BaseModel):
    """
    One entry of a protein dataset.

    Sequences are expected to be cleaned by the dataset loader before the
    record is built; the model only checks that one is present.
    """
    id: str = Field(..., description="Dataset-local identifier")
    name: str = Field(..., description="Display name")
    organism: Optional[str] = None
    length: int = Field(..., ge=0)
    sequence: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)

    @field_validator("sequence")
    @classmethod
    def uppercase_sequence(cls, v: str) -> str:
        return v.upper()
