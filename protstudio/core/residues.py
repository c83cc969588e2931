"""
Residue classification table.

The five composition classes are defined exactly once, in
:data:`RESIDUE_PARTITION`. The per-residue descriptor table and the
membership sets used by the composition counters are both derived from it,
so the two views cannot drift apart. :func:`verify_partition` re-checks
that derivation and is run once when the module is imported.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from .models import ResidueClass, ResidueDescriptor

logger = logging.getLogger(__name__)


# Standard amino acid alphabet
STANDARD_AA = frozenset("ACDEFGHIKLMNPQRSTVWY")

# Single source of truth for residue classes
RESIDUE_PARTITION: Mapping[ResidueClass, frozenset[str]] = MappingProxyType({
    ResidueClass.HYDROPHOBIC: frozenset("AILMFWV"),
    ResidueClass.POLAR: frozenset("STNQY"),
    ResidueClass.POSITIVE: frozenset("KRH"),
    ResidueClass.NEGATIVE: frozenset("DE"),
    ResidueClass.SPECIAL: frozenset("CGP"),
})

# Names and notes; the class of each residue comes from RESIDUE_PARTITION
_RESIDUE_NOTES = {
    'A': ("Alanine", "Small, helix-friendly"),
    'R': ("Arginine", "Strongly basic; binds phosphates"),
    'N': ("Asparagine", "H-bonding; turns"),
    'D': ("Aspartate", "Acidic; salt bridges"),
    'C': ("Cysteine", "Disulfides; redox"),
    'Q': ("Glutamine", "H-bonding; flexible"),
    'E': ("Glutamate", "Acidic; helix capper"),
    'G': ("Glycine", "Very flexible; tight turns"),
    'H': ("Histidine", "pH-sensitive; catalysis"),
    'I': ("Isoleucine", "Bulky hydrophobe"),
    'L': ("Leucine", "Helix, coiled-coils"),
    'K': ("Lysine", "Basic; surface"),
    'M': ("Methionine", "Start; thioether"),
    'F': ("Phenylalanine", "Aromatic core packing"),
    'P': ("Proline", "Helix breaker; kinks"),
    'S': ("Serine", "Phosphorylation; H-bonds"),
    'T': ("Threonine", "Phosphorylation; beta sheets"),
    'W': ("Tryptophan", "Large aromatic; binding"),
    'Y': ("Tyrosine", "Aromatic; phosphorylation"),
    'V': ("Valine", "Beta sheets; core"),
}

UNKNOWN_RESIDUE_NAME = "Unknown"
UNKNOWN_RESIDUE_CLASS = ResidueClass.POLAR


class ConsistencyError(Exception):
    """Raised when the residue classes and the composition sets disagree."""
    pass


def _class_of(code: str) -> ResidueClass:
    for residue_class, members in RESIDUE_PARTITION.items():
        if code in members:
            return residue_class
    raise ConsistencyError(f"Residue {code!r} is not assigned to any class")


def _build_table() -> Mapping[str, ResidueDescriptor]:
    table = {}
    for code, (name, note) in _RESIDUE_NOTES.items():
        table[code] = ResidueDescriptor(
            code=code,
            name=name,
            residue_class=_class_of(code),
            note=note,
        )
    return MappingProxyType(table)


RESIDUE_TABLE: Mapping[str, ResidueDescriptor] = _build_table()

# Membership sets used by the composition counters. Special is the
# complement inside a sequence, so it has no explicit set here.
HYDROPHOBIC = RESIDUE_PARTITION[ResidueClass.HYDROPHOBIC]
POLAR = RESIDUE_PARTITION[ResidueClass.POLAR]
POSITIVE = RESIDUE_PARTITION[ResidueClass.POSITIVE]
NEGATIVE = RESIDUE_PARTITION[ResidueClass.NEGATIVE]

COMPOSITION_SETS: Mapping[ResidueClass, frozenset[str]] = MappingProxyType({
    ResidueClass.HYDROPHOBIC: HYDROPHOBIC,
    ResidueClass.POLAR: POLAR,
    ResidueClass.POSITIVE: POSITIVE,
    ResidueClass.NEGATIVE: NEGATIVE,
})


def verify_partition(
    partition: Mapping[ResidueClass, frozenset[str]] = RESIDUE_PARTITION,
    table: Mapping[str, ResidueDescriptor] = RESIDUE_TABLE,
    composition_sets: Mapping[ResidueClass, frozenset[str]] = COMPOSITION_SETS,
) -> None:
    """
    Check that the partition, the descriptor table and the composition sets agree.

    The partition must cover the 20 standard residues with disjoint classes,
    the table must hold one descriptor per standard residue whose class
    matches the partition, and the explicit composition sets restricted to
    the standard alphabet must equal the matching partition classes (with
    special being whatever is left over).

    Raises:
        ConsistencyError: On any disagreement
    """
    seen: set[str] = set()
    for residue_class, members in partition.items():
        overlap = seen & members
        if overlap:
            raise ConsistencyError(
                f"Residues {sorted(overlap)} assigned to more than one class "
                f"(last: {residue_class.value})"
            )
        seen |= members

    if seen != STANDARD_AA:
        raise ConsistencyError(
            f"Partition covers {sorted(seen)}, expected the 20 standard residues"
        )

    if set(table) != STANDARD_AA:
        raise ConsistencyError(
            f"Residue table keys {sorted(table)} differ from the standard alphabet"
        )

    for code, descriptor in table.items():
        expected = [rc for rc, members in partition.items() if code in members]
        if descriptor.residue_class not in expected:
            raise ConsistencyError(
                f"Residue {code} is {descriptor.residue_class.value} in the table "
                f"but {expected[0].value} in the partition"
            )

    explicit: set[str] = set()
    for residue_class, members in composition_sets.items():
        restricted = members & STANDARD_AA
        if restricted != partition[residue_class]:
            raise ConsistencyError(
                f"Composition set for {residue_class.value} does not match the partition"
            )
        if explicit & restricted:
            raise ConsistencyError("Composition sets are not disjoint")
        explicit |= restricted

    special = STANDARD_AA - explicit
    if special != partition[ResidueClass.SPECIAL]:
        raise ConsistencyError(
            f"Residues left for special {sorted(special)} do not match the partition"
        )

    logger.debug("Residue partition verified")


def describe_residue(code: str) -> ResidueDescriptor:
    """
    Look up the descriptor of a residue code.

    Unknown characters get a fallback descriptor named ``Unknown`` with the
    ``polar`` class and an empty note; the lookup never fails.

    Args:
        code: One-letter residue code (case-insensitive)

    Returns:
        ResidueDescriptor for the code
    """
    key = (code or "").upper()
    descriptor = RESIDUE_TABLE.get(key)
    if descriptor is not None:
        return descriptor
    return ResidueDescriptor(
        code=key,
        name=UNKNOWN_RESIDUE_NAME,
        residue_class=UNKNOWN_RESIDUE_CLASS,
        note="",
    )


def residue_track(sequence: str) -> list[ResidueDescriptor]:
    """Descriptor for every position of a sequence, in order."""
    return [describe_residue(aa) for aa in (sequence or "").upper()]


verify_partition()
