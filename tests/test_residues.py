"""
Unit tests for the residue classification table.

The classification table and the composition counters are both derived
from one residue partition; these tests pin that derivation down so the
two views cannot silently drift apart.
"""

from types import MappingProxyType

import pytest

from protstudio.core.models import ResidueClass, ResidueDescriptor
from protstudio.core.residues import (
    COMPOSITION_SETS,
    HYDROPHOBIC,
    NEGATIVE,
    POLAR,
    POSITIVE,
    RESIDUE_PARTITION,
    RESIDUE_TABLE,
    STANDARD_AA,
    ConsistencyError,
    describe_residue,
    residue_track,
    verify_partition,
)


class TestResiduePartition:
    """The partition must cover the 20 standard residues exactly once."""

    def test_twenty_descriptors(self):
        assert len(RESIDUE_TABLE) == 20
        assert set(RESIDUE_TABLE) == STANDARD_AA

    def test_partition_is_complete_and_disjoint(self):
        members = [aa for residues in RESIDUE_PARTITION.values() for aa in residues]
        assert len(members) == len(set(members)) == 20
        assert set(members) == STANDARD_AA

    def test_class_sets(self):
        assert RESIDUE_PARTITION[ResidueClass.HYDROPHOBIC] == set("AILMFWV")
        assert RESIDUE_PARTITION[ResidueClass.POLAR] == set("STNQY")
        assert RESIDUE_PARTITION[ResidueClass.POSITIVE] == set("KRH")
        assert RESIDUE_PARTITION[ResidueClass.NEGATIVE] == set("DE")
        assert RESIDUE_PARTITION[ResidueClass.SPECIAL] == set("CGP")

    def test_table_matches_composition_sets(self):
        """Every table class equals the class implied by the counting sets."""
        for code, descriptor in RESIDUE_TABLE.items():
            if code in HYDROPHOBIC:
                expected = ResidueClass.HYDROPHOBIC
            elif code in POLAR:
                expected = ResidueClass.POLAR
            elif code in POSITIVE:
                expected = ResidueClass.POSITIVE
            elif code in NEGATIVE:
                expected = ResidueClass.NEGATIVE
            else:
                expected = ResidueClass.SPECIAL
            assert descriptor.residue_class == expected, code

    def test_special_is_the_complement(self):
        explicit = set().union(*COMPOSITION_SETS.values())
        assert STANDARD_AA - explicit == set("CGP")

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            RESIDUE_TABLE["X"] = describe_residue("X")
        with pytest.raises(TypeError):
            RESIDUE_PARTITION[ResidueClass.POLAR] = frozenset("X")

    def test_shipped_tables_verify(self):
        verify_partition()


class TestVerifyPartition:
    """Drift between the table and the sets must surface as ConsistencyError."""

    def _partition(self, **overrides):
        data = dict(RESIDUE_PARTITION)
        for name, residues in overrides.items():
            data[ResidueClass(name)] = frozenset(residues)
        return MappingProxyType(data)

    def test_overlapping_classes(self):
        partition = self._partition(polar="STNQYA")
        with pytest.raises(ConsistencyError, match="more than one class"):
            verify_partition(partition=partition)

    def test_missing_residue(self):
        partition = self._partition(special="GP")
        with pytest.raises(ConsistencyError, match="standard residues"):
            verify_partition(partition=partition)

    def test_table_class_mismatch(self):
        table = dict(RESIDUE_TABLE)
        table["W"] = ResidueDescriptor(
            code="W", name="Tryptophan", residue_class=ResidueClass.POLAR, note=""
        )
        with pytest.raises(ConsistencyError, match="Residue W"):
            verify_partition(table=table)

    def test_composition_set_mismatch(self):
        sets = dict(COMPOSITION_SETS)
        sets[ResidueClass.POLAR] = frozenset("STNQ")
        with pytest.raises(ConsistencyError, match="polar"):
            verify_partition(composition_sets=sets)


class TestDescribeResidue:
    """Lookup is total: every character yields a descriptor."""

    def test_known_residue(self):
        info = describe_residue("W")
        assert info.code == "W"
        assert info.name == "Tryptophan"
        assert info.residue_class == ResidueClass.HYDROPHOBIC
        assert info.note == "Large aromatic; binding"

    def test_lowercase_lookup(self):
        assert describe_residue("c") == describe_residue("C")
        assert describe_residue("c").residue_class == "special"

    def test_unknown_residue_fallback(self):
        info = describe_residue("Z")
        assert info.code == "Z"
        assert info.name == "Unknown"
        assert info.residue_class == ResidueClass.POLAR
        assert info.note == ""

    def test_to_dict_uses_class_key(self):
        assert describe_residue("W").to_dict() == {
            "code": "W",
            "name": "Tryptophan",
            "class": "hydrophobic",
            "note": "Large aromatic; binding",
        }

    def test_tyrosine_is_polar(self):
        """Tyrosine is classed polar even though it is aromatic."""
        assert describe_residue("Y").residue_class == ResidueClass.POLAR

    @pytest.mark.parametrize("code", list("ACDEFGHIKLMNPQRSTVWYXBZJUO*-19 .") + ["", "é"])
    def test_every_character_has_a_class(self, code):
        info = describe_residue(code)
        assert info.residue_class.value
        assert info.name

    def test_residue_track(self):
        track = residue_track("mKz")
        assert [d.code for d in track] == ["M", "K", "Z"]
        assert [d.residue_class for d in track] == [
            ResidueClass.HYDROPHOBIC,
            ResidueClass.POSITIVE,
            ResidueClass.POLAR,
        ]

    def test_residue_track_empty(self):
        assert residue_track("") == []
        assert residue_track(None) == []
