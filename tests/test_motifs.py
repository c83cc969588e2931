"""
Unit tests for motif scanning.

Matching is greedy, left to right and non-overlapping. Several tests use
sequences where an overlapping search would report more hits, to pin that
rule down.
"""

import re

import pytest

from protstudio.core.models import MotifMatch
from protstudio.features.motifs import (
    DEFAULT_MOTIFS,
    MotifPattern,
    MotifScanner,
    find_motif_matches,
    scan_motifs,
)


NGLYC = "N-glycosylation (NXS/T)"
PLOOP = "ATP-binding P-loop"
HEXXH = "HExxH metalloprotease-like"
C2H2 = "C2H2-like"


class TestRegistry:
    def test_default_order(self):
        assert [m.label for m in DEFAULT_MOTIFS] == [NGLYC, PLOOP, HEXXH, C2H2]

    def test_patterns_are_compiled(self):
        for motif in DEFAULT_MOTIFS:
            assert motif.regex.pattern == motif.pattern

    def test_patterns_are_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_MOTIFS[0].label = "other"

    def test_invalid_pattern(self):
        with pytest.raises(re.error):
            MotifPattern.compile("broken", "[AG")


class TestScanMotifs:
    """Counting motif occurrences."""

    def test_n_glycosylation(self):
        assert scan_motifs("NAS") == [f"{NGLYC}: 1"]
        assert scan_motifs("NGT") == [f"{NGLYC}: 1"]

    def test_n_glycosylation_proline_excluded(self):
        assert scan_motifs("NPS") == []

    def test_n_glycosylation_twice(self):
        assert scan_motifs("NASKNGT") == [f"{NGLYC}: 2"]

    def test_p_loop(self):
        assert scan_motifs("GAAAAGKT") == [f"{PLOOP}: 1"]

    def test_p_loop_non_overlapping(self):
        """A second P-loop starting at the first one's G is not counted."""
        sequence = "AAAAAGKTAAGKT"
        assert scan_motifs(sequence) == [f"{PLOOP}: 1"]
        # an overlapping search would find two
        overlapping = re.findall(r"(?=([AG]....GKT))", sequence)
        assert len(overlapping) == 2

    def test_hexxh(self):
        assert scan_motifs("AHEAAHA") == [f"{HEXXH}: 1"]

    def test_hexxh_shared_histidine(self):
        """HEAAHEAAH holds two overlapping HExxH but only one is counted."""
        assert scan_motifs("HEAAHEAAH") == [f"{HEXXH}: 1"]
        assert scan_motifs("HEAAHHEAAH") == [f"{HEXXH}: 2"]

    def test_c2h2(self):
        assert scan_motifs("CAACAAAAHAAH") == [f"{C2H2}: 1"]

    def test_registry_order_not_alphabetical(self):
        sequence = "CAACAAAAHAAH" + "NAS"
        assert scan_motifs(sequence) == [f"{NGLYC}: 1", f"{C2H2}: 1"]

    def test_lowercase(self):
        assert scan_motifs("heaah") == [f"{HEXXH}: 1"]

    def test_no_match_omitted(self):
        assert scan_motifs("AAAAAAAAAA") == []

    def test_empty(self):
        assert scan_motifs("") == []

    def test_wildcard_matches_unrecognized(self):
        assert scan_motifs("HE*?H") == [f"{HEXXH}: 1"]

    def test_wildcard_does_not_match_line_break(self):
        assert scan_motifs("HE\n\nH") == []
        assert scan_motifs("HE \tH") == [f"{HEXXH}: 1"]

    def test_negated_class_matches_line_break(self):
        assert scan_motifs("N\nS") == [f"{NGLYC}: 1"]

    def test_custom_patterns(self):
        patterns = [MotifPattern.compile("RGD", "RGD")]
        assert scan_motifs("RGDNASRGD", patterns) == ["RGD: 2"]


class TestFindMotifMatches:
    def test_spans(self):
        matches = find_motif_matches("AAAAAGKTAAGKT")
        assert matches == [
            MotifMatch(label=PLOOP, start=0, end=8, sequence="AAAAAGKT")
        ]

    def test_multiple_motifs(self):
        matches = find_motif_matches("NASHEAAH")
        assert [(m.label, m.start, m.end) for m in matches] == [
            (NGLYC, 0, 3),
            (HEXXH, 3, 8),
        ]
        assert matches[1].sequence == "HEAAH"
        assert matches[1].length == 5

    def test_no_matches(self):
        assert find_motif_matches("") == []


class TestMotifScanner:
    def test_default_registry(self):
        scanner = MotifScanner()
        assert scanner.labels == [NGLYC, PLOOP, HEXXH, C2H2]
        assert scanner.scan("NAS") == scan_motifs("NAS")

    def test_with_pattern_leaves_default_untouched(self):
        scanner = MotifScanner().with_pattern("RGD", "RGD", "Integrin binding")
        assert scanner.labels[-1] == "RGD"
        assert len(DEFAULT_MOTIFS) == 4
        assert MotifScanner().labels == [NGLYC, PLOOP, HEXXH, C2H2]
        assert scanner.scan("RGDNAS") == [f"{NGLYC}: 1", "RGD: 1"]

    def test_duplicate_label(self):
        with pytest.raises(ValueError, match="already registered"):
            MotifScanner().with_pattern(C2H2, "CC")

    def test_find(self):
        scanner = MotifScanner([MotifPattern.compile("KK", "KK")])
        assert [m.start for m in scanner.find("KKKKK")] == [0, 2]
