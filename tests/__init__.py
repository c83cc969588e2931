"""
ProtStudio test suite.

Tests are organized by module:
- test_residues: Residue partition, classification table, descriptor lookup
- test_composition: Class counts, percentages, rounding
- test_physicochemical: Charge, aromaticity, aliphatic index, weight, hydropathy
- test_motifs: Motif registry and non-overlapping scanning
- test_analysis: Report assembly and end-to-end properties
- test_datasets: FASTA/JSON dataset loading
- test_cli: Command-line interface
"""
