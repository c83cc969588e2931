"""
Sequence-derived features.

- composition: class counts and percentages
- physicochemical: charge, aromaticity, aliphatic index, weight, hydropathy
- motifs: named pattern scanning
"""

from .composition import (
    class_counts,
    class_composition,
    pct,
    residue_counts,
    round_half_up,
)
from .motifs import (
    DEFAULT_MOTIFS,
    MotifPattern,
    MotifScanner,
    find_motif_matches,
    scan_motifs,
)
from .physicochemical import (
    CHARGE_WEIGHTS,
    HYDROPATHY_KD,
    RESIDUE_MASS,
    aliphatic_index,
    aromaticity,
    gravy,
    hydropathy_profile,
    longest_hydrophobic_run,
    molecular_weight,
    net_charge,
)

__all__ = [
    # Composition
    "class_counts",
    "class_composition",
    "pct",
    "residue_counts",
    "round_half_up",
    # Physicochemical
    "net_charge",
    "aromaticity",
    "aliphatic_index",
    "molecular_weight",
    "gravy",
    "longest_hydrophobic_run",
    "hydropathy_profile",
    "HYDROPATHY_KD",
    "RESIDUE_MASS",
    "CHARGE_WEIGHTS",
    # Motifs
    "DEFAULT_MOTIFS",
    "MotifPattern",
    "MotifScanner",
    "find_motif_matches",
    "scan_motifs",
]
