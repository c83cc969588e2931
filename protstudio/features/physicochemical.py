"""
Physicochemical indices computed directly from sequence.

All functions take a protein sequence, normalize it to uppercase and are
total: an empty sequence (or one made only of unrecognized characters)
yields 0 rather than an error. Characters missing from a property table
contribute nothing to that property.

Indices
-------
- Net charge at pH ~7 (weighted residue counts, heuristic)
- Aromaticity (percentage of F, W, Y)
- Aliphatic index (Ikai, 1980)
- Average molecular weight
- GRAVY, the grand average of hydropathy (Kyte & Doolittle, 1982)
- Longest hydrophobic run
- Windowed hydropathy profile
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

import numpy as np

from ..core.residues import HYDROPHOBIC
from ..core.sequence import normalize_sequence
from .composition import pct, round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# Amino Acid Property Scales
# =============================================================================

# Kyte-Doolittle hydrophobicity scale
# Positive = hydrophobic, Negative = hydrophilic
HYDROPATHY_KD: Mapping[str, float] = MappingProxyType({
    'A': 1.8, 'R': -4.5, 'N': -3.5, 'D': -3.5, 'C': 2.5,
    'Q': -3.5, 'E': -3.5, 'G': -0.4, 'H': -3.2, 'I': 4.5,
    'L': 3.8, 'K': -3.9, 'M': 1.9, 'F': 2.8, 'P': -1.6,
    'S': -0.8, 'T': -0.7, 'W': -0.9, 'Y': -1.3, 'V': 4.2,
})

# Average residue mass (Da), i.e. amino acid mass minus one water
RESIDUE_MASS: Mapping[str, float] = MappingProxyType({
    'A': 71.0788, 'R': 156.1875, 'N': 114.1038, 'D': 115.0886, 'C': 103.1388,
    'Q': 128.1307, 'E': 129.1155, 'G': 57.0519, 'H': 137.1411, 'I': 113.1594,
    'L': 113.1594, 'K': 128.1741, 'M': 131.1926, 'F': 147.1766, 'P': 97.1167,
    'S': 87.0782, 'T': 101.1051, 'W': 186.2132, 'Y': 163.1760, 'V': 99.1326,
})

WATER_MASS = 18.015

# Charge weights at pH ~7. K/R are mostly protonated, H only marginally.
CHARGE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    'K': 0.9, 'R': 0.9, 'H': 0.1, 'D': -1.0, 'E': -1.0,
})

AROMATIC = frozenset("FWY")

# Relative side chain volumes of Val and Ile/Leu versus Ala
ALIPHATIC_COEFF_V = 2.9
ALIPHATIC_COEFF_IL = 3.9


# =============================================================================
# Indices
# =============================================================================

def net_charge(sequence: str) -> float:
    """
    Approximate net charge at pH 7, rounded to one decimal.

    Computed as ``0.9*K + 0.9*R + 0.1*H - D - E``. This is a quick
    count-based heuristic, not a titration over residue pKa values; terminal
    groups and C/Y ionization are ignored.
    """
    seq = normalize_sequence(sequence)
    charge = 0.0
    for aa, weight in CHARGE_WEIGHTS.items():
        charge += seq.count(aa) * weight
    return round_half_up(charge, 1)


def aromaticity(sequence: str) -> float:
    """Percentage of aromatic residues (F, W, Y), one decimal."""
    seq = normalize_sequence(sequence)
    n_aromatic = sum(1 for aa in seq if aa in AROMATIC)
    return pct(n_aromatic, len(seq))


def aliphatic_index(sequence: str) -> float:
    """
    Aliphatic index, rounded to one decimal.

    ``xA + 2.9*xV + 3.9*(xI + xL)`` where each ``x`` is the mole percent of
    the residue as reported by :func:`pct` (already rounded to one decimal).
    Higher values have been correlated with thermostability of globular
    proteins.
    """
    seq = normalize_sequence(sequence)
    n = len(seq)

    x_ala = pct(seq.count('A'), n)
    x_val = pct(seq.count('V'), n)
    x_ile = pct(seq.count('I'), n)
    x_leu = pct(seq.count('L'), n)

    index = x_ala + ALIPHATIC_COEFF_V * x_val + ALIPHATIC_COEFF_IL * (x_ile + x_leu)
    return round_half_up(index, 1)


def molecular_weight(sequence: str) -> int:
    """
    Average molecular weight in Daltons, rounded to the nearest integer.

    Sum of the residue masses with one water removed per peptide bond
    (``18.015 * (length - 1)`` for sequences longer than one residue).
    Unrecognized characters add no mass.
    """
    seq = normalize_sequence(sequence)
    weight = 0.0
    for aa in seq:
        weight += RESIDUE_MASS.get(aa, 0.0)
    if len(seq) > 1:
        weight -= WATER_MASS * (len(seq) - 1)
    return int(round_half_up(weight))


def gravy(sequence: str) -> float:
    """
    Grand average of hydropathy (Kyte-Doolittle), rounded to two decimals.

    Averaged over the full length; unrecognized characters count as 0.
    """
    seq = normalize_sequence(sequence)
    if not seq:
        return 0.0
    total = 0.0
    for aa in seq:
        total += HYDROPATHY_KD.get(aa, 0.0)
    return round_half_up(total / len(seq), 2)


def longest_hydrophobic_run(sequence: str) -> int:
    """Length of the longest contiguous stretch of A, I, L, M, F, W, V."""
    best = 0
    current = 0
    for aa in normalize_sequence(sequence):
        if aa in HYDROPHOBIC:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def hydropathy_profile(sequence: str, window: int = 9) -> np.ndarray:
    """
    Sliding-window Kyte-Doolittle hydropathy profile.

    Each value is the mean hydropathy of ``window`` consecutive residues,
    reported for every window start, so the profile has
    ``len(sequence) - window + 1`` points. Windows of 9-11 residues suit
    surface exposure, 19-21 highlight transmembrane segments.

    Args:
        sequence: Protein sequence
        window: Odd window size

    Returns:
        1D float array (empty if the sequence is shorter than the window)

    Raises:
        ValueError: If the window is not a positive odd integer
    """
    if window < 1 or window % 2 == 0:
        raise ValueError(f"Window size must be a positive odd integer, got {window}")

    seq = normalize_sequence(sequence)
    if len(seq) < window:
        logger.debug(f"Sequence of length {len(seq)} shorter than window {window}")
        return np.zeros(0)

    values = np.array([HYDROPATHY_KD.get(aa, 0.0) for aa in seq])
    kernel = np.ones(window) / window
    return np.convolve(values, kernel, mode="valid")
