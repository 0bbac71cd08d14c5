"""
Structure Analyzer

Derives summary statistics from parsed ATOM records:
- residue and atom counts
- mean pLDDT over alpha carbons and its confidence tier
- bounding-box dimensions
- estimated molecular weight

pLDDT tiers (AlphaFold / ESMFold convention):
- >= 90: Very High
- >= 70: High
- >= 50: Medium
- < 50: Low
"""

import logging
import math
from typing import Iterable

import numpy as np

from .fold_types import (
    AVG_RESIDUE_WEIGHT,
    AtomRecord,
    ConfidenceTier,
    Dimensions,
    ProteinStats,
)
from .pdb_parser import parse_pdb_records

logger = logging.getLogger(__name__)

BACKBONE_ATOM_NAME = "CA"

CONFIDENCE_THRESHOLDS = (
    (90.0, ConfidenceTier.VERY_HIGH),
    (70.0, ConfidenceTier.HIGH),
    (50.0, ConfidenceTier.MEDIUM),
)


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like a UI would (2.25 -> 2.3), not banker's rounding."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def confidence_tier(mean_plddt: float) -> ConfidenceTier:
    """Map a mean pLDDT onto its tier; lower bounds are inclusive."""
    for threshold, tier in CONFIDENCE_THRESHOLDS:
        if mean_plddt >= threshold:
            return tier
    return ConfidenceTier.LOW


def estimate_molecular_weight(residue_count: int) -> float:
    """Molecular weight in kDa at AVG_RESIDUE_WEIGHT Da per residue."""
    return math.floor(residue_count * AVG_RESIDUE_WEIGHT / 100 + 0.5) / 10


def analyze_structure(records: Iterable[AtomRecord]) -> ProteinStats:
    """
    Compute ProteinStats for a set of atom records.

    Args:
        records: AtomRecords from parse_pdb_records

    Returns:
        ProteinStats; all-zero with tier Low when there are no records
    """
    records = list(records)
    if not records:
        return ProteinStats()

    coords = np.array([(r.x, r.y, r.z) for r in records], dtype=float)
    extents = coords.max(axis=0) - coords.min(axis=0)

    residues = {r.residue_seq for r in records if r.residue_seq is not None}

    backbone = [r for r in records if r.atom_name == BACKBONE_ATOM_NAME]
    plddts = [r.b_factor for r in backbone if r.b_factor is not None]
    mean_plddt = float(np.mean(plddts)) if plddts else 0.0

    if backbone and not plddts:
        logger.warning(f"None of {len(backbone)} CA atoms carry a readable B-factor")

    return ProteinStats(
        residue_count=len(residues),
        atom_count=len(records),
        average_plddt=round_half_up(mean_plddt),
        confidence_level=confidence_tier(mean_plddt),
        dimensions=Dimensions(
            width=round_half_up(float(extents[0])),
            height=round_half_up(float(extents[1])),
            depth=round_half_up(float(extents[2])),
        ),
        molecular_weight=estimate_molecular_weight(len(residues)),
        backbone_atoms=len(backbone),
    )


def parse_pdb_stats(pdb_content: str) -> ProteinStats:
    """Parse PDB text and analyze it in one step."""
    return analyze_structure(parse_pdb_records(pdb_content))
