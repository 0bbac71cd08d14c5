"""
Protein "personality" sentences.

Picks one phrase on each of three axes (shape, size, uniqueness) and joins
them into a sentence. Selection is a pure function of the sequence: a seed
is computed as sum(ord(char) * position) and each pool is indexed with
(seed + offset) % len(pool), so a given protein always gets the same text.
"""

import logging

from .fold_types import ProteinStats

logger = logging.getLogger(__name__)

# Shape, keyed by aspect ratio
ELONGATED_DESCRIPTORS = (
    "elegantly elongated",
    "reaching outward like an embrace",
    "stretched like a promise",
    "extending with quiet confidence",
    "unfolding like a story",
)
COMPACT_DESCRIPTORS = (
    "tightly wound together",
    "nestled into itself",
    "compact like a shared secret",
    "curled up like a comfortable silence",
    "folded inward with intention",
)
BALANCED_DESCRIPTORS = (
    "harmoniously proportioned",
    "balanced like a good conversation",
    "evenly distributed",
    "symmetrically arranged",
    "proportioned with care",
)

# Size, keyed by residue count
TINY_DESCRIPTORS = (
    "small but mighty",
    "concentrated essence",
    "distilled to its core",
    "minimal yet meaningful",
)
MEDIUM_DESCRIPTORS = (
    "substantial presence",
    "room to breathe",
    "space for complexity",
    "enough to hold memories",
)
LARGE_DESCRIPTORS = (
    "expansive and intricate",
    "rich with detail",
    "layered with meaning",
    "complex enough for a lifetime",
)

# Uniqueness, keyed by 100 - mean pLDDT
VERY_UNIQUE_DESCRIPTORS = (
    "unlike anything nature has seen",
    "a true original",
    "defying biological convention",
    "blazing its own trail",
    "one of a kind in every way",
)
UNIQUE_DESCRIPTORS = (
    "distinctly yours",
    "carrying your signature",
    "marked by individuality",
    "bearing your fingerprint",
)
FAMILIAR_DESCRIPTORS = (
    "echoing ancient patterns",
    "with hints of the familiar",
    "nodding to what came before",
)

CONNECTORS = (" — ", ". ", ", and ", " with ")

ELONGATED_ASPECT_RATIO = 2.5
COMPACT_ASPECT_RATIO = 1.4
TINY_RESIDUES = 20
MEDIUM_RESIDUES = 45
VERY_UNIQUE_THRESHOLD = 60
UNIQUE_THRESHOLD = 40


def sequence_seed(sequence: str) -> int:
    """Position-weighted character sum of the sequence."""
    return sum(ord(char) * (i + 1) for i, char in enumerate(sequence))


def _pick(pool, seed: int) -> str:
    return pool[seed % len(pool)]


def _capitalize(phrase: str) -> str:
    return phrase[:1].upper() + phrase[1:]


def _shape_phrase(stats: ProteinStats, seed: int) -> str:
    dims = stats.dimensions.as_tuple()
    # Short axes under 1 A count as 1 A
    aspect_ratio = max(dims) / max(min(dims), 1)
    if aspect_ratio > ELONGATED_ASPECT_RATIO:
        return _pick(ELONGATED_DESCRIPTORS, seed)
    if aspect_ratio < COMPACT_ASPECT_RATIO:
        return _pick(COMPACT_DESCRIPTORS, seed + 7)
    return _pick(BALANCED_DESCRIPTORS, seed + 3)


def _size_phrase(stats: ProteinStats, seed: int) -> str:
    if stats.residue_count < TINY_RESIDUES:
        return _pick(TINY_DESCRIPTORS, seed + 11)
    if stats.residue_count < MEDIUM_RESIDUES:
        return _pick(MEDIUM_DESCRIPTORS, seed + 13)
    return _pick(LARGE_DESCRIPTORS, seed + 17)


def _uniqueness_phrase(stats: ProteinStats, seed: int) -> str:
    uniqueness = 100 - stats.average_plddt
    if uniqueness > VERY_UNIQUE_THRESHOLD:
        return _pick(VERY_UNIQUE_DESCRIPTORS, seed + 19)
    if uniqueness > UNIQUE_THRESHOLD:
        return _pick(UNIQUE_DESCRIPTORS, seed + 23)
    return _pick(FAMILIAR_DESCRIPTORS, seed + 29)


def describe_protein(stats: ProteinStats, sequence: str) -> str:
    """
    Build the personality sentence for a folded protein.

    Args:
        stats: ProteinStats of the predicted structure
        sequence: The amino acid sequence that was folded

    Returns:
        A single sentence ending in a period
    """
    seed = sequence_seed(sequence)
    shape = _shape_phrase(stats, seed)
    size = _size_phrase(stats, seed)
    uniqueness = _uniqueness_phrase(stats, seed)

    connector1 = _pick(CONNECTORS, seed + 31)
    connector2 = _pick(CONNECTORS, seed + 37)

    template = seed % 4
    if template == 0:
        return f"{_capitalize(shape)}{connector1}{size}{connector2}{uniqueness}."
    if template == 1:
        return f"{_capitalize(uniqueness)}{connector1}{shape}{connector2}{size}."
    if template == 2:
        return f"{_capitalize(size)}. {_capitalize(shape)}{connector2}{uniqueness}."
    return f"{_capitalize(shape)} and {uniqueness}{connector1}{size}."
