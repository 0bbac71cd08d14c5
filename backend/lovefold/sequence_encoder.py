"""
Sequence Encoder

Turns two names into a "love sequence": each name is mapped letter by letter
onto the 20 canonical amino acids and the two halves are joined by a linker
motif chosen by the folding strategy.

    flexible:  NAME1 + GGSGGS + NAME2
    anchor:    NAME1 + WPHWP  + NAME2          (default)
    cysteine:  C + NAME1 + GGSGGS + NAME2 + C  (terminal cysteines can close a disulfide loop)

Example:
    >>> create_love_sequence("Alice", "Bob", LinkerStrategy.FLEXIBLE).sequence
    'ALICEGGSGGSNQN'
"""

import logging
from types import MappingProxyType
from typing import Any, Union

from .fold_types import (
    MAX_SEQUENCE_LENGTH,
    LengthError,
    LinkerConfig,
    LinkerStrategy,
    LoveSequence,
)
from .name_normalizer import normalize_name

logger = logging.getLogger(__name__)

# 20 standard amino acids
CANONICAL_AMINO_ACIDS = frozenset("ACDEFGHIKLMNPQRSTVWY")

# Letters outside the canonical alphabet go to a close or common substitute
LETTER_TO_AMINO = MappingProxyType({
    "A": "A",  # Alanine
    "B": "N",  # Asx (N or D) -> Asparagine
    "C": "C",  # Cysteine
    "D": "D",  # Aspartic acid
    "E": "E",  # Glutamic acid
    "F": "F",  # Phenylalanine
    "G": "G",  # Glycine
    "H": "H",  # Histidine
    "I": "I",  # Isoleucine
    "J": "L",  # Xle (L or I) -> Leucine
    "K": "K",  # Lysine
    "L": "L",  # Leucine
    "M": "M",  # Methionine
    "N": "N",  # Asparagine
    "O": "Q",  # Pyrrolysine -> Glutamine
    "P": "P",  # Proline
    "Q": "Q",  # Glutamine
    "R": "R",  # Arginine
    "S": "S",  # Serine
    "T": "T",  # Threonine
    "U": "C",  # Selenocysteine -> Cysteine
    "V": "V",  # Valine
    "W": "W",  # Tryptophan
    "X": "A",  # Unknown -> Alanine
    "Y": "Y",  # Tyrosine
    "Z": "E",  # Glx (E or Q) -> Glutamic acid
})

# Used when a name has no encodable letters, so neither half is ever missing
EMPTY_NAME_FILLER = "AAA"

DEFAULT_STRATEGY = LinkerStrategy.ANCHOR

LINKER_CONFIGS = MappingProxyType({
    LinkerStrategy.FLEXIBLE: LinkerConfig(
        motif="GGSGGS",
        display_name="Flexible Embrace",
        description="A loose glycine-serine bridge that lets both names move freely.",
    ),
    LinkerStrategy.ANCHOR: LinkerConfig(
        motif="WPHWP",
        display_name="Anchored Bond",
        description="Rigid tryptophan-proline anchors hold the two names in place.",
    ),
    LinkerStrategy.CYSTEINE: LinkerConfig(
        motif="GGSGGS",
        display_name="Disulfide Heart",
        description="Cysteine bookends that can close the chain into a loop.",
        terminal_residue="C",
    ),
})


def get_linker_config(strategy: Union[LinkerStrategy, str]) -> LinkerConfig:
    """Look up motif and display metadata for a strategy (enum or its value)."""
    return LINKER_CONFIGS[LinkerStrategy(strategy)]


def name_to_amino_sequence(name: str) -> str:
    """Encode a single name; letters that normalize away are dropped."""
    return "".join(LETTER_TO_AMINO[letter] for letter in normalize_name(name))


def create_love_sequence(
    name1: str,
    name2: str,
    strategy: Union[LinkerStrategy, str] = DEFAULT_STRATEGY,
) -> Union[LoveSequence, LengthError]:
    """
    Build the love sequence for a pair of names.

    Args:
        name1: First partner's name (any script)
        name2: Second partner's name (any script)
        strategy: Linker strategy, default anchor

    Returns:
        LoveSequence, or LengthError if the composed sequence exceeds
        MAX_SEQUENCE_LENGTH residues. The sequence is never truncated.
    """
    strategy = LinkerStrategy(strategy)
    config = LINKER_CONFIGS[strategy]

    segment1 = name_to_amino_sequence(name1) or EMPTY_NAME_FILLER
    segment2 = name_to_amino_sequence(name2) or EMPTY_NAME_FILLER

    terminal = config.terminal_residue
    sequence = f"{terminal}{segment1}{config.motif}{segment2}{terminal}"

    if len(sequence) > MAX_SEQUENCE_LENGTH:
        logger.info(
            f"Rejected {strategy.value} sequence of {len(sequence)} residues "
            f"(max {MAX_SEQUENCE_LENGTH})"
        )
        return LengthError(actual_length=len(sequence), max_length=MAX_SEQUENCE_LENGTH)

    return LoveSequence(
        sequence=sequence,
        name1_segment=segment1,
        name2_segment=segment2,
        linker=config.motif,
        strategy=strategy,
    )


def is_length_error(result: Any) -> bool:
    """True if create_love_sequence returned an error value."""
    return isinstance(result, LengthError)
