"""
LoveFold: turn two names into a protein.

This package contains:
- Name normalization (Cyrillic/Greek transliteration, diacritics)
- Name -> amino acid sequence encoding with linker strategies
- PDB ATOM record parsing and structure statistics
- Deterministic "personality" descriptions
- ESMFold API adapter and the end-to-end fold pipeline
"""

from .fold_types import (
    MAX_SEQUENCE_LENGTH,
    AtomRecord,
    ConfidenceTier,
    Dimensions,
    EmptySequenceError,
    FoldResult,
    LengthError,
    LinkerConfig,
    LinkerStrategy,
    LoveSequence,
    PDBValidationResult,
    ProteinStats,
    is_sequence_error,
)
from .name_normalizer import normalize_name
from .sequence_encoder import (
    LETTER_TO_AMINO,
    LINKER_CONFIGS,
    create_love_sequence,
    get_linker_config,
    is_length_error,
    name_to_amino_sequence,
)
from .pdb_parser import parse_pdb_records
from .structure_analyzer import analyze_structure, confidence_tier, parse_pdb_stats
from .narrative import describe_protein, sequence_seed
from .validation import validate_pdb, validate_sequence
from .esmfold_adapter import ESMFoldAdapter
from .pipeline import FoldReport, fold_names, format_display_name, split_names_slug

__version__ = "1.0.0"

__all__ = [
    # Types
    "MAX_SEQUENCE_LENGTH",
    "AtomRecord",
    "ConfidenceTier",
    "Dimensions",
    "EmptySequenceError",
    "FoldResult",
    "LengthError",
    "LinkerConfig",
    "LinkerStrategy",
    "LoveSequence",
    "PDBValidationResult",
    "ProteinStats",
    "is_sequence_error",
    # Encoding
    "normalize_name",
    "LETTER_TO_AMINO",
    "LINKER_CONFIGS",
    "create_love_sequence",
    "get_linker_config",
    "is_length_error",
    "name_to_amino_sequence",
    # Structure analysis
    "parse_pdb_records",
    "analyze_structure",
    "confidence_tier",
    "parse_pdb_stats",
    "describe_protein",
    "sequence_seed",
    # Validation
    "validate_pdb",
    "validate_sequence",
    # Folding
    "ESMFoldAdapter",
    "FoldReport",
    "fold_names",
    "format_display_name",
    "split_names_slug",
]
