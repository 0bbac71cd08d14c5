"""
Syntactic checks for sequences sent to, and PDB text received from, ESMFold.
"""

import re
from typing import Optional

from .fold_types import (
    MAX_SEQUENCE_LENGTH,
    EmptySequenceError,
    LengthError,
    PDBValidationResult,
    SequenceError,
)

# ATOM followed by whitespace at the start of any line
_ATOM_RECORD = re.compile(r"^ATOM\s+", re.MULTILINE)


def validate_sequence(sequence: Optional[str]) -> Optional[SequenceError]:
    """
    Check a sequence against the predictor's input limits.

    Returns:
        None if the sequence is acceptable, else EmptySequenceError or LengthError
    """
    if not sequence:
        return EmptySequenceError()
    if len(sequence) > MAX_SEQUENCE_LENGTH:
        return LengthError(actual_length=len(sequence), max_length=MAX_SEQUENCE_LENGTH)
    return None


def validate_pdb(pdb_content: Optional[str]) -> PDBValidationResult:
    """
    Check that PDB text is non-empty and contains ATOM records.

    Args:
        pdb_content: Raw PDB text from the predictor

    Returns:
        PDBValidationResult with an error message when invalid
    """
    if pdb_content is None:
        return PDBValidationResult(False, "PDB data is empty")
    if not isinstance(pdb_content, str):
        return PDBValidationResult(False, "PDB data must be a string")
    if not pdb_content.strip():
        return PDBValidationResult(False, "PDB data is empty")
    if not _ATOM_RECORD.search(pdb_content):
        return PDBValidationResult(False, "PDB missing ATOM records")
    return PDBValidationResult(True)
