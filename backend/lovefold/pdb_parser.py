"""
PDB ATOM record parser.

Reads the fixed-column ATOM lines of a PDB file (as returned by ESMFold)
into AtomRecord values. Only six columns are consumed:

    13-16  atom name
    23-26  residue sequence number
    31-38  x      39-46  y      47-54  z
    61-66  B-factor (pLDDT for predicted models)

Lines whose coordinates do not parse are skipped: predictor output may end
with truncated or non-coordinate lines. Residue number and B-factor are
parsed independently and stored as None when unreadable, so only the
coordinates decide whether a record is kept.
"""

import logging
import math
from typing import List, Optional

from .fold_types import AtomRecord

logger = logging.getLogger(__name__)


def _parse_finite_float(field: str) -> Optional[float]:
    try:
        value = float(field)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_optional_int(field: str) -> Optional[int]:
    try:
        return int(field)
    except ValueError:
        return None


def parse_atom_line(line: str) -> Optional[AtomRecord]:
    """
    Parse a single ATOM line.

    Returns:
        AtomRecord, or None if the line is not an ATOM record or any
        coordinate is missing or non-numeric
    """
    if not line.startswith("ATOM"):
        return None

    x = _parse_finite_float(line[30:38].strip())
    y = _parse_finite_float(line[38:46].strip())
    z = _parse_finite_float(line[46:54].strip())
    if x is None or y is None or z is None:
        logger.debug(f"Skipping ATOM line with unreadable coordinates: {line!r}")
        return None

    return AtomRecord(
        x=x,
        y=y,
        z=z,
        b_factor=_parse_finite_float(line[60:66].strip()),
        atom_name=line[12:16].strip(),
        residue_seq=_parse_optional_int(line[22:26].strip()),
    )


def parse_pdb_records(pdb_content: str) -> List[AtomRecord]:
    """
    Parse all usable ATOM records from PDB text.

    Args:
        pdb_content: PDB file content as string

    Returns:
        AtomRecords in file order, without deduplication
    """
    if not pdb_content:
        return []

    records = []
    for line in pdb_content.split("\n"):
        record = parse_atom_line(line)
        if record is not None:
            records.append(record)
    return records
