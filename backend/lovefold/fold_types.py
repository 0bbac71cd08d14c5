"""
Fold Type Definitions

Value objects shared by the encoding, parsing and analysis modules.
Errors at the core boundary are returned as values (LengthError,
EmptySequenceError) rather than raised.
"""
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, Optional, Union

# ESMFold rejects anything longer
MAX_SEQUENCE_LENGTH = 400

# Average molecular weight of one amino acid residue, in Daltons
AVG_RESIDUE_WEIGHT = 110


class LinkerStrategy(Enum):
    """How the two encoded names are joined."""
    FLEXIBLE = "flexible"
    ANCHOR = "anchor"
    CYSTEINE = "cysteine"


class ConfidenceTier(Enum):
    """Confidence category derived from the mean pLDDT."""
    VERY_HIGH = "Very High"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class LinkerConfig:
    """Motif and display metadata for one linker strategy."""
    motif: str
    display_name: str
    description: str
    terminal_residue: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoveSequence:
    """A composed sequence plus the pieces it was built from."""
    sequence: str
    name1_segment: str
    name2_segment: str
    linker: str
    strategy: LinkerStrategy

    def __len__(self) -> int:
        return len(self.sequence)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sequence": self.sequence,
            "length": len(self.sequence),
            "name1_segment": self.name1_segment,
            "name2_segment": self.name2_segment,
            "linker": self.linker,
            "strategy": self.strategy.value,
        }


@dataclass(frozen=True)
class LengthError:
    """Composed sequence is longer than the predictor accepts."""
    actual_length: int
    max_length: int = MAX_SEQUENCE_LENGTH

    @property
    def message(self) -> str:
        return (
            f"Sequence too long ({self.actual_length} residues, max {self.max_length}). "
            "Try shorter names or a different folding strategy."
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": "length",
            "actual_length": self.actual_length,
            "max_length": self.max_length,
            "message": self.message,
        }


@dataclass(frozen=True)
class EmptySequenceError:
    """A zero-length sequence was submitted for validation."""
    message: str = "Sequence is empty"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "empty", "message": self.message}


SequenceError = Union[LengthError, EmptySequenceError]


@dataclass(frozen=True)
class AtomRecord:
    """One parsed ATOM line of a PDB file."""
    x: float
    y: float
    z: float
    b_factor: Optional[float]  # pLDDT for ESMFold / AlphaFold models
    atom_name: str
    residue_seq: Optional[int]


@dataclass(frozen=True)
class Dimensions:
    """Bounding-box extents in Angstroms."""
    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    def as_tuple(self):
        return (self.width, self.height, self.depth)


@dataclass(frozen=True)
class ProteinStats:
    """Summary statistics of a predicted structure."""
    residue_count: int = 0
    atom_count: int = 0
    average_plddt: float = 0.0
    confidence_level: ConfidenceTier = ConfidenceTier.LOW
    dimensions: Dimensions = field(default_factory=Dimensions)
    molecular_weight: float = 0.0  # kDa
    backbone_atoms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "residue_count": self.residue_count,
            "atom_count": self.atom_count,
            "average_plddt": self.average_plddt,
            "confidence_level": self.confidence_level.value,
            "dimensions": asdict(self.dimensions),
            "molecular_weight": self.molecular_weight,
            "backbone_atoms": self.backbone_atoms,
        }


@dataclass(frozen=True)
class PDBValidationResult:
    """Outcome of a syntactic PDB check."""
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class FoldResult:
    """Result of a structure prediction request."""
    sequence: str
    status: str = "completed"  # "completed" or "failed"
    pdb_content: Optional[str] = None
    error: Optional[str] = None
    source: Optional[str] = None  # "esmfold" or "cache"

    @classmethod
    def completed(cls, sequence: str, pdb_content: str, source: str) -> "FoldResult":
        return cls(sequence=sequence, pdb_content=pdb_content, source=source)

    @classmethod
    def failed(cls, sequence: str, error: str) -> "FoldResult":
        return cls(sequence=sequence, status="failed", error=error)

    @property
    def ok(self) -> bool:
        return self.status == "completed"

    def to_dict(self) -> Dict[str, Any]:
        result = {"sequence": self.sequence, "status": self.status}
        if self.pdb_content is not None:
            result["pdb_content"] = self.pdb_content
        if self.error is not None:
            result["error"] = self.error
        if self.source is not None:
            result["source"] = self.source
        return result


def is_sequence_error(result: Any) -> bool:
    """True for LengthError / EmptySequenceError values."""
    return isinstance(result, (LengthError, EmptySequenceError))
