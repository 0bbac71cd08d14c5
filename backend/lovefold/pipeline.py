"""
End-to-end fold pipeline: names -> sequence -> ESMFold -> stats -> personality.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .esmfold_adapter import ESMFoldAdapter
from .fold_types import FoldResult, LengthError, LinkerStrategy, LoveSequence, ProteinStats
from .narrative import describe_protein
from .sequence_encoder import DEFAULT_STRATEGY, create_love_sequence
from .structure_analyzer import parse_pdb_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoldReport:
    """Everything shown on a fold result page."""
    love_sequence: LoveSequence
    fold: FoldResult
    stats: Optional[ProteinStats] = None
    personality: Optional[str] = None

    def to_dict(self, include_pdb: bool = True) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        fold = self.fold.to_dict()
        if not include_pdb:
            fold.pop("pdb_content", None)
        return {
            "sequence": self.love_sequence.to_dict(),
            "fold": fold,
            "stats": self.stats.to_dict() if self.stats else None,
            "personality": self.personality,
        }


def split_names_slug(slug: str) -> Tuple[str, str]:
    """Split a "name1-name2" URL slug; a missing half becomes ""."""
    name1, _, name2 = (slug or "").partition("-")
    return name1, name2


def format_display_name(name: str) -> str:
    """Capitalize the first letter and lowercase the rest."""
    if not name:
        return ""
    return name[:1].upper() + name[1:].lower()


def fold_names(
    name1: str,
    name2: str,
    strategy: Union[LinkerStrategy, str] = DEFAULT_STRATEGY,
    adapter: Optional[ESMFoldAdapter] = None,
    use_cache: bool = True,
) -> Union[FoldReport, LengthError]:
    """
    Fold the love sequence of two names and describe the result.

    Returns:
        FoldReport (stats and personality are None when folding failed),
        or LengthError when the names are too long for the predictor
    """
    love_sequence = create_love_sequence(name1, name2, strategy)
    if isinstance(love_sequence, LengthError):
        return love_sequence

    adapter = adapter or ESMFoldAdapter()
    fold = adapter.fold_sequence(love_sequence.sequence, use_cache=use_cache)
    if not fold.ok:
        logger.warning(f"Folding failed for {love_sequence.strategy.value} sequence: {fold.error}")
        return FoldReport(love_sequence=love_sequence, fold=fold)

    stats = parse_pdb_stats(fold.pdb_content)
    return FoldReport(
        love_sequence=love_sequence,
        fold=fold,
        stats=stats,
        personality=describe_protein(stats, love_sequence.sequence),
    )
