"""
Fold API endpoints.
Encode names into a love sequence, fold it with ESMFold and describe the result.
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from lovefold import (
    LINKER_CONFIGS,
    ESMFoldAdapter,
    LengthError,
    LinkerStrategy,
    create_love_sequence,
    describe_protein,
    fold_names,
    parse_pdb_stats,
    split_names_slug,
    validate_pdb,
)
from lovefold.pipeline import format_display_name


router = APIRouter(prefix="/api", tags=["fold"])


# ============ Request/Response Models ============

class NamesRequest(BaseModel):
    """Two names and the linker strategy joining them."""
    name1: str
    name2: str
    strategy: LinkerStrategy = LinkerStrategy.ANCHOR


class StrategyInfo(BaseModel):
    """A selectable linker strategy."""
    strategy: LinkerStrategy
    motif: str
    display_name: str
    description: str
    terminal_residue: str


class SequenceResponse(BaseModel):
    """Encoded love sequence."""
    sequence: str
    length: int
    name1_segment: str
    name2_segment: str
    linker: str
    strategy: LinkerStrategy


class AnalyzeRequest(BaseModel):
    """PDB text to summarize; sequence enables the personality sentence."""
    pdb_content: str
    sequence: Optional[str] = None


class AnalyzeResponse(BaseModel):
    """Structure statistics and personality."""
    stats: Dict[str, Any]
    personality: Optional[str] = None


class FoldResponse(BaseModel):
    """Complete fold result for a pair of names."""
    name1: str
    name2: str
    sequence: SequenceResponse
    pdb_content: str
    source: Optional[str] = None
    stats: Dict[str, Any]
    personality: str


# ============ Dependencies ============

@lru_cache(maxsize=1)
def get_esmfold_adapter() -> ESMFoldAdapter:
    """Shared adapter (one HTTP session per process)."""
    return ESMFoldAdapter()


def _fold_response(name1: str, name2: str, report) -> FoldResponse:
    if isinstance(report, LengthError):
        raise HTTPException(status_code=400, detail=report.message)
    if not report.fold.ok:
        raise HTTPException(status_code=502, detail=report.fold.error)

    return FoldResponse(
        name1=format_display_name(name1),
        name2=format_display_name(name2),
        sequence=SequenceResponse(**report.love_sequence.to_dict()),
        pdb_content=report.fold.pdb_content,
        source=report.fold.source,
        stats=report.stats.to_dict(),
        personality=report.personality,
    )


# ============ Endpoints ============

@router.get("/strategies", response_model=List[StrategyInfo])
def list_strategies() -> List[StrategyInfo]:
    """List linker strategies with their motifs."""
    return [
        StrategyInfo(strategy=strategy, **config.to_dict())
        for strategy, config in LINKER_CONFIGS.items()
    ]


@router.post("/sequence", response_model=SequenceResponse)
def encode_names(request: NamesRequest) -> SequenceResponse:
    """Encode two names into a love sequence without folding it."""
    result = create_love_sequence(request.name1, request.name2, request.strategy)
    if isinstance(result, LengthError):
        raise HTTPException(status_code=400, detail=result.message)
    return SequenceResponse(**result.to_dict())


@router.post("/fold", response_model=FoldResponse)
def fold(
    request: NamesRequest,
    adapter: ESMFoldAdapter = Depends(get_esmfold_adapter),
) -> FoldResponse:
    """Encode, fold with ESMFold and describe the protein for two names."""
    report = fold_names(request.name1, request.name2, request.strategy, adapter=adapter)
    return _fold_response(request.name1, request.name2, report)


@router.get("/fold/{names}", response_model=FoldResponse)
def fold_by_slug(
    names: str,
    strategy: LinkerStrategy = LinkerStrategy.ANCHOR,
    adapter: ESMFoldAdapter = Depends(get_esmfold_adapter),
) -> FoldResponse:
    """Same as POST /api/fold, with names given as a "name1-name2" slug."""
    name1, name2 = split_names_slug(names)
    report = fold_names(name1, name2, strategy, adapter=adapter)
    return _fold_response(name1, name2, report)


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    """Summarize an already predicted structure."""
    validation = validate_pdb(request.pdb_content)
    if not validation.is_valid:
        raise HTTPException(status_code=400, detail=validation.error)

    stats = parse_pdb_stats(request.pdb_content)
    personality = describe_protein(stats, request.sequence) if request.sequence else None
    return AnalyzeResponse(stats=stats.to_dict(), personality=personality)
