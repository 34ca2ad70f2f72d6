"""Search API endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException

from ..core.errors import ConfigurationError
from ..core.strategy import Strategy
from ..models.response import MatchResponse, ComparisonResponse, StrategyInfo
from ..models.request import SearchRequest, BatchSearchRequest, CompareRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global match engine instance
from ..engine_instance import match_engine

STRATEGY_INFO = {
    Strategy.KMP: StrategyInfo(
        name=Strategy.KMP.value,
        aliases=["naive", "knuth_morris_pratt"],
        description="Prefix-function matcher; the text index never moves backward",
        worst_case="O(n + m)",
    ),
    Strategy.BOYER_MOORE: StrategyInfo(
        name=Strategy.BOYER_MOORE.value,
        aliases=["bm", "boyer-moore"],
        description="Right-to-left comparison with bad-character and good-suffix shifts",
        worst_case="O(n * m)",
    ),
    Strategy.RABIN_KARP: StrategyInfo(
        name=Strategy.RABIN_KARP.value,
        aliases=["rk", "rabin-karp"],
        description="Rolling polynomial hash with mandatory verification of every hash hit",
        worst_case="O(n * m)",
    ),
    Strategy.SUNDAY: StrategyInfo(
        name=Strategy.SUNDAY.value,
        aliases=[],
        description="Left-to-right comparison, shifting on the symbol after the window",
        worst_case="O(n * m)",
    ),
}


def _check_lengths(text: str, patterns: List[str]) -> None:
    """Reject inputs above the configured size limits."""
    if len(text) > settings.max_text_length:
        raise HTTPException(
            status_code=400,
            detail=f"Text too long. Maximum length is {settings.max_text_length} characters"
        )
    for pattern in patterns:
        if len(pattern) > settings.max_pattern_length:
            raise HTTPException(
                status_code=400,
                detail=f"Pattern too long. Maximum length is {settings.max_pattern_length} characters"
            )


@router.post(
    "/search",
    response_model=MatchResponse,
    summary="Search for a pattern",
    description="Find the first (or every) occurrence of a pattern in a text"
)
async def search(request: SearchRequest) -> MatchResponse:
    """
    Search a text for a pattern.
    
    Not finding the pattern is a normal result (``found`` is false), not an error.
    """
    _check_lengths(request.text, [request.pattern])
    
    try:
        return match_engine.search(
            request.text,
            request.pattern,
            strategy=request.strategy,
            find_all=request.find_all,
            overlapping=request.overlapping,
            limit=request.limit,
            base=request.base,
            modulus=request.modulus,
        )
        
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search/batch",
    response_model=list[MatchResponse],
    summary="Batch search",
    description="Search one text for several patterns in a single request"
)
async def batch_search(request: BatchSearchRequest) -> list[MatchResponse]:
    """
    Search one text for several patterns.
    
    Patterns repeated across requests reuse their cached tables.
    """
    if len(request.patterns) > settings.max_batch_patterns:
        raise HTTPException(
            status_code=400,
            detail=f"Too many patterns. Maximum is {settings.max_batch_patterns}"
        )
    _check_lengths(request.text, request.patterns)
    
    try:
        results = []
        
        for pattern in request.patterns:
            result = match_engine.search(
                request.text,
                pattern,
                strategy=request.strategy,
                find_all=request.find_all,
            )
            results.append(result)
        
        return results
        
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Batch search failed: {str(e)}"
        )


@router.post(
    "/compare",
    response_model=ComparisonResponse,
    summary="Compare strategies",
    description="Run every strategy on the same input and report timings and agreement"
)
async def compare(request: CompareRequest) -> ComparisonResponse:
    """Run all four strategies on one text and pattern."""
    _check_lengths(request.text, [request.pattern])
    
    try:
        return match_engine.compare_strategies(request.text, request.pattern)
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Comparison failed: {str(e)}"
        )


@router.get(
    "/strategies",
    response_model=list[StrategyInfo],
    summary="List strategies",
    description="List the supported matching strategies"
)
async def list_strategies() -> list[StrategyInfo]:
    """List supported strategies in declaration order."""
    return [STRATEGY_INFO[strategy] for strategy in Strategy]
