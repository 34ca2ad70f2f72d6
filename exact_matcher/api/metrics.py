"""Metrics and monitoring API endpoints."""

import os

import psutil
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["metrics"])
settings = get_settings()

# Import the global match engine instance
from ..engine_instance import match_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get search counts, timings and table cache efficiency"
)
async def get_metrics() -> MetricsResponse:
    """Get aggregate performance metrics for the match engine."""
    try:
        stats = match_engine.get_stats()
        
        # Resident memory of this process
        memory_usage_mb = psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)
        
        return MetricsResponse(
            total_searches=stats["total_searches"],
            average_response_time_ms=stats["average_execution_time_ms"],
            cache_hit_rate=stats["cache_stats"]["hit_rate"],
            match_rate=stats["match_rate"],
            cached_tables=stats["cache_stats"]["size"],
            memory_usage_mb=memory_usage_mb
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.get(
    "/metrics/strategies",
    summary="Per-strategy usage",
    description="Number of searches served by each strategy"
)
async def get_strategy_metrics() -> JSONResponse:
    """Get per-strategy usage counts."""
    try:
        stats = match_engine.get_stats()
        usage = stats["strategy_usage"]
        total = sum(usage.values())
        
        return JSONResponse(
            status_code=200,
            content={
                "strategy_usage": usage,
                "strategy_share": {
                    name: (count / total if total else 0.0) for name, count in usage.items()
                },
                "default_strategy": stats["default_strategy"],
                "comparisons": stats["comparisons"],
                "disagreements": stats["disagreements"]
            }
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get strategy metrics: {str(e)}"
        )


@router.post(
    "/metrics/reset",
    summary="Reset metrics",
    description="Reset engine statistics and drop cached tables"
)
async def reset_metrics() -> JSONResponse:
    """Reset statistics and clear the table cache."""
    match_engine.clear()
    return JSONResponse(
        status_code=200,
        content={"message": "Metrics reset successfully"}
    )
