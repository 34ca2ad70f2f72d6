"""Health, readiness and status endpoints."""

import time
from datetime import datetime
from typing import Dict

from fastapi import APIRouter

from ..config import get_settings
from ..core.errors import MatcherError
from ..core.strategy import Strategy
from ..engine_instance import match_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

app_start_time = time.time()

# Known-answer search run against every strategy by /health
SELF_CHECK_TEXT = "ABABDABACDABABCABAB"
SELF_CHECK_PATTERN = "ABABCABAB"
SELF_CHECK_INDEX = 10


def _uptime() -> float:
    return time.time() - app_start_time


def _check_strategy(strategy: Strategy) -> str:
    try:
        result = match_engine.search(SELF_CHECK_TEXT, SELF_CHECK_PATTERN, strategy=strategy)
    except MatcherError:
        return "unhealthy"
    return "healthy" if result.first_index == SELF_CHECK_INDEX else "degraded"


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> HealthResponse:
    """
    Run the known-answer search with each strategy.

    The service is healthy when every strategy finds the pattern at the
    expected index, degraded when one answers wrongly, and unhealthy when
    one fails outright.
    """
    strategies: Dict[str, str] = {strategy.value: _check_strategy(strategy) for strategy in Strategy}
    outcomes = set(strategies.values())

    if outcomes == {"healthy"}:
        status = "healthy"
    elif "unhealthy" in outcomes:
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=_uptime(),
        dependencies=strategies,
    )


@router.get("/health/ready", summary="Readiness check")
async def readiness_check() -> dict:
    """Ready once the engine is up; reports its default strategy and cache fill."""
    cache = match_engine.get_stats()["cache_stats"]
    return {
        "status": "ready",
        "default_strategy": match_engine.default_strategy.value,
        "table_cache": {"enabled": cache["enabled"], "size": cache["size"], "max_size": cache["max_size"]},
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.get("/health/live", summary="Liveness check")
async def liveness_check() -> dict:
    return {"status": "alive", "uptime": _uptime()}


@router.get("/status", summary="Service status")
async def service_status() -> dict:
    """Matching configuration and engine statistics."""
    return {
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "uptime": _uptime(),
            "start_time": datetime.fromtimestamp(app_start_time).isoformat(),
        },
        "configuration": {
            "default_strategy": match_engine.default_strategy.value,
            "rabin_karp": dict(match_engine.rabin_karp_params),
            "enable_table_cache": settings.enable_table_cache,
            "table_cache_max_size": settings.table_cache_max_size,
            "max_text_length": settings.max_text_length,
            "max_pattern_length": settings.max_pattern_length,
            "max_batch_patterns": settings.max_batch_patterns,
        },
        "statistics": match_engine.get_stats(),
    }
