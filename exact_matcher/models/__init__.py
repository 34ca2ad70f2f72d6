"""Data models for the exact matcher."""

from .response import (
    MatchResponse,
    StrategyTiming,
    ComparisonResponse,
    StrategyInfo,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest, BatchSearchRequest, CompareRequest

__all__ = [
    "MatchResponse",
    "StrategyTiming",
    "ComparisonResponse",
    "StrategyInfo",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
    "BatchSearchRequest",
    "CompareRequest",
]
