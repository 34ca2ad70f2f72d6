"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class MatchResponse(BaseModel):
    """Result of one pattern search."""
    
    strategy: str = Field(..., description="Strategy that produced the result")
    text_length: int = Field(..., description="Length of the searched text")
    pattern_length: int = Field(..., description="Length of the pattern")
    found: bool = Field(..., description="Whether at least one occurrence was found")
    first_index: Optional[int] = Field(None, description="Start index of the first occurrence")
    matches: List[int] = Field(default_factory=list, description="Start indices, ascending")
    total_matches: int = Field(..., description="Number of reported occurrences")
    truncated: bool = Field(default=False, description="Whether the limit stopped the scan early")
    execution_time_ms: float = Field(..., description="Search time in milliseconds")
    table_cache_hit: bool = Field(..., description="Whether the pattern table came from the cache")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class StrategyTiming(BaseModel):
    """Per-strategy outcome of a comparison run."""
    
    strategy: str = Field(..., description="Strategy name")
    matches: List[int] = Field(..., description="All occurrences found")
    execution_time_ms: float = Field(..., description="Table build plus scan time in milliseconds")


class ComparisonResponse(BaseModel):
    """Outcome of running every strategy on the same input."""
    
    text_length: int = Field(..., description="Length of the searched text")
    pattern_length: int = Field(..., description="Length of the pattern")
    agreed: bool = Field(..., description="Whether all strategies returned the same matches")
    matches: List[int] = Field(..., description="Occurrences reported by the reference strategy")
    results: List[StrategyTiming] = Field(..., description="Per-strategy results")
    fastest: str = Field(..., description="Strategy with the lowest execution time")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class StrategyInfo(BaseModel):
    """Description of a matching strategy."""
    
    name: str = Field(..., description="Strategy tag")
    aliases: List[str] = Field(..., description="Accepted alternative spellings")
    description: str = Field(..., description="Short description of the algorithm")
    worst_case: str = Field(..., description="Worst-case scan complexity")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""
    
    total_searches: int = Field(..., description="Total searches processed")
    average_response_time_ms: float = Field(..., description="Average search time")
    cache_hit_rate: float = Field(..., description="Table cache hit rate (0-1)")
    match_rate: float = Field(..., description="Share of searches that found an occurrence (0-1)")
    cached_tables: int = Field(..., description="Tables currently cached")
    memory_usage_mb: float = Field(..., description="Process memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
