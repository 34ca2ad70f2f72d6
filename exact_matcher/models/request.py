"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.strategy import Strategy


class SearchRequest(BaseModel):
    """Request model for a single pattern search."""
    
    text: str = Field(..., description="Text to search")
    pattern: str = Field(..., description="Pattern to look for")
    strategy: Optional[Strategy] = Field(
        None, description="Matching strategy (kmp, boyer_moore, rabin_karp, sunday)"
    )
    find_all: bool = Field(default=False, description="Return every occurrence instead of the first")
    overlapping: bool = Field(default=True, description="Report overlapping occurrences")
    limit: Optional[int] = Field(None, ge=1, description="Stop after this many occurrences")
    base: Optional[int] = Field(None, description="Rabin-Karp hash base")
    modulus: Optional[int] = Field(None, description="Rabin-Karp hash modulus")

    @field_validator("strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v: object) -> Optional[Strategy]:
        """Resolve strategy aliases."""
        if v is None:
            return None
        return Strategy.parse(v)


class BatchSearchRequest(BaseModel):
    """Request model for searching several patterns in one text."""
    
    text: str = Field(..., description="Text to search")
    patterns: List[str] = Field(..., min_length=1, description="Patterns to look for")
    strategy: Optional[Strategy] = Field(None, description="Matching strategy")
    find_all: bool = Field(default=True, description="Return every occurrence instead of the first")

    @field_validator("strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v: object) -> Optional[Strategy]:
        """Resolve strategy aliases."""
        if v is None:
            return None
        return Strategy.parse(v)


class CompareRequest(BaseModel):
    """Request model for running every strategy on the same input."""
    
    text: str = Field(..., description="Text to search")
    pattern: str = Field(..., description="Pattern to look for")
