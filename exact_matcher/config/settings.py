"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict, field_validator
from pydantic_settings import BaseSettings

from ..core.strategy import Strategy
from ..core.tables import DEFAULT_BASE, DEFAULT_MODULUS


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Exact Matcher")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Matching
    default_strategy: Strategy = Field(default=Strategy.KMP)
    rabin_karp_base: int = Field(default=DEFAULT_BASE, ge=1)
    rabin_karp_modulus: int = Field(default=DEFAULT_MODULUS, ge=2)
    
    # Table cache
    enable_table_cache: bool = Field(default=True)
    table_cache_max_size: int = Field(default=1024, ge=1)
    
    # Request limits
    max_text_length: int = Field(default=1_000_000)
    max_pattern_length: int = Field(default=10_000)
    max_batch_patterns: int = Field(default=100)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @field_validator("default_strategy", mode="before")
    @classmethod
    def parse_strategy(cls, v: object) -> Strategy:
        """Accept any spelling Strategy.parse understands."""
        return Strategy.parse(v)


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
