"""Configuration management for the exact matcher."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
