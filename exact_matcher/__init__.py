"""
Exact Matcher - exact single-pattern search over in-memory sequences.

Four interchangeable strategies (Knuth-Morris-Pratt, Boyer-Moore, Rabin-Karp
and Sunday) share one contract: find the first or every occurrence of a
pattern in a text. All strategies return identical results for identical
inputs; they differ only in preprocessing cost and shift heuristics.
"""

__version__ = "1.0.0"

from .core.engine import MatchEngine
from .core.errors import ConfigurationError, MatcherError, UnknownStrategyError
from .core.matcher import build_table, count, find_all, find_first
from .core.strategy import Strategy

__all__ = [
    "MatchEngine",
    "Strategy",
    "MatcherError",
    "ConfigurationError",
    "UnknownStrategyError",
    "build_table",
    "find_first",
    "find_all",
    "count",
]
