"""Core exact string-matching functionality."""

from .base import BaseMatcher
from .boyer_moore import BoyerMooreMatcher
from .engine import MatchEngine, TableCache
from .errors import ConfigurationError, MatcherError, UnknownStrategyError
from .kmp import KMPMatcher
from .matcher import build_table, count, find_all, find_first, get_matcher
from .rabin_karp import RabinKarpMatcher
from .strategy import Strategy
from .sunday import SundayMatcher

__all__ = [
    "BaseMatcher",
    "BoyerMooreMatcher",
    "KMPMatcher",
    "RabinKarpMatcher",
    "SundayMatcher",
    "MatchEngine",
    "TableCache",
    "Strategy",
    "MatcherError",
    "ConfigurationError",
    "UnknownStrategyError",
    "build_table",
    "find_first",
    "find_all",
    "count",
    "get_matcher",
]
