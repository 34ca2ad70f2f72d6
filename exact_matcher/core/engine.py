"""Matching service with table caching and statistics."""

import threading
import time
from collections import OrderedDict
from itertools import islice
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

import structlog

from ..models.response import ComparisonResponse, MatchResponse, StrategyTiming
from .base import BaseMatcher
from .matcher import StrategyLike, non_overlapping, get_matcher
from .strategy import Strategy
from .tables import DEFAULT_BASE, DEFAULT_MODULUS

logger = structlog.get_logger(__name__)


class TableCache:
    """Bounded LRU cache of pattern tables keyed by (strategy, params, pattern)."""

    def __init__(self, max_size: int = 1024) -> None:
        self.max_size = max_size
        self._tables: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            table = self._tables.get(key)
            if table is None:
                self.misses += 1
                return None
            self._tables.move_to_end(key)
            self.hits += 1
            return table

    def put(self, key: Hashable, table: Any) -> None:
        with self._lock:
            self._tables[key] = table
            self._tables.move_to_end(key)
            while len(self._tables) > self.max_size:
                self._tables.popitem(last=False)

    def snapshot(self) -> Dict[str, Any]:
        """Consistent view of the cache counters."""
        with self._lock:
            lookups = self.hits + self.misses
            return {
                "size": len(self._tables),
                "max_size": self.max_size,
                "hits": self.hits,
                "misses": self.misses,
                "hit_rate": self.hits / lookups if lookups else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)


def _empty_stats() -> Dict[str, Any]:
    return {
        "total_searches": 0,
        "searches_with_matches": 0,
        "searches_without_matches": 0,
        "total_matches_reported": 0,
        "total_execution_time": 0.0,
        "table_builds": 0,
        "comparisons": 0,
        "disagreements": 0,
        "strategy_usage": {strategy.value: 0 for strategy in Strategy},
    }


class MatchEngine:
    """Entry point for host programs: strategy defaults, table reuse and bookkeeping."""

    def __init__(
        self,
        default_strategy: StrategyLike = Strategy.KMP,
        rabin_karp_base: int = DEFAULT_BASE,
        rabin_karp_modulus: int = DEFAULT_MODULUS,
        enable_cache: bool = True,
        cache_max_size: int = 1024,
    ) -> None:
        """
        Initialize the engine.

        Args:
            default_strategy: Strategy used when a call does not name one
            rabin_karp_base: Default Rabin-Karp hash base
            rabin_karp_modulus: Default Rabin-Karp hash modulus
            enable_cache: Whether to keep built tables for reuse
            cache_max_size: Maximum number of cached tables

        Raises:
            ConfigurationError: on an unknown default strategy or bad hash parameters
        """
        self.default_strategy = Strategy.parse(default_strategy)
        self.rabin_karp_params = {"base": rabin_karp_base, "modulus": rabin_karp_modulus}
        # Fail fast on bad defaults
        get_matcher(Strategy.RABIN_KARP, **self.rabin_karp_params)

        self.enable_cache = enable_cache
        self.table_cache = TableCache(cache_max_size)
        self._stats_lock = threading.Lock()
        self._stats = _empty_stats()

    @classmethod
    def from_settings(cls, settings: Any) -> "MatchEngine":
        """Build an engine from application settings."""
        return cls(
            default_strategy=settings.default_strategy,
            rabin_karp_base=settings.rabin_karp_base,
            rabin_karp_modulus=settings.rabin_karp_modulus,
            enable_cache=settings.enable_table_cache,
            cache_max_size=settings.table_cache_max_size,
        )

    def resolve(self, strategy: Optional[StrategyLike] = None, **params: Any) -> Tuple[Strategy, BaseMatcher]:
        """Resolve a strategy tag and parameters to a configured matcher."""
        resolved = self.default_strategy if strategy is None else Strategy.parse(strategy)
        if resolved is Strategy.RABIN_KARP:
            params = {**self.rabin_karp_params, **{k: v for k, v in params.items() if v is not None}}
        else:
            params = {k: v for k, v in params.items() if v is not None}
        return resolved, get_matcher(resolved, **params)

    def get_table(self, pattern: Sequence[Any], strategy: Optional[StrategyLike] = None, **params: Any) -> Tuple[Any, bool]:
        """
        Return the table for a pattern, building it on a cache miss.

        Returns:
            Tuple of (table, cache_hit)
        """
        resolved, matcher = self.resolve(strategy, **params)
        return self._table_for(resolved, matcher, pattern)

    def search(
        self,
        text: Sequence[Any],
        pattern: Sequence[Any],
        strategy: Optional[StrategyLike] = None,
        find_all: bool = False,
        overlapping: bool = True,
        limit: Optional[int] = None,
        **params: Any,
    ) -> MatchResponse:
        """
        Search ``text`` for ``pattern``.

        Args:
            text: Sequence to search
            pattern: Sequence to look for
            strategy: Strategy tag (engine default if None)
            find_all: Collect every occurrence instead of stopping at the first
            overlapping: Report overlapping occurrences when collecting all
            limit: Stop consuming occurrences after this many
            **params: Strategy parameters (Rabin-Karp base, modulus)

        Returns:
            MatchResponse with the occurrences and timing
        """
        start_time = time.perf_counter()
        resolved, matcher = self.resolve(strategy, **params)

        if 0 < len(pattern) <= len(text):
            table, cache_hit = self._table_for(resolved, matcher, pattern)
        else:
            table, cache_hit = None, False
        occurrences = matcher.iter_matches(text, pattern, table)
        if not overlapping and len(pattern) > 0:
            occurrences = non_overlapping(occurrences, len(pattern))

        wanted = limit if find_all else 1
        if wanted is None:
            matches = list(occurrences)
            truncated = False
        else:
            matches = list(islice(occurrences, wanted))
            truncated = find_all and len(matches) == wanted and next(occurrences, None) is not None

        execution_time = (time.perf_counter() - start_time) * 1000
        self._record(resolved, matches, execution_time)

        return MatchResponse(
            strategy=resolved.value,
            text_length=len(text),
            pattern_length=len(pattern),
            found=bool(matches),
            first_index=matches[0] if matches else None,
            matches=matches,
            total_matches=len(matches),
            truncated=truncated,
            execution_time_ms=execution_time,
            table_cache_hit=cache_hit,
        )

    def compare_strategies(self, text: Sequence[Any], pattern: Sequence[Any]) -> ComparisonResponse:
        """
        Run every strategy on the same input and time each one.

        Tables are built fresh so the timings include preprocessing.
        """
        results: List[StrategyTiming] = []
        for strategy in Strategy:
            _, matcher = self.resolve(strategy)
            start = time.perf_counter()
            matches = list(matcher.iter_matches(text, pattern))
            elapsed = (time.perf_counter() - start) * 1000
            results.append(
                StrategyTiming(strategy=strategy.value, matches=matches, execution_time_ms=elapsed)
            )

        reference = results[0].matches
        agreed = all(result.matches == reference for result in results)
        fastest = min(results, key=lambda result: result.execution_time_ms)

        with self._stats_lock:
            self._stats["comparisons"] += 1
            if not agreed:
                self._stats["disagreements"] += 1

        if not agreed:
            logger.error(
                "Strategies disagree",
                text_length=len(text),
                pattern_length=len(pattern),
                results={result.strategy: result.matches[:10] for result in results},
            )

        return ComparisonResponse(
            text_length=len(text),
            pattern_length=len(pattern),
            agreed=agreed,
            matches=reference,
            results=results,
            fastest=fastest.strategy,
        )

    def _table_for(self, strategy: Strategy, matcher: BaseMatcher, pattern: Sequence[Any]) -> Tuple[Any, bool]:
        if not self.enable_cache:
            return self._build(strategy, matcher, pattern), False

        key = self._cache_key(strategy, matcher, pattern)
        if key is None:
            return self._build(strategy, matcher, pattern), False

        table = self.table_cache.get(key)
        if table is not None:
            return table, True

        table = self._build(strategy, matcher, pattern)
        self.table_cache.put(key, table)
        return table, False

    def _build(self, strategy: Strategy, matcher: BaseMatcher, pattern: Sequence[Any]) -> Any:
        table = matcher.build_table(pattern)
        with self._stats_lock:
            self._stats["table_builds"] += 1
        logger.debug("Table built", strategy=strategy.value, pattern_length=len(pattern))
        return table

    @staticmethod
    def _cache_key(strategy: Strategy, matcher: BaseMatcher, pattern: Sequence[Any]) -> Optional[Hashable]:
        """Cache key for a pattern table, or None when the pattern holds unhashable symbols."""
        if isinstance(pattern, (str, bytes)):
            pattern_key: Hashable = (type(pattern).__name__, pattern)
        else:
            pattern_key = ("seq", tuple(pattern))
        if strategy is Strategy.RABIN_KARP:
            key: Hashable = (strategy, matcher.base, matcher.modulus, pattern_key)
        else:
            key = (strategy, pattern_key)

        try:
            hash(key)
        except TypeError:
            return None
        return key

    def _record(self, strategy: Strategy, matches: List[int], execution_time: float) -> None:
        with self._stats_lock:
            self._stats["total_searches"] += 1
            self._stats["strategy_usage"][strategy.value] += 1
            self._stats["total_execution_time"] += execution_time
            self._stats["total_matches_reported"] += len(matches)
            if matches:
                self._stats["searches_with_matches"] += 1
            else:
                self._stats["searches_without_matches"] += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        with self._stats_lock:
            stats = self._stats.copy()
            stats["strategy_usage"] = dict(self._stats["strategy_usage"])

        # Calculate averages
        if stats["total_searches"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_searches"]
            )
            stats["match_rate"] = stats["searches_with_matches"] / stats["total_searches"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["match_rate"] = 0.0

        stats["cache_stats"] = {"enabled": self.enable_cache, **self.table_cache.snapshot()}
        stats["default_strategy"] = self.default_strategy.value

        return stats

    def clear(self) -> None:
        """Drop cached tables and reset statistics."""
        self.table_cache.clear()
        with self._stats_lock:
            self._stats = _empty_stats()
