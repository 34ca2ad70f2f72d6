"""Uniform entry points over the four exact-matching strategies."""

from typing import Any, Dict, Iterator, Optional, Sequence, Type, Union

from .base import BaseMatcher
from .boyer_moore import BoyerMooreMatcher
from .errors import ConfigurationError
from .kmp import KMPMatcher
from .rabin_karp import RabinKarpMatcher
from .strategy import Strategy
from .sunday import SundayMatcher

StrategyLike = Union[Strategy, str]

MATCHERS: Dict[Strategy, Type[BaseMatcher]] = {
    Strategy.KMP: KMPMatcher,
    Strategy.BOYER_MOORE: BoyerMooreMatcher,
    Strategy.RABIN_KARP: RabinKarpMatcher,
    Strategy.SUNDAY: SundayMatcher,
}

_missing = set(Strategy) - set(MATCHERS)
if _missing:
    raise RuntimeError(f"No matcher registered for {sorted(s.value for s in _missing)}")


def get_matcher(strategy: StrategyLike, **params: Any) -> BaseMatcher:
    """
    Instantiate the matcher for a strategy.

    Args:
        strategy: Strategy member or tag
        **params: Strategy parameters (only Rabin-Karp takes any: base, modulus)

    Raises:
        ConfigurationError: for an unknown strategy or unsupported parameters
    """
    matcher_class = MATCHERS[Strategy.parse(strategy)]
    try:
        return matcher_class(**params)
    except TypeError as e:
        raise ConfigurationError(
            f"Invalid parameters for {matcher_class.__name__}: {sorted(params)}"
        ) from e


def build_table(pattern: Sequence[Any], strategy: StrategyLike = Strategy.KMP, **params: Any) -> Any:
    """Build a reusable table for ``pattern`` under the given strategy."""
    return get_matcher(strategy, **params).build_table(pattern)


def find_first(
    text: Sequence[Any],
    pattern: Sequence[Any],
    strategy: StrategyLike = Strategy.KMP,
    table: Optional[Any] = None,
    **params: Any,
) -> Optional[int]:
    """
    Find the first occurrence of ``pattern`` in ``text``.

    Returns:
        Start index of the first occurrence, or None when there is none
    """
    return get_matcher(strategy, **params).search(text, pattern, table)


def find_all(
    text: Sequence[Any],
    pattern: Sequence[Any],
    strategy: StrategyLike = Strategy.KMP,
    table: Optional[Any] = None,
    overlapping: bool = True,
    **params: Any,
) -> Iterator[int]:
    """
    Lazily enumerate occurrences of ``pattern`` in ``text``.

    Configuration is validated immediately; scanning only happens as the
    returned iterator is consumed. Call again to restart.

    Args:
        text: Sequence to search
        pattern: Sequence to look for
        strategy: Strategy member or tag
        table: Prebuilt table for ``pattern`` and ``strategy``
        overlapping: When False, skip matches that start inside the previous one

    Returns:
        Iterator of strictly increasing start indices
    """
    matches = get_matcher(strategy, **params).iter_matches(text, pattern, table)
    if overlapping or len(pattern) == 0:
        return matches
    return non_overlapping(matches, len(pattern))


def count(
    text: Sequence[Any],
    pattern: Sequence[Any],
    strategy: StrategyLike = Strategy.KMP,
    overlapping: bool = True,
    **params: Any,
) -> int:
    """Number of occurrences of ``pattern`` in ``text``."""
    return sum(1 for _ in find_all(text, pattern, strategy, overlapping=overlapping, **params))


def non_overlapping(matches: Iterator[int], width: int) -> Iterator[int]:
    next_free = 0
    for index in matches:
        if index >= next_free:
            yield index
            next_free = index + width
