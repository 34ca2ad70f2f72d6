"""Strategy enumeration for the exact matchers."""

from enum import Enum
from typing import Dict, Union

from .errors import UnknownStrategyError


class Strategy(str, Enum):
    """Closed set of supported exact-matching algorithms."""

    KMP = "kmp"
    BOYER_MOORE = "boyer_moore"
    RABIN_KARP = "rabin_karp"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, value: Union["Strategy", str]) -> "Strategy":
        """
        Resolve a strategy tag.

        Accepts enum members, their values, and a few common spellings
        ("naive", "Boyer-Moore", "RABIN KARP").

        Raises:
            UnknownStrategyError: if the value names no strategy
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownStrategyError(value)

        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        strategy = _ALIASES.get(key)
        if strategy is None:
            raise UnknownStrategyError(value)
        return strategy


_ALIASES: Dict[str, Strategy] = {
    "kmp": Strategy.KMP,
    "naive": Strategy.KMP,
    "knuth_morris_pratt": Strategy.KMP,
    "boyer_moore": Strategy.BOYER_MOORE,
    "bm": Strategy.BOYER_MOORE,
    "rabin_karp": Strategy.RABIN_KARP,
    "rk": Strategy.RABIN_KARP,
    "sunday": Strategy.SUNDAY,
}
