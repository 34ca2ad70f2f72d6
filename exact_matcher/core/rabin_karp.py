"""Rabin-Karp rolling-hash matcher."""

from typing import Any, Iterator, Sequence

from .base import BaseMatcher
from .strategy import Strategy
from .tables import (
    DEFAULT_BASE,
    DEFAULT_MODULUS,
    RollingHashTable,
    build_rolling_hash,
    symbol_value,
    validate_hash_parameters,
)


class RabinKarpMatcher(BaseMatcher):
    """
    Sliding-window hash comparison.

    Every hash hit is checked symbol by symbol before it is reported, so
    collisions cost time but never produce a false match.
    """

    strategy = Strategy.RABIN_KARP
    table_type = RollingHashTable

    def __init__(self, base: int = DEFAULT_BASE, modulus: int = DEFAULT_MODULUS) -> None:
        """
        Args:
            base: Polynomial base of the rolling hash
            modulus: Hash modulus, must be at least 2

        Raises:
            ConfigurationError: on degenerate parameters
        """
        validate_hash_parameters(base, modulus)
        self.base = base
        self.modulus = modulus

    def build_table(self, pattern: Sequence[Any]) -> RollingHashTable:
        return build_rolling_hash(pattern, self.base, self.modulus)

    def _check_table(self, pattern: Sequence[Any], table: Any) -> None:
        super()._check_table(pattern, table)
        validate_hash_parameters(table.base, table.modulus)

    def _scan(self, text: Sequence[Any], pattern: Sequence[Any], table: RollingHashTable) -> Iterator[int]:
        base = table.base
        modulus = table.modulus
        high_power = table.high_power
        n, m = len(text), len(pattern)

        window = 0
        for i in range(m):
            window = (window * base + symbol_value(text[i])) % modulus

        for s in range(n - m + 1):
            if window == table.pattern_hash and _verify(text, pattern, s):
                yield s
            if s < n - m:
                outgoing = symbol_value(text[s]) * high_power
                window = ((window - outgoing) * base + symbol_value(text[s + m])) % modulus

    def __repr__(self) -> str:
        return f"RabinKarpMatcher(base={self.base}, modulus={self.modulus})"


def _verify(text: Sequence[Any], pattern: Sequence[Any], offset: int) -> bool:
    for k, symbol in enumerate(pattern):
        if text[offset + k] != symbol:
            return False
    return True
