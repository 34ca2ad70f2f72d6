"""Knuth-Morris-Pratt prefix matcher."""

from typing import Any, Iterator, Sequence

from .base import BaseMatcher
from .strategy import Strategy
from .tables import FailureTable, build_failure


class KMPMatcher(BaseMatcher):
    """
    Prefix-function matcher.

    The text index only moves forward, so a scan costs O(n + m) regardless
    of how repetitive the input is.
    """

    strategy = Strategy.KMP
    table_type = FailureTable

    def build_table(self, pattern: Sequence[Any]) -> FailureTable:
        return build_failure(pattern)

    def _scan(self, text: Sequence[Any], pattern: Sequence[Any], table: FailureTable) -> Iterator[int]:
        failure = table.failure
        m = len(pattern)
        j = 0

        for i, symbol in enumerate(text):
            while j > 0 and symbol != pattern[j]:
                j = failure[j - 1]
            if symbol == pattern[j]:
                j += 1
            if j == m:
                yield i - m + 1
                j = failure[j - 1]
