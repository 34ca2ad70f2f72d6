"""Sunday (quick search) matcher."""

from typing import Any, Hashable, Iterator, Sequence

from .base import BaseMatcher
from .strategy import Strategy
from .tables import SundayShiftTable, build_shift_table


class SundayMatcher(BaseMatcher):
    """Left-to-right comparison, shifting on the text symbol just past the window."""

    strategy = Strategy.SUNDAY
    table_type = SundayShiftTable

    def build_table(self, pattern: Sequence[Hashable]) -> SundayShiftTable:
        return build_shift_table(pattern)

    def _scan(self, text: Sequence[Any], pattern: Sequence[Any], table: SundayShiftTable) -> Iterator[int]:
        shifts = table.shifts
        default_shift = table.default_shift
        n, m = len(text), len(pattern)
        s = 0

        while s <= n - m:
            j = 0
            while j < m and text[s + j] == pattern[j]:
                j += 1
            if j == m:
                yield s

            # Nothing follows the window: no further alignment fits
            if s + m >= n:
                return
            s += shifts.get(text[s + m], default_shift)
