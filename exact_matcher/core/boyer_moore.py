"""Boyer-Moore matcher with bad-character and good-suffix heuristics."""

from typing import Any, Hashable, Iterator, Sequence

from .base import BaseMatcher
from .strategy import Strategy
from .tables import BoyerMooreTables, build_boyer_moore_tables


class BoyerMooreMatcher(BaseMatcher):
    """
    Right-to-left comparison with the larger of the two classical shifts.

    Sub-linear on typical text; degrades to O(n * m) on highly repetitive
    patterns.
    """

    strategy = Strategy.BOYER_MOORE
    table_type = BoyerMooreTables

    def build_table(self, pattern: Sequence[Hashable]) -> BoyerMooreTables:
        return build_boyer_moore_tables(pattern)

    def _scan(self, text: Sequence[Any], pattern: Sequence[Any], table: BoyerMooreTables) -> Iterator[int]:
        bad_character = table.bad_character
        good_suffix = table.good_suffix
        n, m = len(text), len(pattern)
        s = 0

        while s <= n - m:
            j = m - 1
            while j >= 0 and pattern[j] == text[s + j]:
                j -= 1

            if j < 0:
                yield s
                s += table.match_shift
                continue

            bad_character_shift = j - bad_character.get(text[s + j], -1)
            s += max(1, bad_character_shift, good_suffix[j])
