"""Shared contract for the exact-matching strategies."""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Sequence

from .errors import ConfigurationError
from .strategy import Strategy


class BaseMatcher(ABC):
    """
    One exact single-pattern matching algorithm.

    Subclasses supply the table builder and the scanning loop. The edge
    cases every strategy must agree on (empty pattern, pattern longer than
    text, stale tables) are handled here so the scanners only ever see
    1 <= m <= n.
    """

    strategy: Strategy
    table_type: type

    @abstractmethod
    def build_table(self, pattern: Sequence[Any]) -> Any:
        """Build this strategy's table from the pattern alone."""

    @abstractmethod
    def _scan(self, text: Sequence[Any], pattern: Sequence[Any], table: Any) -> Iterator[int]:
        """Yield every match position in ascending order. Called with 1 <= m <= n."""

    def iter_matches(
        self,
        text: Sequence[Any],
        pattern: Sequence[Any],
        table: Optional[Any] = None,
    ) -> Iterator[int]:
        """
        Lazily yield the start index of every occurrence, overlapping ones included.

        Args:
            text: Sequence to search
            pattern: Sequence to look for
            table: Table previously built by this matcher for ``pattern``

        Returns:
            Generator of strictly increasing indices
        """
        if table is not None:
            self._check_table(pattern, table)

        n, m = len(text), len(pattern)
        if m == 0:
            return iter(range(n + 1))
        if m > n:
            return iter(())

        if table is None:
            table = self.build_table(pattern)
        return self._scan(text, pattern, table)

    def search(
        self,
        text: Sequence[Any],
        pattern: Sequence[Any],
        table: Optional[Any] = None,
    ) -> Optional[int]:
        """Return the index of the first occurrence, or None."""
        return next(self.iter_matches(text, pattern, table), None)

    def _check_table(self, pattern: Sequence[Any], table: Any) -> None:
        if not isinstance(table, self.table_type):
            raise ConfigurationError(
                f"{self.strategy.value} expects a {self.table_type.__name__}, "
                f"got {type(table).__name__}"
            )
        if table.pattern_length != len(pattern):
            raise ConfigurationError(
                f"Table was built for a pattern of length {table.pattern_length}, "
                f"not {len(pattern)}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
