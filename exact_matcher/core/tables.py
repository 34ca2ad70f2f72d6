"""Shift and failure tables derived from a pattern.

Every builder here is a pure function of the pattern (plus hash parameters
for Rabin-Karp). Tables are frozen once built so they can be cached and
shared across searches of different texts.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Hashable, List, Mapping, Sequence, Tuple

from .errors import ConfigurationError

DEFAULT_BASE = 256
DEFAULT_MODULUS = (1 << 61) - 1  # Mersenne prime


@dataclass(frozen=True)
class FailureTable:
    """KMP failure function: failure[i] is the longest proper border of pattern[:i + 1]."""

    pattern_length: int
    failure: Tuple[int, ...]


@dataclass(frozen=True)
class BoyerMooreTables:
    """Bad-character and good-suffix tables for Boyer-Moore."""

    pattern_length: int
    bad_character: Mapping[Hashable, int]
    good_suffix: Tuple[int, ...]
    match_shift: int


@dataclass(frozen=True)
class RollingHashTable:
    """Polynomial hash of the pattern plus the constants needed to roll a window."""

    pattern_length: int
    pattern_hash: int
    base: int
    modulus: int
    high_power: int


@dataclass(frozen=True)
class SundayShiftTable:
    """Per-symbol shift keyed on the text symbol just past the window."""

    pattern_length: int
    shifts: Mapping[Hashable, int]
    default_shift: int


def build_failure(pattern: Sequence[Any]) -> FailureTable:
    """Compute the KMP failure function for a pattern."""
    m = len(pattern)
    failure = [0] * m
    length = 0
    i = 1

    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            failure[i] = length
            i += 1
        elif length != 0:
            length = failure[length - 1]
        else:
            failure[i] = 0
            i += 1

    return FailureTable(pattern_length=m, failure=tuple(failure))


def build_bad_character(pattern: Sequence[Hashable]) -> Mapping[Hashable, int]:
    """Map each symbol of the pattern to its rightmost index."""
    table = {}
    for index, symbol in enumerate(pattern):
        table[symbol] = index
    return MappingProxyType(table)


def _strong_suffix_shifts(pattern: Sequence[Any]) -> List[int]:
    """
    Classical good-suffix preprocessing.

    Returns a list of m + 1 shifts where entry j + 1 is the shift after a
    mismatch at pattern position j and entry 0 is the shift after a full match.
    """
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)

    # Matched suffix re-occurs elsewhere in the pattern
    i, j = m, m + 1
    border[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j

    # Part of the matched suffix is a prefix of the pattern; otherwise shift by m
    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]

    return shift


def build_good_suffix(pattern: Sequence[Any]) -> Tuple[int, ...]:
    """Good-suffix shift for a mismatch at each pattern position."""
    return tuple(_strong_suffix_shifts(pattern)[1:])


def build_boyer_moore_tables(pattern: Sequence[Hashable]) -> BoyerMooreTables:
    """Build both Boyer-Moore tables in one pass over the good-suffix preprocessing."""
    shifts = _strong_suffix_shifts(pattern)
    return BoyerMooreTables(
        pattern_length=len(pattern),
        bad_character=build_bad_character(pattern),
        good_suffix=tuple(shifts[1:]),
        match_shift=shifts[0],
    )


def symbol_value(symbol: Any) -> int:
    """
    Integer value of a symbol for hashing.

    Equal symbols map to equal values (1 and 1.0 alike); byte values 0-255
    map to themselves.
    """
    if isinstance(symbol, str) and len(symbol) == 1:
        return ord(symbol)
    return hash(symbol)


def validate_hash_parameters(base: int, modulus: int) -> None:
    """
    Reject hash parameters that would make the rolling hash meaningless.

    Raises:
        ConfigurationError: on a non-integer or degenerate base or modulus
    """
    if not isinstance(base, int) or isinstance(base, bool) or base < 1:
        raise ConfigurationError(f"Rabin-Karp base must be a positive integer, got {base!r}")
    if not isinstance(modulus, int) or isinstance(modulus, bool) or modulus < 2:
        raise ConfigurationError(f"Rabin-Karp modulus must be an integer >= 2, got {modulus!r}")


def build_pattern_hash(
    pattern: Sequence[Any],
    base: int = DEFAULT_BASE,
    modulus: int = DEFAULT_MODULUS,
) -> int:
    """Polynomial hash of a whole sequence under (base, modulus)."""
    validate_hash_parameters(base, modulus)
    value = 0
    for symbol in pattern:
        value = (value * base + symbol_value(symbol)) % modulus
    return value


def build_rolling_hash(
    pattern: Sequence[Any],
    base: int = DEFAULT_BASE,
    modulus: int = DEFAULT_MODULUS,
) -> RollingHashTable:
    """Build the Rabin-Karp table for a pattern."""
    m = len(pattern)
    return RollingHashTable(
        pattern_length=m,
        pattern_hash=build_pattern_hash(pattern, base, modulus),
        base=base,
        modulus=modulus,
        high_power=pow(base, m - 1, modulus) if m else 0,
    )


def build_shift_table(pattern: Sequence[Hashable]) -> SundayShiftTable:
    """Sunday shifts: distance from a symbol's rightmost occurrence to the pattern end, plus one."""
    m = len(pattern)
    shifts = {}
    for index, symbol in enumerate(pattern):
        shifts[symbol] = m - index
    return SundayShiftTable(
        pattern_length=m,
        shifts=MappingProxyType(shifts),
        default_shift=m + 1,
    )
