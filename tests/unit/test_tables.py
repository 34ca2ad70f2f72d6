"""Unit tests for pattern table construction."""

import dataclasses

import pytest
from hypothesis import given, strategies as st

from exact_matcher.core.errors import ConfigurationError
from exact_matcher.core.tables import (
    DEFAULT_MODULUS,
    build_bad_character,
    build_boyer_moore_tables,
    build_failure,
    build_good_suffix,
    build_pattern_hash,
    build_rolling_hash,
    build_shift_table,
    symbol_value,
)


class TestFailureTable:
    """Test cases for the KMP failure function."""
    
    def test_classic_pattern(self):
        """Test the failure function of a pattern with nested borders."""
        table = build_failure("ABABCABAB")
        
        assert table.failure == (0, 0, 1, 2, 0, 1, 2, 3, 4)
        assert table.pattern_length == 9
    
    def test_repetitive_pattern(self):
        """Test a pattern made of one repeated symbol."""
        assert build_failure("AAAA").failure == (0, 1, 2, 3)
    
    def test_no_borders(self):
        """Test a pattern with no repeated symbols."""
        assert build_failure("ABCD").failure == (0, 0, 0, 0)
    
    def test_empty_pattern(self):
        """Test that an empty pattern yields an empty table."""
        table = build_failure("")
        
        assert table.failure == ()
        assert table.pattern_length == 0
    
    @given(st.text(alphabet="ab", min_size=1, max_size=40))
    def test_failure_is_longest_border(self, pattern):
        """Every entry is the longest proper border of its prefix."""
        failure = build_failure(pattern).failure
        
        assert failure[0] == 0
        for i, length in enumerate(failure):
            prefix = pattern[:i + 1]
            assert length <= i
            assert prefix[:length] == prefix[len(prefix) - length:]
            longer = [
                k for k in range(length + 1, len(prefix))
                if prefix[:k] == prefix[len(prefix) - k:]
            ]
            assert longer == []


class TestBoyerMooreTables:
    """Test cases for the bad-character and good-suffix tables."""
    
    def test_bad_character_rightmost_index(self):
        """Test that each symbol maps to its rightmost position."""
        table = build_bad_character("ABCAB")
        
        assert dict(table) == {"A": 3, "B": 4, "C": 2}
    
    def test_good_suffix_without_repeats(self):
        """Test the fallback shift when the matched suffix never re-occurs."""
        assert build_good_suffix("ABCD") == (4, 4, 4, 1)
    
    def test_match_shift_is_smallest_period(self):
        """Test the shift applied after a full match."""
        assert build_boyer_moore_tables("ABCD").match_shift == 4
        assert build_boyer_moore_tables("ABAB").match_shift == 2
        assert build_boyer_moore_tables("AAA").match_shift == 1
    
    def test_single_symbol_pattern(self):
        """Test tables for a one-symbol pattern."""
        tables = build_boyer_moore_tables("A")
        
        assert tables.good_suffix == (1,)
        assert tables.match_shift == 1
        assert dict(tables.bad_character) == {"A": 0}
    
    @given(st.text(alphabet="abc", min_size=1, max_size=30))
    def test_good_suffix_shifts_are_positive(self, pattern):
        """Good-suffix shifts never stall or exceed the pattern length."""
        tables = build_boyer_moore_tables(pattern)
        
        assert len(tables.good_suffix) == len(pattern)
        assert all(1 <= shift <= len(pattern) for shift in tables.good_suffix)
        assert 1 <= tables.match_shift <= len(pattern)
    
    def test_tables_are_immutable(self):
        """Test that built tables cannot be modified."""
        tables = build_boyer_moore_tables("ABC")
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            tables.match_shift = 7
        with pytest.raises(TypeError):
            tables.bad_character["Z"] = 1


class TestRollingHash:
    """Test cases for the Rabin-Karp hash table."""
    
    def test_pattern_hash(self):
        """Test the polynomial hash of a short pattern."""
        assert build_pattern_hash("ab", base=256, modulus=101) == (97 * 256 + 98) % 101
    
    def test_high_power(self):
        """Test the weight of the leading symbol in a window."""
        table = build_rolling_hash("abc", base=10, modulus=1000)
        
        assert table.high_power == 100
        assert table.pattern_length == 3
    
    def test_default_parameters(self):
        """Test the default modulus is the Mersenne prime 2^61 - 1."""
        table = build_rolling_hash("abc")
        
        assert table.base == 256
        assert table.modulus == DEFAULT_MODULUS == 2 ** 61 - 1
    
    def test_bytes_and_str_hash_alike(self):
        """ASCII bytes and str patterns hash to the same value."""
        assert build_pattern_hash(b"hello") == build_pattern_hash("hello")
    
    @pytest.mark.parametrize("base,modulus", [(256, 0), (256, 1), (0, 101), (-3, 101), (256, True)])
    def test_degenerate_parameters(self, base, modulus):
        """Test that degenerate hash parameters are rejected."""
        with pytest.raises(ConfigurationError):
            build_rolling_hash("abc", base=base, modulus=modulus)
    
    def test_symbol_value(self):
        """Test the integer mapping of symbols."""
        assert symbol_value("a") == 97
        assert symbol_value(200) == 200
        assert symbol_value(("x", 1)) == hash(("x", 1))

    def test_equal_symbols_share_a_value(self):
        """Test that numerically equal symbols of different types hash alike."""
        assert symbol_value(-1) == symbol_value(-1.0)
        assert symbol_value(2 ** 70) == symbol_value(float(2 ** 70))
        assert symbol_value(True) == symbol_value(1)

    def test_byte_values_map_to_themselves(self):
        """Test that every byte value keeps its own integer value."""
        assert [symbol_value(b) for b in bytes(range(256))] == list(range(256))


class TestSundayShiftTable:
    """Test cases for the Sunday shift table."""
    
    def test_shifts(self):
        """Test distance from the rightmost occurrence to the end, plus one."""
        table = build_shift_table("ABCAB")
        
        assert dict(table.shifts) == {"A": 2, "B": 1, "C": 3}
        assert table.default_shift == 6
    
    def test_empty_pattern(self):
        """Test the shift table of an empty pattern."""
        table = build_shift_table("")
        
        assert dict(table.shifts) == {}
        assert table.default_shift == 1
