"""Unit tests for the matcher facade and cross-strategy properties."""

import pytest
from hypothesis import given, settings, strategies as st

from exact_matcher import (
    ConfigurationError,
    Strategy,
    UnknownStrategyError,
    build_table,
    count,
    find_all,
    find_first,
)
from exact_matcher.core.kmp import KMPMatcher
from exact_matcher.core.matcher import get_matcher
from exact_matcher.core.rabin_karp import RabinKarpMatcher

ALL_STRATEGIES = list(Strategy)


def brute_force(text, pattern):
    """Reference occurrence list by direct comparison at every offset."""
    m = len(pattern)
    return [
        i for i in range(len(text) - m + 1)
        if all(text[i + k] == pattern[k] for k in range(m))
    ]


class TestStrategyParsing:
    """Test cases for strategy selection."""
    
    @pytest.mark.parametrize("tag,expected", [
        ("kmp", Strategy.KMP),
        ("naive", Strategy.KMP),
        ("Boyer-Moore", Strategy.BOYER_MOORE),
        ("bm", Strategy.BOYER_MOORE),
        ("RABIN_KARP", Strategy.RABIN_KARP),
        ("rabin karp", Strategy.RABIN_KARP),
        (" sunday ", Strategy.SUNDAY),
        (Strategy.SUNDAY, Strategy.SUNDAY),
    ])
    def test_parse(self, tag, expected):
        """Test accepted spellings."""
        assert Strategy.parse(tag) is expected
    
    @pytest.mark.parametrize("tag", ["horspool", "", None, 3])
    def test_unknown_strategy(self, tag):
        """Test that unknown tags fail as configuration errors."""
        with pytest.raises(UnknownStrategyError):
            Strategy.parse(tag)
    
    def test_unknown_strategy_is_value_error(self):
        """Test the error hierarchy."""
        with pytest.raises(ValueError):
            find_first("abc", "a", "horspool")
    
    def test_get_matcher(self):
        """Test dispatch from tag to matcher class."""
        assert isinstance(get_matcher("naive"), KMPMatcher)
        matcher = get_matcher("rk", base=31, modulus=97)
        assert isinstance(matcher, RabinKarpMatcher)
        assert (matcher.base, matcher.modulus) == (31, 97)
    
    def test_unsupported_parameters(self):
        """Test that parameters a strategy does not take are rejected."""
        with pytest.raises(ConfigurationError):
            get_matcher(Strategy.KMP, base=31)
    
    def test_degenerate_modulus(self):
        """Test that a zero modulus fails before scanning."""
        with pytest.raises(ConfigurationError):
            find_first("abc", "b", Strategy.RABIN_KARP, modulus=0)


@pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.value)
class TestFacade:
    """Facade behaviour, repeated for every strategy."""
    
    def test_find_first(self, strategy):
        """Test the reference first-match scenario."""
        assert find_first("ABABDABACDABABCABAB", "ABABCABAB", strategy) == 10
    
    def test_find_first_not_found(self, strategy):
        """Test that not-found is None."""
        assert find_first("hello", "world", strategy) is None
        assert find_first("abc", "abcd", strategy) is None
    
    def test_empty_inputs(self, strategy):
        """Test the empty pattern on an empty text."""
        assert find_first("", "", strategy) == 0
        assert list(find_all("", "", strategy)) == [0]
    
    def test_find_all_overlapping(self, strategy):
        """Test that overlapping matches are reported by default."""
        assert list(find_all("AAAAAA", "AAA", strategy)) == [0, 1, 2, 3]
    
    def test_find_all_non_overlapping(self, strategy):
        """Test skipping matches that start inside the previous one."""
        assert list(find_all("AAAAAA", "AAA", strategy, overlapping=False)) == [0, 3]
        assert list(find_all("abababa", "aba", strategy, overlapping=False)) == [0, 4]
    
    def test_find_all_is_restartable(self, strategy):
        """Test that calling again starts a fresh scan."""
        first = find_all("abcabcabc", "abc", strategy)
        assert next(first) == 0
        
        assert list(find_all("abcabcabc", "abc", strategy)) == [0, 3, 6]
        assert list(first) == [3, 6]
    
    def test_prebuilt_table(self, strategy):
        """Test searching with a table built up front."""
        table = build_table("needle", strategy)
        
        assert find_first("haystack with a needle", "needle", strategy, table=table) == 16
        assert list(find_all("needle needle", "needle", strategy, table=table)) == [0, 7]
    
    def test_count(self, strategy):
        """Test counting occurrences."""
        assert count("banana", "ana", strategy) == 2
        assert count("banana", "ana", strategy, overlapping=False) == 1
        assert count("banana", "xyz", strategy) == 0
    
    def test_find_all_fails_fast(self, strategy):
        """Test that a bad table is rejected before the iterator is consumed."""
        with pytest.raises(ConfigurationError):
            find_all("abc", "abc", strategy, table=object())


class TestCrossStrategyProperties:
    """Property-based agreement between the strategies and a brute-force reference."""
    
    @settings(max_examples=300)
    @given(st.text(alphabet="ab", max_size=40), st.text(alphabet="ab", max_size=6))
    def test_find_all_complete_and_agreeing(self, text, pattern):
        """All strategies report exactly the brute-force occurrences."""
        expected = brute_force(text, pattern)
        
        for strategy in ALL_STRATEGIES:
            assert list(find_all(text, pattern, strategy)) == expected
    
    @given(st.text(alphabet="abc", max_size=40), st.text(alphabet="abc", max_size=5))
    def test_find_first_agrees(self, text, pattern):
        """All strategies agree on the first occurrence."""
        results = {find_first(text, pattern, strategy) for strategy in ALL_STRATEGIES}
        
        assert len(results) == 1
        assert results.pop() == (text.find(pattern) if pattern in text else None)
    
    @given(st.text(), st.text(min_size=1, max_size=4))
    def test_no_false_positives(self, text, pattern):
        """Every reported index is a real occurrence."""
        for strategy in ALL_STRATEGIES:
            for index in find_all(text, pattern, strategy):
                assert text[index:index + len(pattern)] == pattern
    
    @given(st.lists(st.integers(0, 3), max_size=30), st.lists(st.integers(0, 3), max_size=4))
    def test_integer_sequences(self, text, pattern):
        """Strategies agree on sequences of integers."""
        expected = brute_force(text, pattern)
        
        for strategy in ALL_STRATEGIES:
            assert list(find_all(text, pattern, strategy)) == expected
    
    @given(
        st.lists(st.integers(-2, 2).flatmap(lambda n: st.sampled_from([n, float(n)])), max_size=20),
        st.lists(st.integers(-2, 2).flatmap(lambda n: st.sampled_from([n, float(n)])), min_size=1, max_size=3),
    )
    def test_mixed_int_and_float_symbols(self, text, pattern):
        """Strategies agree when equal symbols differ in numeric type."""
        expected = brute_force(text, pattern)

        for strategy in ALL_STRATEGIES:
            assert list(find_all(text, pattern, strategy)) == expected

    def test_negative_float_symbol(self):
        """A float pattern symbol matches its equal int in the text."""
        for strategy in ALL_STRATEGIES:
            assert find_first([5, -1, 7], [-1.0], strategy) == 1

    @given(st.binary(min_size=1, max_size=20))
    def test_self_match(self, pattern):
        """A non-empty pattern is found in itself at 0."""
        for strategy in ALL_STRATEGIES:
            assert find_first(pattern, pattern, strategy) == 0
    
    @given(st.text(max_size=10))
    def test_empty_pattern(self, text):
        """The empty pattern is found at 0 of any text."""
        for strategy in ALL_STRATEGIES:
            assert find_first(text, "", strategy) == 0
    
    @given(st.text(alphabet="ab", max_size=5), st.text(alphabet="ab", min_size=6, max_size=8))
    def test_pattern_longer_than_text(self, text, pattern):
        """A pattern longer than the text is never found."""
        for strategy in ALL_STRATEGIES:
            assert find_first(text, pattern, strategy) is None
            assert list(find_all(text, pattern, strategy)) == []
    
    @given(st.text(alphabet="ab", max_size=30), st.text(alphabet="ab", min_size=1, max_size=4))
    def test_rabin_karp_with_colliding_hash(self, text, pattern):
        """A hash that collides constantly still yields exact results."""
        expected = brute_force(text, pattern)
        
        assert list(find_all(text, pattern, Strategy.RABIN_KARP, base=1, modulus=2)) == expected
