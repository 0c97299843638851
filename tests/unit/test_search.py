"""
Unit tests for Stringy search and windowing.

Tests cover:
- index_of / index_of_last with positive and negative offsets
- contains, contains_any, contains_all with and without case folding
- starts_with / ends_with and their _any variants
- between and count_substr
"""

import pytest

from stringy.core import search

ODD = "å´¥©¨ˆßå˚ ∆∂˙©å∑¥øœ¬"
GREEK = "Ο συγγραφέας είπε"


class TestIndexOf:
    """Tests for forward search."""

    @pytest.mark.parametrize(
        "haystack, needle, offset, expected",
        [
            ("foo & bar", "bar", 0, 6),
            ("foo & bar", "baz", 0, None),
            ("foo & bar & foo", "foo", 0, 0),
            ("foo & bar & foo", "foo", 5, 12),
            ("fòô & bàř", "bàř", 0, 6),
            ("fòô & bàř & fòô", "fòô", 5, 12),
        ],
    )
    def test_index_of(self, haystack, needle, offset, expected):
        assert search.index_of(haystack, needle, offset) == expected

    def test_negative_offset_counts_from_end(self):
        assert search.index_of("foo & bar & foo", "foo", -3) == 12

    def test_offset_past_end(self):
        assert search.index_of("foo", "o", 10) is None


class TestIndexOfLast:
    """Tests for backward search."""

    @pytest.mark.parametrize(
        "haystack, needle, offset, expected",
        [
            ("foo & bar", "bar", 0, 6),
            ("foo & bar", "baz", 0, None),
            ("foo & bar & foo", "foo", 0, 12),
            ("foo & bar & foo", "foo", -5, 0),
            ("fòô & bàř & fòô", "fòô", 0, 12),
            ("fòô & bàř & fòô", "fòô", -5, 0),
        ],
    )
    def test_index_of_last(self, haystack, needle, offset, expected):
        assert search.index_of_last(haystack, needle, offset) == expected

    def test_positive_offset_limits_start(self):
        """Test that a match must start at or after a positive offset."""
        assert search.index_of_last("foo & bar & foo", "bar", 7) is None
        assert search.index_of_last("foo & bar & foo", "foo", 1) == 12

    def test_offset_out_of_range(self):
        assert search.index_of_last("foo", "o", 4) is None
        assert search.index_of_last("foo", "o", -4) is None


class TestContains:
    """Tests for substring membership."""

    @pytest.mark.parametrize(
        "haystack, needle, case_sensitive, expected",
        [
            ("Str contains foo bar", "foo bar", True, True),
            ("12398!@(*%!@# @!%#*&^%", " @!%#*&^%", True, True),
            (GREEK, "συγγραφέας", True, True),
            (ODD, "å˚ ∆", True, True),
            ("Str contains foo bar", "Foo bar", True, False),
            ("Str contains foo bar", "foo bar ", True, False),
            (GREEK, "  συγγραφέας ", True, False),
            (ODD, " ßå˚", True, False),
            ("Str contains foo bar", "Foo bar", False, True),
            (GREEK, "ΣΥΓΓΡΑΦΈΑΣ", False, True),
            (ODD, "Å´¥©", False, True),
            (ODD, "ØŒ¬", False, True),
            ("Str contains foo bar", "foobar", False, False),
            (ODD, " ßÅ˚", False, False),
        ],
    )
    def test_contains(self, haystack, needle, case_sensitive, expected):
        assert search.contains(haystack, needle, case_sensitive) is expected

    def test_contains_any(self):
        assert search.contains_any("Str contains foo bar", ["foo", "bar"])
        assert search.contains_any(GREEK, ["ΣΥΓΓΡΑΦΈΑΣ", "ΑΦΈΑ"], case_sensitive=False)
        assert not search.contains_any("Str contains foo bar", ["Foo", "Bar"])
        assert not search.contains_any(ODD, [" ßÅ˚", " Å˚ "], case_sensitive=False)

    def test_contains_all(self):
        assert search.contains_all("Str contains foo bar", ["foo", "bar"])
        assert search.contains_all(ODD, ["Å˚ ∆", " ∆"], case_sensitive=False)
        assert not search.contains_all("Str contains foo bar", ["Foo", "bar"])
        assert not search.contains_all("Str contains foo bar", ["foo bar ", " ba"], case_sensitive=False)

    def test_empty_collection_never_matches(self):
        """Test that an empty needle collection is False for both any and all."""
        assert not search.contains_any("Str contains foo bar", [])
        assert not search.contains_all("Str contains foo bar", [])

    def test_accepts_generators(self):
        needles = (n for n in ["foo", "bar"])
        assert search.contains_all("foo bar", needles)


class TestEdges:
    """Tests for prefix and suffix checks."""

    @pytest.mark.parametrize(
        "haystack, needle, case_sensitive, expected",
        [
            ("foo bars", "foo bar", True, True),
            ("FOO bars", "foo BAR", False, True),
            ("FÒÔ bàřs", "fòô bàř", False, True),
            ("foo bar", "foo bars", True, False),
            ("FOO bars", "foo BAR", True, False),
            ("FÒÔ bàřs", "fòô bàř", True, False),
        ],
    )
    def test_starts_with(self, haystack, needle, case_sensitive, expected):
        assert search.starts_with(haystack, needle, case_sensitive) is expected

    @pytest.mark.parametrize(
        "haystack, needle, case_sensitive, expected",
        [
            ("foo bars", "o bars", True, True),
            ("FOO bars", "o BARs", False, True),
            ("fòô bàřs", "ô BÀŘs", False, True),
            ("foo bar", "foo", True, False),
            ("FOO bar", "foo bars", True, False),
            ("fòô bàřs", "fòô BÀŘS", True, False),
        ],
    )
    def test_ends_with(self, haystack, needle, case_sensitive, expected):
        assert search.ends_with(haystack, needle, case_sensitive) is expected

    def test_starts_with_any(self):
        assert search.starts_with_any("FÒÔ bàřs", ["foo bar", "fòô bàř"], case_sensitive=False)
        assert not search.starts_with_any("foo bar", ["bar", "foo bars"])

    def test_ends_with_any(self):
        assert search.ends_with_any("fòô bàřs", ["foo", "ô BÀŘs"], case_sensitive=False)
        assert not search.ends_with_any("fòô bàřs", ["fòô", "fòô BÀŘS"])

    def test_empty_needle(self):
        assert search.starts_with("foo", "")
        assert search.ends_with("foo", "")


class TestBetween:
    """Tests for delimiter extraction."""

    @pytest.mark.parametrize(
        "haystack, start, end, offset, expected",
        [
            ("foo", "{", "}", 0, ""),
            ("{foo", "{", "}", 0, ""),
            ("{foo}", "{", "}", 0, "foo"),
            ("{{foo}", "{", "}", 0, "{foo"),
            ("{}foo}", "{", "}", 0, ""),
            ("}{foo}", "{", "}", 0, "foo"),
            ("A description of {foo} goes here", "{", "}", 0, "foo"),
            ("{foo} and {bar}", "{", "}", 1, "bar"),
            ("{fòô} and {bàř}", "{", "}", 1, "bàř"),
        ],
    )
    def test_between(self, haystack, start, end, offset, expected):
        assert search.between(haystack, start, end, offset) == expected


class TestCountSubstr:
    """Tests for occurrence counting."""

    @pytest.mark.parametrize(
        "haystack, needle, case_sensitive, expected",
        [
            ("", "foo", True, 0),
            ("foo", "bar", True, 0),
            ("foo bar", "o", True, 2),
            ("fôòô bàř", "ô", True, 2),
            ("fÔÒÔ bàř", "ô", True, 0),
            ("foo bar", "FOo", False, 1),
            ("fôòô bàř", "Ô", False, 2),
            ("συγγραφέας", "Σ", False, 2),
        ],
    )
    def test_count_substr(self, haystack, needle, case_sensitive, expected):
        assert search.count_substr(haystack, needle, case_sensitive) == expected

    def test_empty_needle_counts_nothing(self):
        assert search.count_substr("foo", "") == 0
