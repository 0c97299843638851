"""
Search and windowing over codepoint sequences.

Positions are codepoint offsets. Functions that can fail to find a needle
return None rather than a sentinel such as -1.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from stringy.core.codepoints import normalize_start, substring


def _fold(text: str) -> str:
    return text.casefold()


def index_of(haystack: str, needle: str, offset: int = 0) -> Optional[int]:
    """
    Find the first occurrence of needle at or after offset.

    A negative offset is counted from the end of the haystack.

    Examples:
        >>> index_of("foo & bar & foo", "foo", 5)
        12
    """
    start = normalize_start(offset, len(haystack))
    if start > len(haystack):
        return None
    position = haystack.find(needle, start)
    return None if position < 0 else position


def index_of_last(haystack: str, needle: str, offset: int = 0) -> Optional[int]:
    """
    Find the last occurrence of needle.

    With a non-negative offset only matches starting at or after offset are
    considered. With a negative offset the match must start at or before
    the position that offset addresses from the end.

    Examples:
        >>> index_of_last("foo & bar & foo", "foo")
        12
        >>> index_of_last("foo & bar & foo", "foo", -5)
        0
    """
    length = len(haystack)
    if offset >= 0:
        if offset > length:
            return None
        position = haystack.rfind(needle, offset)
    else:
        if -offset > length:
            return None
        position = haystack.rfind(needle, 0, length + offset + len(needle))
    return None if position < 0 else position


def contains(haystack: str, needle: str, case_sensitive: bool = True) -> bool:
    """Check if needle occurs anywhere in haystack."""
    if case_sensitive:
        return index_of(haystack, needle) is not None
    return index_of(_fold(haystack), _fold(needle)) is not None


def contains_any(haystack: str, needles: Iterable[str], case_sensitive: bool = True) -> bool:
    """
    Check if at least one needle occurs in haystack.

    An empty collection of needles never matches.
    """
    return any(contains(haystack, needle, case_sensitive) for needle in needles)


def contains_all(haystack: str, needles: Iterable[str], case_sensitive: bool = True) -> bool:
    """
    Check if every needle occurs in haystack.

    An empty collection of needles never matches.
    """
    needles = list(needles)
    if not needles:
        return False
    return all(contains(haystack, needle, case_sensitive) for needle in needles)


def count_substr(haystack: str, needle: str, case_sensitive: bool = True) -> int:
    """Count non-overlapping occurrences of needle."""
    if not needle:
        return 0
    if case_sensitive:
        return haystack.count(needle)
    return _fold(haystack).count(_fold(needle))


def starts_with(haystack: str, needle: str, case_sensitive: bool = True) -> bool:
    window = haystack[: len(needle)]
    if len(window) < len(needle):
        return False
    if case_sensitive:
        return window == needle
    return _fold(window) == _fold(needle)


def ends_with(haystack: str, needle: str, case_sensitive: bool = True) -> bool:
    if len(needle) > len(haystack):
        return False
    window = haystack[len(haystack) - len(needle) :]
    if case_sensitive:
        return window == needle
    return _fold(window) == _fold(needle)


def starts_with_any(haystack: str, needles: Iterable[str], case_sensitive: bool = True) -> bool:
    return any(starts_with(haystack, needle, case_sensitive) for needle in needles)


def ends_with_any(haystack: str, needles: Iterable[str], case_sensitive: bool = True) -> bool:
    return any(ends_with(haystack, needle, case_sensitive) for needle in needles)


def between(haystack: str, start: str, end: str, offset: int = 0) -> str:
    """
    Return the text between the first `start` at/after offset and the
    following `end`. Missing delimiters give an empty string.

    Examples:
        >>> between("{foo} and {bar}", "{", "}", 1)
        'bar'
    """
    start_index = index_of(haystack, start, offset)
    if start_index is None:
        return ""
    content_index = start_index + len(start)
    end_index = index_of(haystack, end, content_index)
    if end_index is None:
        return ""
    return substring(haystack, content_index, end_index - content_index)
