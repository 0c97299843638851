"""
Padding and truncation.

All lengths are codepoint counts. Padding repeats the pad string cyclically
and cuts the last repetition to the exact deficit, so a multi-codepoint pad
string may end mid-pattern.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

from stringy.utils.errors import InvalidArgument


class PadSide(Enum):
    """Where padding is applied."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"

    @classmethod
    def parse(cls, side: Union[PadSide, str]) -> PadSide:
        """
        Resolve a side given as enum member or plain string.

        Raises:
            InvalidArgument: If side is not left, right or both
        """
        if isinstance(side, cls):
            return side
        try:
            return cls(side)
        except ValueError:
            raise InvalidArgument(
                "Pad side must be one of 'left', 'right' or 'both'",
                side,
                allowed=[member.value for member in cls],
            ) from None


def _fill(pad_str: str, width: int) -> str:
    if width <= 0:
        return ""
    repetitions = math.ceil(width / len(pad_str))
    return (pad_str * repetitions)[:width]


def apply_padding(text: str, left: int = 0, right: int = 0, pad_str: str = " ") -> str:
    """
    Add `left` and `right` codepoints of padding around text.

    Returns text unchanged when pad_str is empty or nothing would be added.
    """
    if not pad_str or left + right <= 0:
        return text
    return _fill(pad_str, left) + text + _fill(pad_str, right)


def pad_left(text: str, length: int, pad_str: str = " ") -> str:
    return apply_padding(text, length - len(text), 0, pad_str)


def pad_right(text: str, length: int, pad_str: str = " ") -> str:
    return apply_padding(text, 0, length - len(text), pad_str)


def pad_both(text: str, length: int, pad_str: str = " ") -> str:
    """Pad both sides; the right side gets the extra codepoint of an odd deficit."""
    deficit = length - len(text)
    return apply_padding(text, deficit // 2, deficit - deficit // 2, pad_str)


def pad(text: str, length: int, pad_str: str = " ", side: Union[PadSide, str] = PadSide.RIGHT) -> str:
    """
    Pad text to `length` codepoints.

    Examples:
        >>> pad("foo bar", 9, "_*", "left")
        '_*foo bar'
    """
    resolved = PadSide.parse(side)
    if resolved is PadSide.LEFT:
        return pad_left(text, length, pad_str)
    if resolved is PadSide.RIGHT:
        return pad_right(text, length, pad_str)
    return pad_both(text, length, pad_str)


def truncate(text: str, length: int, suffix: str = "") -> str:
    """
    Cut text to `length` codepoints including the suffix.

    A suffix longer than `length` is itself cut, so the result never
    exceeds `length` codepoints.

    Examples:
        >>> truncate("Test foo bar", 11, "...")
        'Test foo...'
    """
    if length >= len(text):
        return text
    budget = max(0, length - len(suffix))
    return (text[:budget] + suffix)[: max(length, 0)]


def safe_truncate(text: str, length: int, suffix: str = "") -> str:
    """
    Truncate without splitting a word.

    After the hard cut, if the next codepoint is not a space the cut backs
    up to the last space inside it. When the cut contains no space at all
    the hard cut is kept, so unspaced text truncates exactly like
    `truncate`. Spaces left at the end of the cut are dropped.

    Examples:
        >>> safe_truncate("Test foo bar", 11)
        'Test foo'
    """
    if length >= len(text):
        return text
    budget = max(0, length - len(suffix))
    truncated = text[:budget]
    if text[budget : budget + 1] != " ":
        last_space = truncated.rfind(" ")
        if last_space >= 0:
            truncated = truncated[:last_space]
    truncated = truncated.rstrip(" ")
    return (truncated + suffix)[: max(length, 0)]
