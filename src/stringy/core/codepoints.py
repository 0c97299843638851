"""
Codepoint Index.

Turns raw input (text or bytes plus an encoding tag) into an addressable
sequence of Unicode codepoints. Every other component goes through this
module for length, single-character access and substring arithmetic, so
that no code ever reasons about byte offsets.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

from stringy.config import DEFAULT_ENCODING
from stringy.utils.errors import InvalidArgument, InvalidInput

RawText = Union[str, bytes, bytearray]


def _has_surrogates(text: str) -> bool:
    return any("\ud800" <= ch <= "\udfff" for ch in text)


def decode(raw: RawText, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Decode raw input into a codepoint string.

    Bytes are decoded with the encoding tag. Text that still carries UTF-16
    surrogate pairs is joined so each pair counts as one codepoint.

    Raises:
        InvalidInput: If the bytes are not valid in the given encoding
        InvalidArgument: If the tag names no text codec
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode(encoding)
        except UnicodeDecodeError as e:
            raise InvalidInput(f"Cannot decode bytes as {encoding}: {e.reason}", raw) from e
        except LookupError:
            raise InvalidArgument("Unknown encoding", encoding) from None
    if _has_surrogates(raw):
        return raw.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return raw


def normalize_start(start: int, length: int) -> int:
    """Resolve a possibly negative start position against a length."""
    if start < 0:
        return max(0, length + start)
    return start


def substring(text: str, start: int, length: Optional[int] = None) -> str:
    """
    Return `length` codepoints of `text` beginning at `start`.

    A negative start counts from the end. A negative length leaves that many
    codepoints off the end. None means "to the end".
    """
    total = len(text)
    begin = normalize_start(start, total)
    if begin > total:
        return ""
    if length is None:
        end = total
    elif length < 0:
        end = total + length
    else:
        end = min(total, begin + length)
    if end <= begin:
        return ""
    return text[begin:end]


class CodepointIndex:
    """
    Read-only codepoint view over decoded text.

    Usage:
        index = CodepointIndex("fòô bàř")
        len(index)        # 7
        index.at(-1)      # "ř"
        index.slice(4)    # "bàř"
    """

    __slots__ = ("_text",)

    def __init__(self, raw: RawText = "", encoding: str = DEFAULT_ENCODING) -> None:
        self._text = decode(raw, encoding)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def codepoints(self) -> tuple[int, ...]:
        """Return the sequence as integer Unicode scalar values."""
        return tuple(ord(ch) for ch in self._text)

    def contains_index(self, index: int) -> bool:
        """Check whether `at(index)` would find a codepoint."""
        length = len(self._text)
        if index >= 0:
            return index < length
        return -index <= length

    def at(self, index: int) -> Optional[str]:
        """
        Return the codepoint at `index`, or None if out of range.

        Negative indexes count from the end (-1 is the last codepoint).
        """
        if not self.contains_index(index):
            return None
        return self._text[index]

    def slice(self, start: int, length: Optional[int] = None) -> str:
        """Return a substring by start position and codepoint count."""
        return substring(self._text, start, length)
