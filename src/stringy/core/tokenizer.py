"""
Stringy Tokenizer.

Splits text into classified runs used by the case-style converters:
separator runs (whitespace, dash, underscore), digit runs and word runs.
A word run is split before every uppercase letter that does not open it,
so "camelCase" yields "camel" and "Case", an acronym such as "TestDCase"
yields "Test", "D" and "Case", and "foo.Bar" yields "foo." and "Bar".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

SEPARATOR_CHARS = frozenset("-_")


class TokenKind(Enum):
    """Classification of a token."""

    WORD = auto()
    DIGITS = auto()
    SEPARATOR = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """
    A contiguous codepoint run.

    Attributes:
        kind: The token classification
        text: The codepoints in the run
        start: 0-indexed codepoint offset of the run in the source text
    """

    kind: TokenKind
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenKind.SEPARATOR

    @property
    def starts_upper(self) -> bool:
        """Check if the run opens with an uppercase letter."""
        return self.kind is TokenKind.WORD and self.text[:1].isupper()

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.start})"


def is_separator(ch: str) -> bool:
    """Check if a codepoint separates words."""
    return ch in SEPARATOR_CHARS or ch.isspace()


class Tokenizer:
    """
    Scan-and-classify tokenizer for case-style conversion.

    Usage:
        tokens = Tokenizer("string_with1number").tokenize()
        # [WORD 'string', SEPARATOR '_', WORD 'with', DIGITS '1', WORD 'number']
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _current_char(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _read_while(self, predicate) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def _read_word(self) -> str:
        start = self.pos
        self.pos += 1
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if is_separator(ch) or ch.isdecimal():
                break
            # Case boundary: any uppercase letter inside a word run
            if ch.isupper():
                break
            self.pos += 1
        return self.text[start : self.pos]

    def _next_token(self) -> Optional[Token]:
        ch = self._current_char()
        if ch is None:
            return None

        start = self.pos
        if is_separator(ch):
            return Token(TokenKind.SEPARATOR, self._read_while(is_separator), start)
        if ch.isdecimal():
            return Token(TokenKind.DIGITS, self._read_while(str.isdecimal), start)
        return Token(TokenKind.WORD, self._read_word(), start)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire text."""
        self.pos = 0
        tokens: list[Token] = []
        while (token := self._next_token()) is not None:
            tokens.append(token)
        return tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokenize())


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize text.

    Args:
        text: The text to split

    Returns:
        List of tokens covering the whole text, in order
    """
    return Tokenizer(text).tokenize()


def words(tokens: list[Token]) -> list[Token]:
    """Drop separator tokens."""
    return [token for token in tokens if not token.is_separator]
