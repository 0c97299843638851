"""
Case-style conversion.

Converters that rebuild text from Tokenizer output (camelize, delimit and
friends) and word-level capitalisation helpers (titleize, personal names).
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Optional

from stringy.core.tokenizer import Token, tokenize, words

# Joining words left lowercase in personal names
NAME_PARTICLES = frozenset(
    {
        "ab",
        "af",
        "al",
        "and",
        "ap",
        "bint",
        "binte",
        "da",
        "de",
        "del",
        "den",
        "der",
        "di",
        "dit",
        "ibn",
        "la",
        "mac",
        "nic",
        "of",
        "ter",
        "the",
        "und",
        "van",
        "von",
        "y",
        "zu",
    }
)

NAME_PREFIXES = ("al-", "d'", "ff", "l'", "mac", "mc", "nic", "o'")

_WHITESPACE_RE = re.compile(r"\s+")
_WORD_RE = re.compile(r"\S+")
_TITLE_WORD_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def upper_case_first(text: str) -> str:
    """Uppercase the first codepoint, leave the rest untouched."""
    return text[:1].upper() + text[1:]


def lower_case_first(text: str) -> str:
    """Lowercase the first codepoint, leave the rest untouched."""
    return text[:1].lower() + text[1:]


def collapse_whitespace(text: str) -> str:
    """Replace whitespace runs with one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def camelize(text: str) -> str:
    """
    Convert text to camelCase.

    Examples:
        >>> camelize("string_with1number")
        'stringWith1Number'
        >>> camelize("ServeHTTP")
        'serveHTTP'
    """
    parts = words(tokenize(text))
    if not parts:
        return ""
    head, rest = parts[0], parts[1:]
    return head.text.lower() + "".join(upper_case_first(token.text) for token in rest)


def upper_camelize(text: str) -> str:
    """Convert text to UpperCamelCase."""
    return upper_case_first(camelize(text))


def delimit(text: str, delimiter: str) -> str:
    """
    Lowercase text and join its words with a delimiter.

    Surrounding whitespace is trimmed first. Every separator run becomes
    one delimiter (including a leading or trailing dash/underscore run).
    A case boundary inserts one only when the uppercase letter follows a
    letter or digit, so "foo.Bar" keeps its dot as the only break. Digit
    runs stay attached to their neighbours.

    Examples:
        >>> delimit("TestDCase", "-")
        'test-d-case'
        >>> delimit("string_with1number", "-")
        'string-with1number'
    """
    parts: list[str] = []
    previous: Optional[Token] = None
    for token in tokenize(text.strip()):
        if token.is_separator:
            parts.append(delimiter)
        else:
            if previous is not None and previous.text[-1:].isalnum() and token.starts_upper:
                parts.append(delimiter)
            parts.append(token.text.lower())
        previous = token
    return "".join(parts)


def dasherize(text: str) -> str:
    return delimit(text, "-")


def underscored(text: str) -> str:
    return delimit(text, "_")


def snakeize(text: str) -> str:
    """
    Convert text to snake_case with digit runs as separate words.

    Examples:
        >>> snakeize("camelCase2Go")
        'camel_case_2_go'
    """
    return "_".join(token.text.lower() for token in words(tokenize(text)))


def humanize(text: str) -> str:
    """
    Make an identifier readable: drop "_id", turn underscores into spaces,
    trim and capitalise the first letter.
    """
    text = text.replace("_id", "").replace("_", " ")
    return upper_case_first(text.strip())


def titleize(text: str, ignore: Optional[Iterable[str]] = None) -> str:
    """
    Capitalise each whitespace-separated word.

    Words that exactly match an entry of `ignore` pass through unchanged.
    """
    ignored = frozenset(ignore or ())

    def _title(match: re.Match) -> str:
        word = match.group(0)
        if word in ignored:
            return word
        return upper_case_first(word.lower())

    return _WORD_RE.sub(_title, text.strip())


def to_title_case(text: str) -> str:
    """
    Uppercase the first letter of every word and lowercase the rest.

    Underscores and punctuation delimit words; an apostrophe inside a word
    does not.
    """
    return _TITLE_WORD_RE.sub(lambda match: match.group(0).capitalize(), text)


def _capitalize_name_part(name: str) -> str:
    if name in NAME_PARTICLES:
        return name
    if name.startswith(NAME_PREFIXES):
        return name
    return upper_case_first(name)


def capitalize_personal_name(text: str) -> str:
    """
    Capitalise a personal name.

    Nobiliary particles ("van", "de", "ibn", ...) and names starting with a
    known prefix ("mac", "mc", "o'", ...) are left as written. This is a
    heuristic, not an onomastic model.

    Examples:
        >>> capitalize_personal_name("ludwig van beethoven")
        'Ludwig van Beethoven'
    """
    names = collapse_whitespace(text).split(" ")
    capitalized = []
    for name in names:
        parts = [_capitalize_name_part(part) for part in name.split("-")]
        capitalized.append("-".join(parts))
    return " ".join(capitalized)
