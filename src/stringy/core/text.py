"""
Word-level text helpers.

Extraction around a search term, shortening and wrapping on word
boundaries, tab/space conversion, typographic clean-up and boolean
interpretation.
"""

from __future__ import annotations

import re
import textwrap
import unicodedata
from decimal import ROUND_DOWN, Decimal
from typing import Optional

# Characters trimmed from the edges of an extract
EXTRACT_TRIM_CHARS = "\t\r\n -_()!~?=+/*\\,.:;\"'[]{}`&"

# Windows-1252 typography pasted from word processors
_TIDY_TABLE = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "„": '"',
        "«": '"',
        "»": '"',
        "‘": "'",
        "’": "'",
        "‚": "'",
        "‹": "'",
        "›": "'",
        "–": "-",
        "—": "-",
        "…": "...",
    }
)

TRUE_WORDS = frozenset({"true", "1", "on", "yes"})
FALSE_WORDS = frozenset({"false", "0", "off", "no"})

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_BOM = "\ufeff"


def _next_break(text: str, start: int) -> Optional[int]:
    """Position of the nearest space or period at or after start."""
    found = [pos for pos in (text.find(" ", start), text.find(".", start)) if pos >= 0]
    return min(found) if found else None


def extract_text(text: str, search: str = "", length: Optional[int] = None, ellipsis: str = "...") -> str:
    """
    Build an excerpt of about `length` codepoints centred on `search`.

    Without a search term (or when it is not found) the excerpt is taken
    from the start. Excerpt boundaries are moved to the next space or
    period so words are not cut, and an ellipsis marks each cut side.

    Args:
        text: Source text
        search: Term to centre the excerpt on (case-insensitive)
        length: Target excerpt length; defaults to half the text
        ellipsis: Marker added where text was cut

    Returns:
        The excerpt, or the whole text when nothing needs cutting
    """
    if not text:
        return ""

    total = len(text)
    if length is None:
        length = int(total / 2 + 0.5)

    word_pos = text.lower().find(search.lower()) if search else -1
    if word_pos > 0:
        half_side = int(word_pos - length / 2 + len(search) / 2)
    else:
        half_side = 0

    if half_side > 0:
        half_text = text[:half_side]
        pos_start = max(half_text.rfind(" "), half_text.rfind("."), 0)
        limit = min(pos_start + length - 1, total)
        pos_end = _next_break(text, limit)
        if pos_end is None or pos_end - pos_start <= 0:
            return ellipsis + text[pos_start:].lstrip(EXTRACT_TRIM_CHARS)
        return ellipsis + text[pos_start:pos_end].strip(EXTRACT_TRIM_CHARS) + ellipsis

    limit = min(max(length - 1, 0), total)
    pos_end = _next_break(text, limit)
    if not pos_end:
        return text
    return text[:pos_end].rstrip(EXTRACT_TRIM_CHARS) + ellipsis


def shorten_after_word(text: str, length: int, add_on: str = "...") -> str:
    """
    Shorten text to at most `length` codepoints without splitting a word.

    Examples:
        >>> shorten_after_word("this is a test", 8)
        'this is...'
    """
    if length <= 0:
        return ""
    if len(text) <= length:
        return text
    if text[length - 1] == " ":
        return text[: length - 1] + add_on

    cut = text[:length]
    head = cut.rsplit(" ", 1)[0] if " " in cut else ""
    if head == "":
        return text[: max(length - 1, 0)] + add_on
    return head + add_on


def line_wrap_after_word(text: str, limit: int) -> str:
    """
    Wrap every line at `limit` codepoints, breaking only between words.

    Words longer than the limit are kept whole. Each resulting source line
    ends with a newline.
    """
    wrapped = []
    for line in _LINE_BREAK_RE.split(text):
        wrapped.append(
            "\n".join(
                textwrap.wrap(
                    line,
                    width=max(limit, 1),
                    break_long_words=False,
                    break_on_hyphens=False,
                    drop_whitespace=True,
                )
            )
        )
    return "".join(part + "\n" for part in wrapped)


def to_spaces(text: str, tab_length: int = 4) -> str:
    """Replace each tab with `tab_length` spaces."""
    return text.replace("\t", " " * max(tab_length, 0))


def to_tabs(text: str, tab_length: int = 4) -> str:
    """Replace each run of `tab_length` spaces with a tab."""
    if tab_length <= 0:
        return text
    return text.replace(" " * tab_length, "\t")


def strip_whitespace(text: str) -> str:
    """Remove every whitespace codepoint, including Unicode spaces."""
    return "".join(ch for ch in text if not ch.isspace())


def tidy(text: str) -> str:
    """
    Replace smart quotes, dashes and the ellipsis character with ASCII.

    Examples:
        >>> tidy("“I see…”")
        '"I see..."'
    """
    return text.translate(_TIDY_TABLE)


def utf8ify(text: str) -> str:
    """Normalise to NFC and drop byte order marks."""
    return unicodedata.normalize("NFC", text.replace(_BOM, ""))


def to_boolean(text: str) -> bool:
    """
    Interpret text as a boolean.

    Recognised words ("true", "on", "no", ...) decide first, in any case.
    Numeric text is True when its integer part is positive. Anything else
    is True unless it is blank.
    """
    key = text.lower()
    if key in TRUE_WORDS:
        return True
    if key in FALSE_WORDS:
        return False
    if _NUMERIC_RE.match(text):
        return Decimal(text.strip()).to_integral_value(rounding=ROUND_DOWN) > 0
    return bool(text.strip())
