"""
HTML entity collaborator.

Entity encoding/decoding over the standard `html` entity tables, plus the
small set of regex based markup clean-ups Stringy exposes (tag stripping,
line break removal, empty tag and CSS media query removal).
"""

from __future__ import annotations

import html
import re
from collections.abc import Iterable
from enum import Enum, auto
from html.entities import codepoint2name
from typing import Optional, Union


class QuoteStyle(Enum):
    """Which quote characters take part in encoding and decoding."""

    COMPAT = auto()  # double quotes only
    QUOTES = auto()  # double and single quotes
    NOQUOTES = auto()  # neither

    @property
    def double(self) -> bool:
        return self is not QuoteStyle.NOQUOTES

    @property
    def single(self) -> bool:
        return self is QuoteStyle.QUOTES


_ENTITY_RE = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RE = re.compile(r"</?([A-Za-z][A-Za-z0-9:-]*)\b[^>]*>|<[!?][^>]*>")
_ALLOWED_TAG_RE = re.compile(r"<\s*/?\s*([A-Za-z][A-Za-z0-9:-]*)")
_BREAK_RE = re.compile(r"\r\n|\r|\n|<br.*?/?>", re.IGNORECASE | re.DOTALL)
_EMPTY_TAG_RE = re.compile(r"<[^/>]*>\s*</[^>]*>", re.IGNORECASE)
_MEDIA_QUERY_RE = re.compile(
    r"@media\s+(?:only\s)?(?:[\s{(]|screen|all)\s?[^{]+?\{.*?\}\s*\}\s*",
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)

_SPECIAL = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def _parse_allowed(allowable_tags: Union[str, Iterable[str], None]) -> frozenset[str]:
    """Accept either "<a><br>" markup or an iterable of tag names."""
    if not allowable_tags:
        return frozenset()
    if isinstance(allowable_tags, str):
        return frozenset(name.lower() for name in _ALLOWED_TAG_RE.findall(allowable_tags))
    return frozenset(name.strip("<>/ ").lower() for name in allowable_tags)


class HtmlEntities:
    """
    Entity encoder/decoder.

    Usage:
        entities = HtmlEntities()
        entities.encode("<fòô>")              # "&lt;f&ograve;&ocirc;&gt;"
        entities.decode("&amp;&#039;")        # "&&#039;"
        entities.decode("&#039;", QuoteStyle.QUOTES)  # "'"
    """

    def encode(self, text: str, quote_style: QuoteStyle = QuoteStyle.COMPAT) -> str:
        """Replace markup characters and every named non-ASCII codepoint with an entity."""
        out: list[str] = []
        for ch in text:
            if ch in _SPECIAL:
                out.append(_SPECIAL[ch])
            elif ch == '"' and quote_style.double:
                out.append("&quot;")
            elif ch == "'" and quote_style.single:
                out.append("&#039;")
            elif ord(ch) > 127 and ord(ch) in codepoint2name:
                out.append(f"&{codepoint2name[ord(ch)]};")
            else:
                out.append(ch)
        return "".join(out)

    def decode(self, text: str, quote_style: QuoteStyle = QuoteStyle.COMPAT) -> str:
        """Replace entities with their codepoints, leaving excluded quote entities alone."""

        def _decode(match: re.Match) -> str:
            entity = match.group(0)
            decoded = html.unescape(entity)
            if decoded == "'" and not quote_style.single:
                return entity
            if decoded == '"' and not quote_style.double:
                return entity
            return decoded

        return _ENTITY_RE.sub(_decode, text)

    def escape(self, text: str) -> str:
        """Escape the five markup-significant characters, quotes included."""
        return self.encode_special(text, QuoteStyle.QUOTES)

    @staticmethod
    def encode_special(text: str, quote_style: QuoteStyle = QuoteStyle.QUOTES) -> str:
        out = []
        for ch in text:
            if ch in _SPECIAL:
                out.append(_SPECIAL[ch])
            elif ch == '"' and quote_style.double:
                out.append("&quot;")
            elif ch == "'" and quote_style.single:
                out.append("&#039;")
            else:
                out.append(ch)
        return "".join(out)

    def strip_tags(self, text: str, allowable_tags: Union[str, Iterable[str], None] = None) -> str:
        """
        Remove tags and comments.

        Args:
            text: Markup to clean
            allowable_tags: Tags to keep, as "<a><b>" or an iterable of names
        """
        allowed = _parse_allowed(allowable_tags)
        text = _COMMENT_RE.sub("", text)

        def _strip(match: re.Match) -> str:
            name: Optional[str] = match.group(1)
            if name is not None and name.lower() in allowed:
                return match.group(0)
            return ""

        return _TAG_RE.sub(_strip, text)


def remove_breaks(text: str, replacement: str = "") -> str:
    """Replace line breaks and <br> tags."""
    return _BREAK_RE.sub(lambda _: replacement, text)


def strip_empty_tags(text: str) -> str:
    """Remove element pairs with only whitespace inside, e.g. <b></b>."""
    return _EMPTY_TAG_RE.sub("", text)


def strip_css_media_queries(text: str) -> str:
    return _MEDIA_QUERY_RE.sub("", text)
