"""
Stringy Value.

The immutable, codepoint-aware string value. Every method returns a new
Stringy (or a plain bool/int/None for queries) and leaves the receiver
untouched. Addressing goes through CodepointIndex; the algorithms live in
stringy.core and the delegated concerns in stringy.external.
"""

from __future__ import annotations

import hashlib
import logging
import numbers
import random
import secrets
import uuid
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional, Union

from stringy.config import DEFAULT_ENCODING, DEFAULT_LANGUAGE, normalize_encoding
from stringy.core import case_style, classify, common, padding, search, text
from stringy.core.codepoints import CodepointIndex, decode, substring
from stringy.external.email import EmailValidator
from stringy.external.html_entities import (
    HtmlEntities,
    QuoteStyle,
    remove_breaks,
    strip_css_media_queries,
    strip_empty_tags,
)
from stringy.external.patterns import LEGACY_OPTIONS, PatternMatcher
from stringy.external.sanitizer import BleachSanitizer, XssSanitizer
from stringy.external.transliteration import Transliterator
from stringy.utils.errors import ImmutableViolation, IndexOutOfRange, InvalidInput

logger = logging.getLogger(__name__)

RANDOM_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
# Characters that cannot be confused with one another when read aloud or printed
PASSWORD_CHARS = "2346789bcdfghjkmnpqrtvwxyzBCDFGHJKLMNPQRTVWXYZ"

_AGGREGATES = (list, tuple, dict, set, frozenset)

TextLike = Union[str, "Stringy"]


def _coerce(value: Any, encoding: str) -> str:
    """Convert any accepted input to decoded text."""
    if value is None:
        return ""
    if isinstance(value, Stringy):
        return value.to_string()
    if isinstance(value, (str, bytes, bytearray)):
        return decode(value, encoding)
    if isinstance(value, (numbers.Number, bool)):
        return str(value)
    if isinstance(value, _AGGREGATES):
        raise InvalidInput("Cannot build a Stringy from an aggregate", type(value).__name__)
    if type(value).__str__ is object.__str__:
        raise InvalidInput("Object has no text conversion", type(value).__name__)
    return str(value)


def _default_rng(rng: Optional[random.Random]) -> random.Random:
    if rng is None:
        return secrets.SystemRandom()
    return rng


class Stringy:
    """
    Immutable Unicode string value with codepoint semantics.

    Lengths, indexes and offsets always count codepoints, never bytes.
    A Stringy compares equal to a plain str with the same codepoints, and
    to another Stringy when both codepoints and encoding tag agree.

    Usage:
        s = Stringy("fòô bàř")
        len(s)                       # 7
        s.to_upper_case()            # Stringy('FÒÔ BÀŘ', ...)
        s.camelize() == "fòôBàř"     # True
        s[1]                         # Stringy('ò', ...)
        s[1] = "x"                   # raises ImmutableViolation

    Attributes:
        encoding: The encoding tag the value was created with
    """

    __slots__ = ("_index", "_encoding", "_codec")

    def __init__(self, value: Any = "", encoding: Optional[str] = None) -> None:
        """
        Build a value from text, bytes, a number or a str-convertible object.

        Args:
            value: The input; None is treated as empty text
            encoding: Encoding tag, used to decode bytes input

        Raises:
            InvalidInput: For aggregates, objects without a text conversion,
                or bytes that do not decode
            InvalidArgument: For an unknown encoding tag
        """
        encoding = encoding or DEFAULT_ENCODING
        codec = normalize_encoding(encoding)
        object.__setattr__(self, "_encoding", encoding)
        object.__setattr__(self, "_codec", codec)
        object.__setattr__(self, "_index", CodepointIndex(_coerce(value, encoding), encoding))

    @classmethod
    def create(cls, value: Any = "", encoding: Optional[str] = None) -> Stringy:
        return cls(value, encoding)

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray], encoding: str = DEFAULT_ENCODING) -> Stringy:
        """Decode raw bytes with the given encoding tag."""
        return cls(raw, encoding)

    def _derive(self, value: str) -> Stringy:
        return type(self)(value, self._encoding)

    @property
    def _text(self) -> str:
        return self._index.text

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableViolation("Stringy values are immutable", name)

    def __delattr__(self, name: str) -> None:
        raise ImmutableViolation("Stringy values are immutable", name)

    def __setitem__(self, index: Any, value: Any) -> None:
        raise ImmutableViolation("Stringy values are immutable, cannot modify char", index)

    def __delitem__(self, index: Any) -> None:
        raise ImmutableViolation("Stringy values are immutable, cannot unset char", index)

    def __reduce__(self):
        return (type(self), (self._text, self._encoding))

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Stringy({self._text!r}, encoding={self._encoding!r})"

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __contains__(self, needle: object) -> bool:
        if not isinstance(needle, (str, Stringy)):
            return False
        return search.contains(self._text, str(needle))

    def __getitem__(self, index: Union[int, slice]) -> Stringy:
        """
        Index by codepoint, or slice with Python slice semantics.

        Raises:
            IndexOutOfRange: If an integer index addresses no codepoint
        """
        if isinstance(index, slice):
            return self._derive(self._text[index])
        ch = self._index.at(index)
        if ch is None:
            raise IndexOutOfRange(index, len(self._index))
        return self._derive(ch)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stringy):
            return self._text == other._text and self._codec == other._codec
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __add__(self, other: object) -> Stringy:
        if not isinstance(other, (str, Stringy)):
            return NotImplemented
        return self.append(other)

    def __radd__(self, other: object) -> Stringy:
        if not isinstance(other, str):
            return NotImplemented
        return self.prepend(other)

    def __mul__(self, multiplier: int) -> Stringy:
        if not isinstance(multiplier, int):
            return NotImplemented
        return self.repeat(multiplier)

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def encoding(self) -> str:
        return self._encoding

    def get_encoding(self) -> str:
        return self._encoding

    def to_string(self) -> str:
        return self._text

    def length(self) -> int:
        """Number of codepoints."""
        return len(self._index)

    def len(self) -> int:
        return len(self._index)

    def count(self) -> int:
        return len(self._index)

    def chars(self) -> list[str]:
        return list(self._text)

    def has_index(self, index: int) -> bool:
        """Check whether `v[index]` would succeed; negative indexes count from the end."""
        return self._index.contains_index(index)

    def at(self, index: int) -> Stringy:
        """Codepoint at index, or an empty value when out of range."""
        return self._derive(self._index.at(index) or "")

    def substr(self, start: int, length: Optional[int] = None) -> Stringy:
        """
        Substring by start and length.

        A negative start counts from the end; a negative length leaves
        that many codepoints off the end; None runs to the end.
        """
        return self._derive(self._index.slice(start, length))

    def slice(self, start: int, end: Optional[int] = None) -> Stringy:
        """
        Substring from start up to, but not including, end.

        A negative end counts from the end of the value. An end at or
        before start gives an empty value.
        """
        if end is None:
            length = self.length()
        elif 0 <= end <= start:
            return self._derive("")
        elif end < 0:
            length = self.length() + end - start
        else:
            length = end - start
        return self._derive(substring(self._text, start, length))

    def first(self, n: int) -> Stringy:
        if n <= 0:
            return self._derive("")
        return self._derive(self._text[:n])

    def last(self, n: int) -> Stringy:
        if n <= 0:
            return self._derive("")
        return self._derive(self._text[-n:])

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def append(self, suffix: TextLike) -> Stringy:
        return self._derive(self._text + str(suffix))

    def prepend(self, prefix: TextLike) -> Stringy:
        return self._derive(str(prefix) + self._text)

    def surround(self, wrapper: TextLike) -> Stringy:
        wrapper = str(wrapper)
        return self._derive(wrapper + self._text + wrapper)

    def insert(self, substring: TextLike, index: int) -> Stringy:
        """Insert at a codepoint index; an index past the end changes nothing."""
        if index > self.length():
            return self._derive(self._text)
        return self._derive(self._text[:index] + str(substring) + self._text[index:])

    def repeat(self, multiplier: int) -> Stringy:
        return self._derive(self._text * max(multiplier, 0))

    def reverse(self) -> Stringy:
        return self._derive(self._text[::-1])

    def shuffle(self, rng: Optional[random.Random] = None) -> Stringy:
        """Return the codepoints in random order."""
        chars = list(self._text)
        _default_rng(rng).shuffle(chars)
        return self._derive("".join(chars))

    def append_random_string(
        self,
        length: int,
        possible_chars: str = RANDOM_CHARS,
        rng: Optional[random.Random] = None,
    ) -> Stringy:
        """
        Append `length` codepoints drawn from possible_chars.

        Args:
            length: How many codepoints to append
            possible_chars: The alphabet to draw from; empty appends nothing
            rng: Random generator, a fresh SystemRandom when omitted
        """
        if not possible_chars or length <= 0:
            return self._derive(self._text)
        generator = _default_rng(rng)
        drawn = "".join(generator.choice(possible_chars) for _ in range(length))
        return self.append(drawn)

    def append_password(self, length: int, rng: Optional[random.Random] = None) -> Stringy:
        """Append a random string of easily distinguishable characters."""
        return self.append_random_string(length, PASSWORD_CHARS, rng)

    def append_unique_identifier(self, extra_prefix: TextLike = "", rng: Optional[random.Random] = None) -> Stringy:
        """Append a 32 character hexadecimal identifier."""
        seed = f"{_default_rng(rng).getrandbits(64)}{uuid.uuid4().hex}{extra_prefix}"
        return self.append(hashlib.md5(seed.encode("utf-8"), usedforsecurity=False).hexdigest())

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def ensure_left(self, prefix: TextLike) -> Stringy:
        prefix = str(prefix)
        if search.starts_with(self._text, prefix):
            return self._derive(self._text)
        return self.prepend(prefix)

    def ensure_right(self, suffix: TextLike) -> Stringy:
        suffix = str(suffix)
        if search.ends_with(self._text, suffix):
            return self._derive(self._text)
        return self.append(suffix)

    def remove_left(self, prefix: TextLike) -> Stringy:
        prefix = str(prefix)
        if prefix and search.starts_with(self._text, prefix):
            return self._derive(self._text[len(prefix) :])
        return self._derive(self._text)

    def remove_right(self, suffix: TextLike) -> Stringy:
        suffix = str(suffix)
        if suffix and search.ends_with(self._text, suffix):
            return self._derive(self._text[: -len(suffix)])
        return self._derive(self._text)

    def after_first(self, separator: TextLike) -> Stringy:
        """Text after the first separator, or empty if there is none."""
        separator = str(separator)
        position = search.index_of(self._text, separator)
        if position is None:
            return self._derive("")
        return self._derive(self._text[position + len(separator) :])

    def after_last(self, separator: TextLike) -> Stringy:
        separator = str(separator)
        position = search.index_of_last(self._text, separator)
        if position is None:
            return self._derive("")
        return self._derive(self._text[position + len(separator) :])

    def before_first(self, separator: TextLike) -> Stringy:
        position = search.index_of(self._text, str(separator))
        if position is None:
            return self._derive("")
        return self._derive(self._text[:position])

    def before_last(self, separator: TextLike) -> Stringy:
        position = search.index_of_last(self._text, str(separator))
        if position is None:
            return self._derive("")
        return self._derive(self._text[:position])

    # -------------------------------------------------------------------------
    # Whitespace
    # -------------------------------------------------------------------------

    def trim(self, chars: Optional[str] = None) -> Stringy:
        """Strip whitespace (any Unicode space) or the given characters from both ends."""
        return self._derive(self._text.strip(chars or None))

    def trim_left(self, chars: Optional[str] = None) -> Stringy:
        return self._derive(self._text.lstrip(chars or None))

    def trim_right(self, chars: Optional[str] = None) -> Stringy:
        return self._derive(self._text.rstrip(chars or None))

    def collapse_whitespace(self) -> Stringy:
        return self._derive(case_style.collapse_whitespace(self._text))

    def strip_whitespace(self) -> Stringy:
        return self._derive(text.strip_whitespace(self._text))

    def to_spaces(self, tab_length: int = 4) -> Stringy:
        return self._derive(text.to_spaces(self._text, tab_length))

    def to_tabs(self, tab_length: int = 4) -> Stringy:
        return self._derive(text.to_tabs(self._text, tab_length))

    # -------------------------------------------------------------------------
    # Replacement and splitting
    # -------------------------------------------------------------------------

    def replace(self, needle: TextLike, replacement: TextLike, case_sensitive: bool = True) -> Stringy:
        """
        Replace every occurrence of needle.

        An empty needle only matches empty text, which then becomes the
        replacement.
        """
        needle, replacement = str(needle), str(replacement)
        if needle == "":
            return self._derive(replacement if self._text == "" else self._text)
        if case_sensitive:
            return self._derive(self._text.replace(needle, replacement))
        matcher = PatternMatcher()
        return self._derive(
            matcher.replace_with(self._text, matcher.escape(needle), lambda _: replacement, "i")
        )

    def replace_all(
        self,
        needles: Iterable[TextLike],
        replacement: Union[TextLike, Sequence[TextLike]],
        case_sensitive: bool = True,
    ) -> Stringy:
        """
        Replace each needle in turn.

        With a sequence of replacements the n-th needle is replaced by the
        n-th replacement, or removed when the sequence is shorter.
        """
        needles = [str(needle) for needle in needles]
        if isinstance(replacement, (str, Stringy)):
            replacements = [str(replacement)] * len(needles)
        else:
            replacements = [str(item) for item in replacement]
            replacements += [""] * (len(needles) - len(replacements))
        result = self
        for needle, substitute in zip(needles, replacements):
            result = result.replace(needle, substitute, case_sensitive)
        return result

    def replace_beginning(self, needle: TextLike, replacement: TextLike) -> Stringy:
        needle = str(needle)
        if search.starts_with(self._text, needle):
            return self._derive(str(replacement) + self._text[len(needle) :])
        return self._derive(self._text)

    def replace_ending(self, needle: TextLike, replacement: TextLike) -> Stringy:
        needle = str(needle)
        if search.ends_with(self._text, needle):
            return self._derive(self._text[: len(self._text) - len(needle)] + str(replacement))
        return self._derive(self._text)

    def regex_replace(
        self,
        pattern: str,
        replacement: str,
        options: str = LEGACY_OPTIONS,
        matcher: Optional[PatternMatcher] = None,
    ) -> Stringy:
        """
        Replace every match of a regular expression.

        Args:
            pattern: Pattern in `regex` syntax; POSIX classes like [[:alpha:]] work
            replacement: Replacement; \\1, $1 and ${1} refer to groups
            options: Modifier letters from "imsx"
            matcher: Pattern collaborator, a fresh PatternMatcher when omitted
        """
        if matcher is None:
            logger.debug("Using default PatternMatcher")
            matcher = PatternMatcher()
        return self._derive(matcher.replace(self._text, pattern, replacement, options))

    def split(self, pattern: TextLike, limit: Optional[int] = None) -> list[Stringy]:
        """
        Split on a literal separator.

        A limit of 0 gives no pieces; a positive limit keeps only that many
        leading pieces. An empty separator does not split.
        """
        if limit == 0:
            return []
        pattern = str(pattern)
        if pattern == "":
            return [self._derive(self._text)]
        pieces = self._text.split(pattern)
        if limit is not None and limit > 0:
            pieces = pieces[:limit]
        return [self._derive(piece) for piece in pieces]

    def lines(self) -> list[Stringy]:
        """Split on CR, LF or any pair of them."""
        return [self._derive(line) for line in PatternMatcher().split(self._text, r"[\r\n]{1,2}")]

    # -------------------------------------------------------------------------
    # Case
    # -------------------------------------------------------------------------

    def to_lower_case(self) -> Stringy:
        return self._derive(self._text.lower())

    def to_upper_case(self) -> Stringy:
        return self._derive(self._text.upper())

    def to_title_case(self) -> Stringy:
        return self._derive(case_style.to_title_case(self._text))

    def swap_case(self) -> Stringy:
        return self._derive(self._text.swapcase())

    def upper_case_first(self) -> Stringy:
        return self._derive(case_style.upper_case_first(self._text))

    def lower_case_first(self) -> Stringy:
        return self._derive(case_style.lower_case_first(self._text))

    def humanize(self) -> Stringy:
        return self._derive(case_style.humanize(self._text))

    def titleize(self, ignore: Optional[Iterable[str]] = None) -> Stringy:
        return self._derive(case_style.titleize(self._text, ignore))

    def capitalize_personal_name(self) -> Stringy:
        return self._derive(case_style.capitalize_personal_name(self._text))

    def camelize(self) -> Stringy:
        return self._derive(case_style.camelize(self._text))

    def upper_camelize(self) -> Stringy:
        return self._derive(case_style.upper_camelize(self._text))

    def delimit(self, delimiter: TextLike) -> Stringy:
        return self._derive(case_style.delimit(self._text, str(delimiter)))

    def dasherize(self) -> Stringy:
        return self._derive(case_style.dasherize(self._text))

    def underscored(self) -> Stringy:
        return self._derive(case_style.underscored(self._text))

    def snakeize(self) -> Stringy:
        return self._derive(case_style.snakeize(self._text))

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        return self._text == ""

    def is_alpha(self) -> bool:
        return classify.is_alpha(self._text)

    def is_alphanumeric(self) -> bool:
        return classify.is_alphanumeric(self._text)

    def is_blank(self) -> bool:
        return classify.is_blank(self._text)

    def is_hexadecimal(self) -> bool:
        return classify.is_hexadecimal(self._text)

    def is_lower_case(self) -> bool:
        return classify.is_lower_case(self._text)

    def is_upper_case(self) -> bool:
        return classify.is_upper_case(self._text)

    def has_lower_case(self) -> bool:
        return classify.has_lower_case(self._text)

    def has_upper_case(self) -> bool:
        return classify.has_upper_case(self._text)

    def is_json(self) -> bool:
        return classify.is_json(self._text)

    def is_base64(self) -> bool:
        return classify.is_base64(self._text)

    def is_html(self) -> bool:
        """Check if the text contains at least one tag."""
        if self._text == "":
            return False
        return HtmlEntities().strip_tags(self._text) != self._text

    def is_email(self, validator: Optional[EmailValidator] = None) -> bool:
        if validator is None:
            logger.debug("Using default EmailValidator")
            validator = EmailValidator()
        return validator.is_valid(self._text)

    def matches(self, pattern: TextLike) -> bool:
        """
        Check the whole text against a pattern where "*" matches anything.

        Examples:
            >>> Stringy("foo/bar/baz").matches("foo/*")
            True
        """
        pattern = str(pattern)
        if self._text == pattern:
            return True
        matcher = PatternMatcher()
        wildcard = matcher.escape(pattern).replace(r"\*", ".*")
        return matcher.full_match(self._text, wildcard, "s")

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def index_of(self, needle: TextLike, offset: int = 0) -> Optional[int]:
        return search.index_of(self._text, str(needle), offset)

    def index_of_last(self, needle: TextLike, offset: int = 0) -> Optional[int]:
        return search.index_of_last(self._text, str(needle), offset)

    def contains(self, needle: TextLike, case_sensitive: bool = True) -> bool:
        return search.contains(self._text, str(needle), case_sensitive)

    def contains_any(self, needles: Iterable[TextLike], case_sensitive: bool = True) -> bool:
        return search.contains_any(self._text, [str(n) for n in needles], case_sensitive)

    def contains_all(self, needles: Iterable[TextLike], case_sensitive: bool = True) -> bool:
        return search.contains_all(self._text, [str(n) for n in needles], case_sensitive)

    def count_substr(self, needle: TextLike, case_sensitive: bool = True) -> int:
        return search.count_substr(self._text, str(needle), case_sensitive)

    def starts_with(self, needle: TextLike, case_sensitive: bool = True) -> bool:
        return search.starts_with(self._text, str(needle), case_sensitive)

    def starts_with_any(self, needles: Iterable[TextLike], case_sensitive: bool = True) -> bool:
        return search.starts_with_any(self._text, [str(n) for n in needles], case_sensitive)

    def ends_with(self, needle: TextLike, case_sensitive: bool = True) -> bool:
        return search.ends_with(self._text, str(needle), case_sensitive)

    def ends_with_any(self, needles: Iterable[TextLike], case_sensitive: bool = True) -> bool:
        return search.ends_with_any(self._text, [str(n) for n in needles], case_sensitive)

    def between(self, start: TextLike, end: TextLike, offset: int = 0) -> Stringy:
        return self._derive(search.between(self._text, str(start), str(end), offset))

    # -------------------------------------------------------------------------
    # Longest common
    # -------------------------------------------------------------------------

    def longest_common_prefix(self, other: TextLike) -> Stringy:
        return self._derive(common.longest_common_prefix(self._text, _coerce(other, self._encoding)))

    def longest_common_suffix(self, other: TextLike) -> Stringy:
        return self._derive(common.longest_common_suffix(self._text, _coerce(other, self._encoding)))

    def longest_common_substring(self, other: TextLike) -> Stringy:
        """Longest shared substring; the first one found in this value wins ties."""
        return self._derive(common.longest_common_substring(self._text, _coerce(other, self._encoding)))

    # -------------------------------------------------------------------------
    # Padding and truncation
    # -------------------------------------------------------------------------

    def pad(self, length: int, pad_str: TextLike = " ", side: Union[padding.PadSide, str] = "right") -> Stringy:
        """
        Pad to `length` codepoints on the given side.

        Raises:
            InvalidArgument: If side is not "left", "right" or "both"
        """
        return self._derive(padding.pad(self._text, length, str(pad_str), side))

    def pad_left(self, length: int, pad_str: TextLike = " ") -> Stringy:
        return self._derive(padding.pad_left(self._text, length, str(pad_str)))

    def pad_right(self, length: int, pad_str: TextLike = " ") -> Stringy:
        return self._derive(padding.pad_right(self._text, length, str(pad_str)))

    def pad_both(self, length: int, pad_str: TextLike = " ") -> Stringy:
        return self._derive(padding.pad_both(self._text, length, str(pad_str)))

    def truncate(self, length: int, suffix: TextLike = "") -> Stringy:
        return self._derive(padding.truncate(self._text, length, str(suffix)))

    def safe_truncate(self, length: int, suffix: TextLike = "") -> Stringy:
        return self._derive(padding.safe_truncate(self._text, length, str(suffix)))

    # -------------------------------------------------------------------------
    # Markup and text
    # -------------------------------------------------------------------------

    def html_encode(self, quote_style: QuoteStyle = QuoteStyle.COMPAT) -> Stringy:
        return self._derive(HtmlEntities().encode(self._text, quote_style))

    def html_decode(self, quote_style: QuoteStyle = QuoteStyle.COMPAT) -> Stringy:
        return self._derive(HtmlEntities().decode(self._text, quote_style))

    def escape(self) -> Stringy:
        """Escape &, <, >, " and ' for safe inclusion in HTML."""
        return self._derive(HtmlEntities().escape(self._text))

    def remove_html(self, allowable_tags: Union[str, Iterable[str], None] = None) -> Stringy:
        return self._derive(HtmlEntities().strip_tags(self._text, allowable_tags))

    def remove_html_break(self, replacement: TextLike = "") -> Stringy:
        return self._derive(remove_breaks(self._text, str(replacement)))

    def strip_empty_html_tags(self) -> Stringy:
        return self._derive(strip_empty_tags(self._text))

    def strip_css_media_queries(self) -> Stringy:
        return self._derive(strip_css_media_queries(self._text))

    def remove_xss(self, sanitizer: Optional[XssSanitizer] = None) -> Stringy:
        """Sanitize untrusted markup."""
        if sanitizer is None:
            logger.debug("Using default BleachSanitizer")
            sanitizer = BleachSanitizer()
        return self._derive(sanitizer.clean(self._text))

    def tidy(self) -> Stringy:
        return self._derive(text.tidy(self._text))

    def utf8ify(self) -> Stringy:
        return self._derive(text.utf8ify(self._text))

    def to_ascii(
        self,
        language: str = DEFAULT_LANGUAGE,
        remove_unsupported: bool = True,
        transliterator: Optional[Transliterator] = None,
    ) -> Stringy:
        """
        Fold to ASCII.

        Args:
            language: Language tag selecting overrides, e.g. "de" folds ä to ae
            remove_unsupported: Drop codepoints that have no ASCII form
            transliterator: Transliteration collaborator
        """
        if transliterator is None:
            logger.debug("Using default Transliterator")
            transliterator = Transliterator()
        return self._derive(transliterator.to_ascii(self._text, language, remove_unsupported))

    def slugify(
        self,
        separator: TextLike = "-",
        language: str = DEFAULT_LANGUAGE,
        lowercase: bool = True,
        transliterator: Optional[Transliterator] = None,
    ) -> Stringy:
        """Convert to a URL slug made of ASCII letters, digits and separators."""
        if transliterator is None:
            logger.debug("Using default Transliterator")
            transliterator = Transliterator()
        return self._derive(transliterator.slug(self._text, str(separator), language, lowercase))

    def extract_text(self, search_term: TextLike = "", length: Optional[int] = None, ellipsis: TextLike = "...") -> Stringy:
        return self._derive(text.extract_text(self._text, str(search_term), length, str(ellipsis)))

    def shorten_after_word(self, length: int, add_on: TextLike = "...") -> Stringy:
        return self._derive(text.shorten_after_word(self._text, length, str(add_on)))

    def line_wrap_after_word(self, limit: int) -> Stringy:
        return self._derive(text.line_wrap_after_word(self._text, limit))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_boolean(self) -> bool:
        """
        Interpret the text as a boolean.

        "true", "1", "on" and "yes" are True; "false", "0", "off" and "no"
        are False (any case). Numbers are True when positive. Any other
        text is True unless blank.
        """
        return text.to_boolean(self._text)


def create(value: Any = "", encoding: Optional[str] = None) -> Stringy:
    """Shorthand for Stringy(value, encoding)."""
    return Stringy(value, encoding)
