"""
Regular-expression collaborator.

Thin adapter over the `regex` distribution, which understands POSIX
bracket classes such as [[:alpha:]] in addition to Unicode properties.
Pattern errors raised by the engine propagate unchanged.
"""

from __future__ import annotations

from typing import Optional

import regex

from stringy.utils.errors import InvalidArgument

# Modifier letters accepted by PatternMatcher, mapped to engine flags
MODIFIER_FLAGS = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
    "x": regex.VERBOSE,
}

# Legacy multibyte option string; "r" only selected a syntax dialect
LEGACY_OPTIONS = "msr"

_DOLLAR_GROUP_RE = regex.compile(r"\$(\d+)|\$\{(\d+)\}")


def parse_modifiers(options: str = "") -> int:
    """
    Turn a modifier string such as "ims" into engine flags.

    Raises:
        InvalidArgument: If the string holds an unknown modifier
    """
    if options == LEGACY_OPTIONS:
        options = "ms"
    flags = regex.UNICODE
    for letter in options:
        if letter not in MODIFIER_FLAGS:
            raise InvalidArgument(
                "Unknown regular expression modifier",
                letter,
                allowed=sorted(MODIFIER_FLAGS),
            )
        flags |= MODIFIER_FLAGS[letter]
    return flags


def convert_replacement(replacement: str) -> str:
    """Rewrite $1 and ${1} group references into the engine's \\g<1> form."""
    return _DOLLAR_GROUP_RE.sub(lambda m: "\\g<" + (m.group(1) or m.group(2)) + ">", replacement)


class PatternMatcher:
    """
    Compile-and-apply helper for user supplied patterns.

    Usage:
        matcher = PatternMatcher()
        matcher.replace("foo bar", r"f(o)o", r"\\1")    # "o bar"
        matcher.split("a1b22c", r"\\d+")                # ["a", "b", "c"]
    """

    def compile(self, pattern: str, options: str = "") -> regex.Pattern:
        return regex.compile(pattern, parse_modifiers(options))

    def replace(self, text: str, pattern: str, replacement: str, options: str = LEGACY_OPTIONS) -> str:
        """Replace every match of pattern in text."""
        compiled = self.compile(pattern, options)
        return compiled.sub(convert_replacement(replacement), text)

    def replace_with(self, text: str, pattern: str, function, options: str = "") -> str:
        """Replace every match with the result of calling function on it."""
        return self.compile(pattern, options).sub(function, text)

    def search(self, text: str, pattern: str, options: str = "") -> Optional[regex.Match]:
        return self.compile(pattern, options).search(text)

    def full_match(self, text: str, pattern: str, options: str = "") -> bool:
        return self.compile(pattern, options).fullmatch(text) is not None

    def split(self, text: str, pattern: str, limit: Optional[int] = None, options: str = "") -> list[str]:
        """
        Split text on pattern.

        With a positive limit at most `limit` leading pieces are returned;
        the unsplit remainder is discarded.
        """
        pieces = self.compile(pattern, options).split(text)
        if limit is not None and limit > 0:
            return pieces[:limit]
        return pieces

    @staticmethod
    def escape(text: str) -> str:
        """Escape text so it matches literally."""
        return regex.escape(text)
