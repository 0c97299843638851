"""
Character-class predicates.

Each "only contains X" predicate must hold for every codepoint, so an empty
sequence satisfies it. The "has X" predicates need at least one match.
"""

from __future__ import annotations

import base64
import binascii
import json
import string

_HEX_DIGITS = frozenset(string.hexdigits)


def is_alpha(text: str) -> bool:
    """Check if text contains only letters."""
    return all(ch.isalpha() for ch in text)


def is_alphanumeric(text: str) -> bool:
    """Check if text contains only letters and digits."""
    return all(ch.isalnum() for ch in text)


def is_blank(text: str) -> bool:
    """Check if text contains only whitespace (any Unicode space separator)."""
    return all(ch.isspace() for ch in text)


def is_hexadecimal(text: str) -> bool:
    """Check if text contains only hex digits, in either case."""
    return all(ch in _HEX_DIGITS for ch in text)


def is_lower_case(text: str) -> bool:
    """Check if every codepoint is a lowercase letter."""
    return all(ch.islower() for ch in text)


def is_upper_case(text: str) -> bool:
    """Check if every codepoint is an uppercase letter."""
    return all(ch.isupper() for ch in text)


def has_lower_case(text: str) -> bool:
    return any(ch.islower() for ch in text)


def has_upper_case(text: str) -> bool:
    return any(ch.isupper() for ch in text)


def is_json(text: str) -> bool:
    """
    Check if text is a JSON document.

    Blank text is never JSON, even though some decoders accept it.
    """
    if not text.strip():
        return False
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def is_base64(text: str) -> bool:
    """
    Check if text is canonical base64.

    The empty string is the encoding of zero bytes and therefore valid.
    """
    if text == "":
        return True
    try:
        decoded = base64.b64decode(text.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error):
        return False
    return base64.b64encode(decoded).decode("ascii") == text
