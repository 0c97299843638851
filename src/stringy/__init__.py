"""
Stringy - immutable, Unicode-aware strings with a rich transformation API.

Every operation counts codepoints rather than bytes, and every
transformation returns a new value.
"""

from stringy.core.padding import PadSide
from stringy.core.tokenizer import Token, TokenKind, tokenize
from stringy.external.html_entities import QuoteStyle
from stringy.utils.errors import (
    ImmutableViolation,
    IndexOutOfRange,
    InvalidArgument,
    InvalidInput,
    StringyError,
)
from stringy.value import Stringy, create

__version__ = "0.1.0"
__all__ = [
    "Stringy",
    "create",
    "PadSide",
    "QuoteStyle",
    "Token",
    "TokenKind",
    "tokenize",
    "StringyError",
    "InvalidInput",
    "IndexOutOfRange",
    "ImmutableViolation",
    "InvalidArgument",
]
