"""
Stringy Core Package.

Codepoint-level algorithms behind the Stringy value: indexing, search,
tokenization, case-style conversion, padding and longest-common analysis.
"""

from stringy.core.case_style import (
    camelize,
    capitalize_personal_name,
    dasherize,
    delimit,
    snakeize,
    titleize,
    underscored,
    upper_camelize,
)
from stringy.core.codepoints import CodepointIndex, substring
from stringy.core.common import (
    longest_common_prefix,
    longest_common_substring,
    longest_common_suffix,
)
from stringy.core.padding import PadSide, pad, safe_truncate, truncate
from stringy.core.tokenizer import Token, TokenKind, Tokenizer, tokenize

__all__ = [
    "CodepointIndex",
    "substring",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
    "camelize",
    "upper_camelize",
    "delimit",
    "dasherize",
    "underscored",
    "snakeize",
    "titleize",
    "capitalize_personal_name",
    "longest_common_prefix",
    "longest_common_suffix",
    "longest_common_substring",
    "PadSide",
    "pad",
    "truncate",
    "safe_truncate",
]
