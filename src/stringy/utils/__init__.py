"""
Stringy Utilities Package.

Error taxonomy shared by the value type, the algorithms and the CLI.
"""

from stringy.utils.errors import (
    ImmutableViolation,
    IndexOutOfRange,
    InvalidArgument,
    InvalidInput,
    StringyError,
)

__all__ = [
    "StringyError",
    "InvalidInput",
    "IndexOutOfRange",
    "ImmutableViolation",
    "InvalidArgument",
]
