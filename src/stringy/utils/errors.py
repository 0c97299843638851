"""
Error types raised by Stringy values and their helpers.
"""

from typing import Any, Optional


class StringyError(Exception):
    """Base exception for all Stringy errors."""

    def __init__(self, message: str, value: Optional[Any] = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.value is None:
            return self.message
        preview = repr(self.value)
        if len(preview) > 40:
            preview = preview[:37] + "..."
        return f"{self.message} [{preview}]"


class InvalidInput(StringyError, TypeError):
    """
    Raised when a value cannot be converted to text.

    This error is raised when:
    - An aggregate (list, tuple, dict, set, ...) is passed to the constructor
    - An object without its own textual conversion is passed
    - Raw bytes cannot be decoded with the given encoding
    """

    pass


class IndexOutOfRange(StringyError, IndexError):
    """Raised when indexed access falls outside the codepoint sequence."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"No character exists at index {index} (length {length})")


class ImmutableViolation(StringyError, TypeError):
    """Raised on any attempt to modify a Stringy in place."""

    pass


class InvalidArgument(StringyError, ValueError):
    """Raised when an argument is outside its accepted set of values."""

    def __init__(
        self,
        message: str,
        value: Optional[Any] = None,
        allowed: Optional[list[str]] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error message
            value: The offending argument
            allowed: The accepted values, if the argument is an enumeration
        """
        self.allowed = allowed or []
        super().__init__(message, value)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.allowed:
            return base + "\n  Expected one of: " + ", ".join(self.allowed)
        return base
