"""Exceptions raised by tintkit."""

from typing import Optional


class ParseError(ValueError):
    """
    Raised when a textual color representation cannot be parsed.

    Attributes:
        value: the input string that failed to parse
        reason: short description of what was wrong with it
    """

    def __init__(self, value: str, reason: Optional[str] = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Cannot parse color {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
