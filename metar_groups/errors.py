"""
Exceptions raised while decoding weather report groups.

All errors derive from ParseError so callers can catch the whole family
with a single except clause.
"""

from typing import Any, Optional


class ParseError(Exception):
    """Base class for group decoding failures."""


class InvalidWeatherStatementError(ParseError):
    """
    Raised when a group is recognized but invalid in its context.

    Typical case: a wind variation group with no preceding wind group.

    Args:
        cause: Either a description string (appended to the message) or
            the underlying object/exception, kept on ``cause``.
    """

    def __init__(self, cause: Any = None):
        if isinstance(cause, str):
            super().__init__(f"Invalid weather string: {cause}")
            self.cause = None
        else:
            super().__init__("Invalid weather string")
            self.cause = cause


class UnsupportedWeatherStatementError(ParseError):
    """
    Raised when an input contains data elements that are recognized but
    intentionally not supported.
    """

    def __init__(self, reason: str, cause: Any = None):
        if isinstance(cause, str):
            super().__init__(f"Unsupported weather string ({reason}): {cause}")
            self.cause = None
        else:
            super().__init__(f"Unsupported weather string ({reason})")
            self.cause = cause
        self.reason = reason


class CommandExecutionError(ParseError):
    """
    Raised when a command claimed a group in can_parse but could not
    extract it when executing (for example, an invalid cloud quantity).
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnexpectedParseError(ParseError):
    """Should never occur: execute() called on a group it does not match."""

    def __init__(self, message: Optional[str] = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
