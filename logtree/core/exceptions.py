"""
Exception types

Setup-time misuse raises InvalidArgumentError at once. DispatchFailure only
travels inside a logging call and is never raised to its caller.
"""

from typing import Optional


class LogTreeError(Exception):
    """Base class for logtree errors."""


class InvalidArgumentError(LogTreeError, ValueError):
    """Raised for programmer misuse such as a None handler or an UNSET root level."""


class DispatchFailure(LogTreeError):
    """
    Outcome of a logging call that failed while formatting or publishing.

    Attributes:
        logger_name: Name of the logger the call was made on
        cause: The exception raised by formatting or by a handler
        message: Formatted message text, or None if formatting failed
    """

    def __init__(self, logger_name: str, cause: BaseException, message: Optional[str] = None):
        super().__init__(f"logging through '{logger_name}' failed: {cause!r}")
        self.logger_name = logger_name
        self.cause = cause
        self.message = message
