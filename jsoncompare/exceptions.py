"""Custom exceptions for the JSON compare backend.

Exception Hierarchy
-------------------
- JsonCompareError (base exception)

  - InvalidJsonError (a document could not be parsed)
  - DocumentComparisonError (one or both sides of a comparison are invalid)
  - ConfigError (settings could not be persisted)

The diff engine itself raises nothing: oversized inputs are handled by the
approximate path and reported through ``DiffResult.approximate``.
"""

from __future__ import annotations


class JsonCompareError(Exception):
    """Base exception for all backend-specific errors"""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidJsonError(JsonCompareError):
    """Raised when a document is empty or is not valid JSON.

    ``line`` and ``column`` are 1-based and point at the parse failure; both
    are None for an empty document.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        side: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error)
        self.line = line
        self.column = column
        self.side = side

    def to_dict(self) -> dict:
        return {
            "side": self.side,
            "message": self.message,
            "line": self.line,
            "column": self.column,
        }


class DocumentComparisonError(JsonCompareError):
    """Raised when a comparison cannot run because a side is invalid"""

    def __init__(self, errors: list[InvalidJsonError]):
        sides = ", ".join(e.side or "?" for e in errors)
        super().__init__(f"Cannot compare invalid JSON ({sides})")
        self.errors = errors


class ConfigError(JsonCompareError):
    """Raised when settings cannot be written"""
