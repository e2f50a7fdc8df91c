"""
Exceptions raised by form-rules.

A failing validation is a normal ``False`` verdict; these exceptions are reserved
for misuse (wrong argument types) and for failures of the injected uniqueness lookup.
"""

from __future__ import annotations

from typing import Any, Optional


class RuleError(Exception):
    """Base class for all errors raised by form-rules."""


class InvalidArgument(RuleError, TypeError):
    """Raised when a rule receives a value or parameter of the wrong type."""

    def __init__(self, rule: str, argument: str, received: Any, expected: str) -> None:
        self.rule = rule
        self.argument = argument
        self.expected = expected
        self._message = (
            f"{rule}(): argument '{argument}' must be {expected}, "
            f"got {type(received).__name__}"
        )
        super().__init__(self._message)

    def __str__(self) -> str:
        return self._message


class LookupFailed(RuleError):
    """Raised when the uniqueness lookup cannot answer (connectivity, bad identifier, bad reply)."""

    def __init__(self, table: str, column: str, message: str = "") -> None:
        self.table = table
        self.column = column
        self._message = message or f"Uniqueness lookup failed for {table}.{column}"
        super().__init__(self._message)

    def __str__(self) -> str:
        return self._message


def describe_cause(exc: Optional[BaseException]) -> str:
    """Short ``Type: message`` description of a chained exception, for logs."""
    if exc is None:
        return ""
    return f"{type(exc).__name__}: {exc}"
