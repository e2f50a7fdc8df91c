"""Argument checks shared by the rule modules."""

from __future__ import annotations

from typing import Any

from form_rules.errors import InvalidArgument


def require_text(rule: str, value: Any, argument: str = "value") -> str:
    """Return ``value`` if it is a str, otherwise raise InvalidArgument."""
    if not isinstance(value, str):
        raise InvalidArgument(rule, argument, value, "a str")
    return value


def require_int(rule: str, value: Any, argument: str) -> int:
    """Return ``value`` if it is an int (bool excluded), otherwise raise InvalidArgument."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(rule, argument, value, "an int")
    return value
