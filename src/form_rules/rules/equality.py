"""Strict equality rule."""

from __future__ import annotations

from typing import Any


def matches(value: Any, target: Any) -> bool:
    """
    True iff ``value`` equals ``target`` with the same type.

    No coercion: ``matches(1, 1.0)``, ``matches(1, True)`` and ``matches("1", 1)``
    are all False. An object always matches itself, NaN included.
    """
    return value is target or (type(value) is type(target) and value == target)
