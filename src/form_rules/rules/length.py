"""
Length and presence rules.

Lengths are counted in code points after trimming surrounding whitespace.
An empty or absent value passes both bounds; use ``required`` to demand content.
"""

from __future__ import annotations

from typing import Optional

from form_rules.rules._arguments import require_int, require_text


def _trimmed_length(rule: str, value: Optional[str], n: int) -> Optional[int]:
    """Validate arguments; return the trimmed length, or None for a vacuous pass."""
    require_int(rule, n, "n")
    if value is None:
        return None
    require_text(rule, value)
    if value == "":
        return None
    return len(value.strip())


def min_length(value: Optional[str], n: int) -> bool:
    """True if ``value`` has at least ``n`` characters (empty/None passes)."""
    length = _trimmed_length("min_length", value, n)
    return length is None or length >= n


def max_length(value: Optional[str], n: int) -> bool:
    """True if ``value`` has at most ``n`` characters (empty/None passes)."""
    length = _trimmed_length("max_length", value, n)
    return length is None or length <= n


def required(value: Optional[str]) -> bool:
    """True if ``value`` is non-empty after trimming whitespace."""
    if value is None:
        return False
    return require_text("required", value).strip() != ""
