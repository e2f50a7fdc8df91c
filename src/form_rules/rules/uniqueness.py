"""
Uniqueness rule over an injected lookup.

The lookup owns storage and query building; this module only defines the
contract and turns "a matching row exists" into a uniqueness verdict.
Check-then-insert races are the lookup's concern.
"""

from __future__ import annotations

from typing import Any, Protocol


from form_rules.errors import InvalidArgument, LookupFailed, describe_cause
from form_rules.rules._arguments import require_text
from form_rules.utils.logging import get_logger

logger = get_logger(__name__)


class Lookup(Protocol):
    """Answers: does a row exist in ``table`` where ``column`` equals ``value``?"""

    def __call__(self, table: str, column: str, value: Any) -> bool: ...


def _row_exists(answer: Any, table: str, column: str) -> bool:
    """Interpret the lookup's answer: a bool, or a non-negative row count."""
    if isinstance(answer, bool):
        return answer
    if isinstance(answer, int) and answer >= 0:
        return answer > 0
    raise LookupFailed(
        table,
        column,
        f"Uniqueness lookup for {table}.{column} returned {answer!r}; expected bool or row count",
    )


def check_unique(lookup: Lookup, table: str, column: str, value: Any) -> bool:
    """
    True iff no row in ``table`` has ``column`` equal to ``value``.

    Errors raised by ``lookup`` surface as LookupFailed (chained to the
    original); they are never turned into a verdict.
    """
    if not callable(lookup):
        raise InvalidArgument("check_unique", "lookup", lookup, "a callable")
    for argument, identifier in (("table", table), ("column", column)):
        if require_text("check_unique", identifier, argument) == "":
            raise InvalidArgument("check_unique", argument, identifier, "a non-empty str")

    try:
        answer = lookup(table, column, value)
    except LookupFailed as e:
        logger.warning("uniqueness_lookup_failed", table=table, column=column, error=str(e))
        raise
    except Exception as e:
        logger.warning(
            "uniqueness_lookup_failed", table=table, column=column, error=describe_cause(e)
        )
        raise LookupFailed(table, column, f"Uniqueness lookup failed for {table}.{column}: {e}") from e

    return not _row_exists(answer, table, column)
