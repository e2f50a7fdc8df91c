"""HTML escaping and JSON well-formedness."""

from __future__ import annotations

import html as _html
import json
from decimal import Decimal
from typing import Any


from form_rules.rules._arguments import require_text
from form_rules.utils.logging import get_logger

logger = get_logger(__name__)


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are Python extensions, not JSON.
    raise ValueError(f"Invalid JSON constant: {token}")


def html(value: str) -> str:
    """
    Escape ``& < > " '`` so ``value`` can be embedded in HTML markup.

    Returns the escaped text; printing it is up to the caller.
    """
    return _html.escape(require_text("html", value), quote=True)


def is_json(value: Any) -> bool:
    """
    True iff ``value`` is a str/bytes document that parses as JSON.

    Success is decided by the parser, not by the decoded value, so
    ``"null"``, ``"0"`` and ``"false"`` are valid JSON. Non-text inputs
    (lists, dicts, numbers, None), undecodable bytes and documents nested
    deeper than the interpreter can decode are False. Integers are parsed
    as Decimal, so long digit runs are not rejected by int conversion limits.
    """
    if not isinstance(value, (str, bytes, bytearray)):
        return False
    try:
        json.loads(value, parse_int=Decimal, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.debug("json_rejected", reason=str(e))
        return False
    return True
