"""
Format rules: dates, email addresses, URLs and personal names.

Date patterns are checked shape-only; ``timestamp("2023-02-31")`` is True.
"""

from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email

from form_rules.config.settings import get_settings
from form_rules.rules._arguments import require_text
from form_rules.utils.logging import get_logger

logger = get_logger(__name__)

TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])-(0[1-9]|[1-2][0-9]|3[0-1])")
YEAR_MONTH_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")
URL_PATTERN = re.compile(
    r"\b(?:(?:https?|ftp)://|www\.)[-a-z0-9+&@#/%?=~_|!:,.;]*[-a-z0-9+&@#/%=~_|]",
    re.IGNORECASE | re.ASCII,
)
NAME_PATTERN = re.compile(r"[a-zA-Z ]*")


def timestamp(value: str) -> bool:
    """True iff ``value`` is YYYY-MM-DD (month 01-12, day 01-31)."""
    return TIMESTAMP_PATTERN.fullmatch(require_text("timestamp", value)) is not None


def year_month(value: str) -> bool:
    """True iff ``value`` is YYYY-MM (month 01-12)."""
    return YEAR_MONTH_PATTERN.fullmatch(require_text("year_month", value)) is not None


def email(value: str) -> bool:
    """
    True iff ``value`` is a syntactically valid email address.

    Validation is delegated to email-validator using the options in
    ``Settings.rules``; DNS deliverability checks are off unless enabled there.
    """
    require_text("email", value)
    options = get_settings().rules
    try:
        validate_email(
            value,
            check_deliverability=options.email_check_deliverability,
            allow_smtputf8=options.email_allow_smtputf8,
            allow_quoted_local=options.email_allow_quoted_local,
        )
    except EmailNotValidError as e:
        logger.debug("email_rejected", reason=str(e))
        return False
    return True


def url(value: str) -> bool:
    """
    True iff ``value`` contains an http(s)://, ftp:// or www. link.

    This is a search, not a full match: surrounding text is allowed.
    """
    return URL_PATTERN.search(require_text("url", value)) is not None


def name(value: str) -> bool:
    """True iff ``value`` holds only ASCII letters and spaces (empty passes)."""
    return NAME_PATTERN.fullmatch(require_text("name", value)) is not None
