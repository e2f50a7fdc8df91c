"""
Character-class rules.

Letters and digits mean ASCII letters and ASCII digits; Unicode letters
such as 'é' or digits such as '٣' do not qualify.
"""

from __future__ import annotations

import re

from form_rules.rules._arguments import require_text

# Not allowed: \ ' ^ £ $ % & * } { @ # ~ > < | = _ + ¬
SPECIAL_CHARS = frozenset("\\'^£$%&*}{@#~><|=_+¬")

_ALPHA = re.compile(r"[A-Za-z]+")
_ALNUM = re.compile(r"[A-Za-z0-9]+")
_DIGITS = re.compile(r"[0-9]+")


def has_no_special_chars(value: str) -> bool:
    """False if ``value`` contains any character from SPECIAL_CHARS."""
    return SPECIAL_CHARS.isdisjoint(require_text("has_no_special_chars", value))


def alphabetic(value: str) -> bool:
    """Ignoring spaces, True iff ``value`` is one or more letters."""
    stripped = require_text("alphabetic", value).replace(" ", "")
    return _ALPHA.fullmatch(stripped) is not None


def alpha_numeric(value: str) -> bool:
    return _ALNUM.fullmatch(require_text("alpha_numeric", value)) is not None


def digit(value: str) -> bool:
    return _DIGITS.fullmatch(require_text("digit", value)) is not None
