"""
form-rules rule set.

Each rule is an independent, pure function returning a bool verdict
(``html`` returns escaped text). A False verdict is a normal result;
exceptions are raised only for wrong argument types (InvalidArgument)
and uniqueness lookup failures (LookupFailed).
"""

from form_rules.rules.characters import (
    SPECIAL_CHARS,
    alpha_numeric,
    alphabetic,
    digit,
    has_no_special_chars,
)
from form_rules.rules.equality import matches
from form_rules.rules.formats import email, name, timestamp, url, year_month
from form_rules.rules.length import max_length, min_length, required
from form_rules.rules.markup import html, is_json
from form_rules.rules.uniqueness import Lookup, check_unique

__all__ = [
    "SPECIAL_CHARS",
    "Lookup",
    "alpha_numeric",
    "alphabetic",
    "check_unique",
    "digit",
    "email",
    "has_no_special_chars",
    "html",
    "is_json",
    "matches",
    "max_length",
    "min_length",
    "name",
    "required",
    "timestamp",
    "url",
    "year_month",
]
