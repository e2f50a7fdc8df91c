"""
form_rules: Stateless validation rules for user-supplied form data.

This package provides length, equality, character-class and format rules,
HTML escaping, a JSON well-formedness check and a uniqueness check over an
injected lookup.
"""

import logging

from form_rules.errors import InvalidArgument, LookupFailed, RuleError
from form_rules.rules import (
    SPECIAL_CHARS,
    Lookup,
    alpha_numeric,
    alphabetic,
    check_unique,
    digit,
    email,
    has_no_special_chars,
    html,
    is_json,
    matches,
    max_length,
    min_length,
    name,
    required,
    timestamp,
    url,
    year_month,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidArgument",
    "LookupFailed",
    "RuleError",
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
