"""
CLI entry point for form-rules.

Subcommands: check (run one rule against a value), escape (HTML-escape a value).
``check`` prints true/false and exits 0 for a true verdict, 1 for false and
2 for usage errors or invalid arguments.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Optional, Sequence


from form_rules import rules
from form_rules.errors import InvalidArgument
from form_rules.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

# Rules taking (value,) and rules taking (value, n)
_UNARY_RULES: dict[str, Callable[[Any], bool]] = {
    "required": rules.required,
    "has-no-special-chars": rules.has_no_special_chars,
    "alphabetic": rules.alphabetic,
    "alpha-numeric": rules.alpha_numeric,
    "digit": rules.digit,
    "timestamp": rules.timestamp,
    "year-month": rules.year_month,
    "email": rules.email,
    "url": rules.url,
    "name": rules.name,
    "is-json": rules.is_json,
}
_BOUND_RULES: dict[str, Callable[[Any, Any], bool]] = {
    "min-length": rules.min_length,
    "max-length": rules.max_length,
}

_LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMAT_CHOICES = ("json", "console")


def _parse_bound(raw: str) -> Any:
    """Return ``raw`` as an int when it is one; otherwise leave it for the rule to reject."""
    try:
        return int(raw)
    except ValueError:
        return raw


def _cmd_check(rule: str, value: str, arg: Optional[str]) -> int:
    """Run one rule and print its verdict."""
    try:
        if rule in _BOUND_RULES:
            if arg is None:
                print(f"Error: rule '{rule}' needs a numeric bound argument", file=sys.stderr)
                return 2
            verdict = _BOUND_RULES[rule](value, _parse_bound(arg))
        else:
            if arg is not None:
                print(f"Error: rule '{rule}' takes no extra argument", file=sys.stderr)
                return 2
            verdict = _UNARY_RULES[rule](value)
    except InvalidArgument as e:
        logger.info("rule_invalid_argument", rule=rule, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logger.debug("rule_checked", rule=rule, verdict=verdict)
    print("true" if verdict else "false")
    return 0 if verdict else 1


def _cmd_escape(value: str) -> int:
    print(rules.html(value))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse CLI args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="form-rules",
        description="Validate a value against one rule, or HTML-escape it.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVEL_CHOICES,
        default=None,
        help="Override log level. Default: LOG_LOG_LEVEL or WARNING.",
    )
    parser.add_argument(
        "--log-format",
        choices=_LOG_FORMAT_CHOICES,
        default=None,
        help="Override log format. Default: LOG_LOG_FORMAT or console.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_p = subparsers.add_parser("check", help="Run a rule against a value.")
    check_p.add_argument("rule", choices=sorted([*_UNARY_RULES, *_BOUND_RULES]), help="Rule name.")
    check_p.add_argument("value", help="Value to validate.")
    check_p.add_argument("arg", nargs="?", default=None, help="Bound for min-length / max-length.")

    esc_p = subparsers.add_parser("escape", help="HTML-escape a value.")
    esc_p.add_argument("value", help="Text to escape.")

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, fmt=args.log_format)

    if args.command == "check":
        return _cmd_check(args.rule, args.value, args.arg)
    if args.command == "escape":
        return _cmd_escape(args.value)
    return 2


if __name__ == "__main__":
    sys.exit(main())
