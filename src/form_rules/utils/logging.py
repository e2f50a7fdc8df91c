"""
Structured logging setup (structlog over the standard logging module).

Package loggers are structlog loggers wrapping ``logging.getLogger(name)``, so
they stay silent until an application calls ``configure_logging`` or attaches
its own handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from form_rules.config.settings import get_settings

PACKAGE_LOGGER = "form_rules"


class _FormRulesHandler(logging.StreamHandler):
    """Handler installed by configure_logging; replaced on reconfiguration."""


def get_logger(name: str) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog and the ``form_rules`` stdlib logger.

    Output goes to stderr. ``level`` and ``fmt`` override the values from LoggingSettings
    (LOG_LOG_LEVEL / LOG_LOG_FORMAT). ``fmt`` is 'json' or 'console'.
    """
    log_settings = get_settings().logging
    level_name = (level or log_settings.log_level).upper()
    fmt = (fmt or log_settings.log_format).lower()

    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    if fmt not in ("json", "console"):
        raise ValueError(f"Unknown log format: {fmt}")

    renderer: structlog.typing.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in pkg_logger.handlers if isinstance(h, _FormRulesHandler)]:
        pkg_logger.removeHandler(old)
    handler = _FormRulesHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(numeric_level)
    pkg_logger.propagate = False
