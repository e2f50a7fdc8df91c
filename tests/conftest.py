"""Pytest configuration and shared fixtures."""

import logging

import pytest
import structlog

from form_rules.config import settings as settings_module
from form_rules.utils.logging import PACKAGE_LOGGER


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "cli: tests driving the form-rules command line")


@pytest.fixture(autouse=True)
def _fresh_settings_and_logging(monkeypatch: pytest.MonkeyPatch):
    """Drop the cached Settings and restore structlog and stdlib logging around every test."""
    monkeypatch.setattr(settings_module, "_settings", None)
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(pkg_logger.handlers)
    level, propagate = pkg_logger.level, pkg_logger.propagate
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
