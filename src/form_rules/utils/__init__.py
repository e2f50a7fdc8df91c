"""Shared utilities and helpers for the form-rules package."""

from form_rules.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
