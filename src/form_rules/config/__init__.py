"""Configuration for form-rules (pydantic-settings, .env and YAML)."""

from form_rules.config.settings import (
    LoggingSettings,
    RuleSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "LoggingSettings",
    "RuleSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
