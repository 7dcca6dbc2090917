"""Custom exceptions for configuration handling."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when required settings are missing or config files are invalid."""

    pass
