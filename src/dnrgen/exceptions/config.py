"""Configuration-related exceptions."""

from __future__ import annotations

from dnrgen.exceptions.base import DnrgenError


class ConfigurationError(DnrgenError, ValueError):
    """Raised when generator configuration or the extension manifest is invalid."""
