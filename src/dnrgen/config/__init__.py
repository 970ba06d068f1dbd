"""Configuration loading, validation, and normalization for dnrgen runs."""

from __future__ import annotations

from dnrgen.config.loader import load_config
from dnrgen.config.model import GeneratorConfig
from dnrgen.config.validator import validate_config_file

__all__ = [
    "GeneratorConfig",
    "load_config",
    "validate_config_file",
]
