"""Shared exception hierarchy for dnrgen."""

from __future__ import annotations

from .base import DnrgenError
from .config import ConfigurationError
from .generation import PersistenceError, SerializationError

__all__ = [
    "ConfigurationError",
    "DnrgenError",
    "PersistenceError",
    "SerializationError",
]
