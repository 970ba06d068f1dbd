"""Exceptions raised while serializing and persisting rule lists."""

from __future__ import annotations

from dnrgen.exceptions.base import DnrgenError


class SerializationError(DnrgenError, ValueError):
    """Raised when a rule list is malformed or cannot be encoded as JSON."""


class PersistenceError(DnrgenError, OSError):
    """Raised when a rule file cannot be written to its destination."""
