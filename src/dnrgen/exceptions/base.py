"""Root exception type for dnrgen."""

from __future__ import annotations


class DnrgenError(Exception):
    """Base class for all errors raised by dnrgen."""
