"""Reporting package for dnrgen outputs."""

from __future__ import annotations

from dnrgen.reporting.stdout import StdoutReporter

__all__ = ["StdoutReporter"]
