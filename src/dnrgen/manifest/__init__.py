"""Extension manifest reading and first-party host extraction."""

from __future__ import annotations

from dnrgen.manifest.hosts import extract_google_hosts, google_host_from_pattern
from dnrgen.manifest.loader import load_content_scripts, load_manifest
from dnrgen.manifest.patterns import parse_match_pattern

__all__ = [
    "extract_google_hosts",
    "google_host_from_pattern",
    "load_content_scripts",
    "load_manifest",
    "parse_match_pattern",
]
