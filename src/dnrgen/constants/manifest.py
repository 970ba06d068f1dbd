"""Match-pattern parsing constants."""

from __future__ import annotations

ALL_URLS_PATTERN: str = "<all_urls>"
SCHEME_SEPARATOR: str = "://"
GOOGLE_HOST_SCHEME: str = "https"
GOOGLE_HOST_LABEL: str = "www."
GOOGLE_HOST_PATH: str = "/*"
HOST_FORBIDDEN_CHARS: frozenset[str] = frozenset({"*", "/"})
