"""Parser for content-script match patterns (``<scheme>://<host><path>``)."""

from __future__ import annotations

from dnrgen.constants.manifest import ALL_URLS_PATTERN, SCHEME_SEPARATOR
from dnrgen.exceptions import ConfigurationError
from dnrgen.model import MatchPattern


def parse_match_pattern(pattern: str) -> MatchPattern:
    """Split a match pattern into scheme, host and path.

    Raises ConfigurationError when the string is not a match pattern at all.
    """
    if pattern == ALL_URLS_PATTERN:
        return MatchPattern(raw=pattern, scheme="*", host="", path="")

    scheme, separator, rest = pattern.partition(SCHEME_SEPARATOR)
    if not separator or not scheme:
        raise ConfigurationError(f"Invalid match pattern {pattern!r}: missing scheme")

    host, slash, path = rest.partition("/")
    if not slash:
        raise ConfigurationError(f"Invalid match pattern {pattern!r}: missing path")

    return MatchPattern(raw=pattern, scheme=scheme, host=host, path=f"/{path}")
