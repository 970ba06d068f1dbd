"""First-party Google host extraction from content-script declarations."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from dnrgen.constants.manifest import (
    GOOGLE_HOST_LABEL,
    GOOGLE_HOST_PATH,
    GOOGLE_HOST_SCHEME,
    HOST_FORBIDDEN_CHARS,
)
from dnrgen.exceptions import ConfigurationError
from dnrgen.manifest.patterns import parse_match_pattern
from dnrgen.model import ContentScriptEntry

logger = logging.getLogger(__name__)


def google_host_from_pattern(pattern: str) -> str | None:
    """Return the hostname of an ``https://www.<host>/*`` pattern, else None.

    Strings that are not match patterns at all are skipped with a warning.
    A pattern with the right shape whose host carries a wildcard raises
    ConfigurationError instead of yielding a partial hostname.
    """
    try:
        parsed = parse_match_pattern(pattern)
    except ConfigurationError as exc:
        logger.warning("Skipping malformed match pattern: %s", exc)
        return None

    if (
        parsed.scheme != GOOGLE_HOST_SCHEME
        or parsed.path != GOOGLE_HOST_PATH
        or not parsed.host.startswith(GOOGLE_HOST_LABEL)
    ):
        return None

    host = parsed.host
    if host == GOOGLE_HOST_LABEL or any(char in host for char in HOST_FORBIDDEN_CHARS):
        raise ConfigurationError(f"Match pattern {pattern!r} does not name a concrete host")
    return host


def extract_google_hosts(
    content_scripts: Sequence[ContentScriptEntry],
    target_script_id: str,
) -> tuple[str, ...]:
    """Return hosts matched by the content script that loads ``target_script_id``.

    Declaration order is preserved and duplicates are kept.
    """
    entries = [entry for entry in content_scripts if target_script_id in entry.script_ids]
    if not entries:
        raise ConfigurationError(f"No content_scripts entry loads {target_script_id!r}")
    if len(entries) > 1:
        raise ConfigurationError(f"{len(entries)} content_scripts entries load {target_script_id!r}, expected one")

    hosts: list[str] = []
    seen: set[str] = set()
    for pattern in entries[0].match_patterns:
        host = google_host_from_pattern(pattern)
        if host is None:
            logger.debug("Skipping match pattern %s", pattern)
            continue
        if host in seen:
            logger.warning("Duplicate Google host %s in %s matches", host, target_script_id)
        seen.add(host)
        hosts.append(host)

    return tuple(hosts)
