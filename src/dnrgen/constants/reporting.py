"""Constants for rule file writing and stdout formatting."""

from __future__ import annotations

from dnrgen.constants.config import (
    RULE_SET_BYPASS_REDIRECTS,
    RULE_SET_DNT_POLICY,
    RULE_SET_DNT_SIGNAL,
    RULE_SET_GEN204,
)

RULES_TEMP_PREFIX: str = ".tmp-"
RULES_TEMP_SUFFIX: str = ".json"
JSON_INDENT: int = 2

RULE_SET_LABELS: dict[str, tuple[str, str]] = {
    RULE_SET_DNT_SIGNAL: ("DNT signal rule", "DNT signal rules"),
    RULE_SET_DNT_POLICY: ("DNT policy rule", "DNT policy rules"),
    RULE_SET_GEN204: ("Google gen204 beacon block rule", "Google gen204 beacon block rules"),
    RULE_SET_BYPASS_REDIRECTS: ("Google redirect rule", "Google redirect rules"),
}
