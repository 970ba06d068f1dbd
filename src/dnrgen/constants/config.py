"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "dnrgen.yaml"

DEFAULT_MANIFEST_PATH: str = "src/manifest.json"
DEFAULT_OUTPUT_DIR: str = "src/data/dnr"
DEFAULT_GOOGLE_SCRIPT_ID: str = "js/firstparties/google.js"

RULE_SET_DNT_POLICY: str = "dnt_policy"
RULE_SET_DNT_SIGNAL: str = "dnt_signal"
RULE_SET_GEN204: str = "gen204"
RULE_SET_BYPASS_REDIRECTS: str = "bypass_redirects"

RULE_SET_NAMES: tuple[str, ...] = (
    RULE_SET_DNT_POLICY,
    RULE_SET_DNT_SIGNAL,
    RULE_SET_GEN204,
    RULE_SET_BYPASS_REDIRECTS,
)

DEFAULT_RULE_SET_FILES: dict[str, str] = {
    RULE_SET_DNT_POLICY: "dnt_policy.json",
    RULE_SET_DNT_SIGNAL: "dnt_signal.json",
    RULE_SET_GEN204: "gen204.json",
    RULE_SET_BYPASS_REDIRECTS: "bypass_redirects.json",
}

# Extension-wide DNR priority tiers.
PRIORITY_BLOCK: int = 1
PRIORITY_REDIRECT: int = 1
PRIORITY_REDIRECT_ENCODED_ALLOW: int = 2
PRIORITY_DNT_HEADER: int = 4
PRIORITY_DNT_CHECK_ALLOW: int = 5

PRIORITY_TIER_NAMES: tuple[str, ...] = (
    "dnt_check_allow",
    "dnt_header",
    "block",
    "redirect",
    "redirect_encoded_allow",
)
