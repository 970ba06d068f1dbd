"""Stable validation error codes and allowed-key sets for config and rule-list checks."""

from __future__ import annotations

from dnrgen.constants.config import PRIORITY_TIER_NAMES, RULE_SET_NAMES

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # value out of range
CFG007: str = "CFG007"  # priority tiers out of order
CFG008: str = "CFG008"  # root directory not found

RULE001: str = "RULE001"  # duplicate rule id
RULE002: str = "RULE002"  # non-positive id or priority
RULE003: str = "RULE003"  # ids not contiguous from 1
RULE004: str = "RULE004"  # incomplete action
RULE005: str = "RULE005"  # invalid regexFilter

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {"manifest", "output_dir", "google_script", "rule_set_files", "priorities"}
)
PATH_KEYS: tuple[str, ...] = ("manifest", "output_dir", "google_script")
ALLOWED_RULE_SET_FILE_KEYS: frozenset[str] = frozenset(RULE_SET_NAMES)
ALLOWED_PRIORITY_KEYS: frozenset[str] = frozenset(PRIORITY_TIER_NAMES)
