"""Config file validation for dnrgen runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from dnrgen.constants.config import CONFIG_FILENAME, PRIORITY_TIER_NAMES
from dnrgen.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_PRIORITY_KEYS,
    ALLOWED_RULE_SET_FILE_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    PATH_KEYS,
)
from dnrgen.exceptions.validation import ValidationError
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers, check_priority_tiers


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a dnrgen.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``dnrgen validate-config``
    and ``dnrgen generate`` preflight.  It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    errors.extend(_check_unknown_keys(raw, ALLOWED_CONFIG_KEYS, path_str, prefix=""))

    for key in PATH_KEYS:
        if key in raw and (not isinstance(raw[key], str) or not raw[key].strip()):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message="must be a non-empty string",
                )
            )

    errors.extend(_validate_rule_set_files(raw.get("rule_set_files"), path_str))
    errors.extend(_validate_priorities(raw.get("priorities"), path_str))
    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a mistyped key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return f"did you mean '{matches[0]}'?" if matches else ""


def _check_unknown_keys(
    raw: dict[str, Any],
    allowed: frozenset[str],
    path_str: str,
    *,
    prefix: str,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for key in sorted(raw, key=str):
        if key in allowed:
            continue
        errors.append(
            ValidationError(
                code=CFG004,
                path=path_str,
                field=f"{prefix}{key}",
                message=f"unknown key '{key}'",
                hint=_suggest_key(str(key), allowed),
            )
        )
    return errors


def _validate_rule_set_files(value: Any, path_str: str) -> list[ValidationError]:
    if value is None:
        return []
    if not isinstance(value, dict):
        return [ValidationError(code=CFG005, path=path_str, field="rule_set_files", message="must be a mapping")]

    errors = _check_unknown_keys(value, ALLOWED_RULE_SET_FILE_KEYS, path_str, prefix="rule_set_files.")
    for name, filename in value.items():
        if name not in ALLOWED_RULE_SET_FILE_KEYS:
            continue
        if not isinstance(filename, str) or not filename.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"rule_set_files.{name}",
                    message="must be a non-empty string",
                )
            )
        elif "/" in filename or "\\" in filename:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"rule_set_files.{name}",
                    message=f"must be a bare file name, got {filename!r}",
                )
            )
    return errors


def _validate_priorities(value: Any, path_str: str) -> list[ValidationError]:
    if value is None:
        return []
    if not isinstance(value, dict):
        return [ValidationError(code=CFG005, path=path_str, field="priorities", message="must be a mapping")]

    errors = _check_unknown_keys(value, ALLOWED_PRIORITY_KEYS, path_str, prefix="priorities.")
    tiers = DEFAULT_PRIORITY_TIERS.as_dict()
    for name in PRIORITY_TIER_NAMES:
        if name not in value:
            continue
        tier = value[name]
        if isinstance(tier, bool) or not isinstance(tier, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"priorities.{name}",
                    message=f"must be an integer, got {type(tier).__name__}",
                )
            )
        elif tier <= 0:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"priorities.{name}",
                    message=f"must be positive, got {tier}",
                )
            )
        else:
            tiers[name] = tier

    if errors:
        return errors

    for problem in check_priority_tiers(PriorityTiers(**tiers)):
        errors.append(ValidationError(code=CFG007, path=path_str, field="priorities", message=problem))
    return errors
