"""Config loading and normalization for dnrgen runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from dnrgen.config.model import GeneratorConfig
from dnrgen.constants.config import CONFIG_FILENAME, DEFAULT_RULE_SET_FILES
from dnrgen.constants.validation import ALLOWED_CONFIG_KEYS, ALLOWED_PRIORITY_KEYS, ALLOWED_RULE_SET_FILE_KEYS
from dnrgen.exceptions import ConfigurationError
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers, check_priority_tiers


def load_config(root: Path, config_path: Path | None = None) -> GeneratorConfig:
    """Load and validate generator config from ``dnrgen.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigurationError(f"Config file not found: {path}")
        return GeneratorConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config key(s): {', '.join(unknown)}")

    defaults = GeneratorConfig()
    return GeneratorConfig(
        manifest=_ensure_string(raw.get("manifest", defaults.manifest), "manifest"),
        output_dir=_ensure_string(raw.get("output_dir", defaults.output_dir), "output_dir"),
        google_script=_ensure_string(raw.get("google_script", defaults.google_script), "google_script"),
        rule_set_files=_build_rule_set_files(raw.get("rule_set_files")),
        priorities=_build_priorities(raw.get("priorities")),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Require a non-empty string, raising ConfigurationError otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_mapping(value: Any, key_name: str, allowed: frozenset[str]) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{key_name} must be a mapping")
    unknown = sorted(str(key) for key in set(value) - allowed)
    if unknown:
        raise ConfigurationError(f"Unknown {key_name} key(s): {', '.join(unknown)}")
    return value


def _build_rule_set_files(value: Any) -> dict[str, str]:
    """Overlay configured file names onto the defaults."""
    overrides = _ensure_mapping(value, "rule_set_files", ALLOWED_RULE_SET_FILE_KEYS)
    files = dict(DEFAULT_RULE_SET_FILES)
    for name, filename in overrides.items():
        filename = _ensure_string(filename, f"rule_set_files.{name}")
        if "/" in filename or "\\" in filename:
            raise ConfigurationError(f"rule_set_files.{name} must be a bare file name, got {filename!r}")
        files[name] = filename

    if len(set(files.values())) != len(files):
        raise ConfigurationError("rule_set_files must name a distinct file for every rule set")
    return files


def _build_priorities(value: Any) -> PriorityTiers:
    """Overlay configured tiers onto the defaults and check their ordering."""
    overrides = _ensure_mapping(value, "priorities", ALLOWED_PRIORITY_KEYS)
    for name, tier in overrides.items():
        if isinstance(tier, bool) or not isinstance(tier, int):
            raise ConfigurationError(f"priorities.{name} must be an integer")

    tiers = PriorityTiers(**{**DEFAULT_PRIORITY_TIERS.as_dict(), **overrides})
    problems = check_priority_tiers(tiers)
    if problems:
        raise ConfigurationError(f"Inconsistent priorities: {'; '.join(problems)}")
    return tiers
