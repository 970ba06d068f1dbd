"""Manifest loading and normalization into content-script entries."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dnrgen.exceptions import ConfigurationError
from dnrgen.io import load_json_file
from dnrgen.model import ContentScriptEntry


def load_manifest(path: Path) -> dict[str, Any]:
    """Read and parse an extension ``manifest.json``."""
    try:
        raw = load_json_file(path)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Manifest not found: {path}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read manifest at {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError(f"Invalid JSON manifest at {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Manifest at {path} must be a JSON object")
    return raw


def load_content_scripts(manifest: dict[str, Any]) -> tuple[ContentScriptEntry, ...]:
    """Build content-script entries from the manifest's ``content_scripts`` list."""
    raw_entries = manifest.get("content_scripts", [])
    if not isinstance(raw_entries, list):
        raise ConfigurationError("content_scripts must be a list")

    entries: list[ContentScriptEntry] = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise ConfigurationError(f"content_scripts[{index}] must be an object")
        entries.append(
            ContentScriptEntry(
                script_ids=frozenset(_ensure_string_list(raw.get("js"), f"content_scripts[{index}].js")),
                match_patterns=tuple(_ensure_string_list(raw.get("matches"), f"content_scripts[{index}].matches")),
            )
        )
    return tuple(entries)


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigurationError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{key_name} must be a list of strings")
    return list(value)
