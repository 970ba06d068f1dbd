"""Shared pytest fixtures for extension workspaces and manifests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

import pytest

from dnrgen.constants.config import DEFAULT_GOOGLE_SCRIPT_ID

ManifestFactory: TypeAlias = Callable[..., dict[str, Any]]
ManifestWriter: TypeAlias = Callable[[Path, dict[str, Any]], Path]


def _make_manifest(google_matches: list[str], *, extra_scripts: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Build a minimal MV3 manifest with a Google first-party content script."""
    content_scripts: list[dict[str, Any]] = [
        {"matches": ["<all_urls>"], "js": ["js/contentscripts/dnt.js"], "run_at": "document_start"},
        {"matches": google_matches, "js": ["js/firstparties/lib/utils.js", DEFAULT_GOOGLE_SCRIPT_ID]},
    ]
    content_scripts.extend(extra_scripts or [])
    return {"manifest_version": 3, "name": "Test Extension", "content_scripts": content_scripts}


def _write_manifest(root: Path, manifest: dict[str, Any]) -> Path:
    """Write a manifest to the default ``src/manifest.json`` location under *root*."""
    path = root / "src" / "manifest.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def make_manifest() -> ManifestFactory:
    """Return the manifest builder."""
    return _make_manifest


@pytest.fixture()
def write_manifest() -> ManifestWriter:
    """Return the manifest writer."""
    return _write_manifest


@pytest.fixture()
def google_matches() -> list[str]:
    """Match patterns for the Google content script, including ones the extractor skips."""
    return [
        "https://www.google.com/*",
        "https://www.google.de/*",
        "http://www.google.com/*",
        "https://google.com/*",
        "https://www.youtube.com/feed/*",
    ]


@pytest.fixture()
def workspace(tmp_path: Path, google_matches: list[str]) -> Path:
    """Return an extension workspace root holding a default manifest."""
    _write_manifest(tmp_path, _make_manifest(google_matches))
    return tmp_path
