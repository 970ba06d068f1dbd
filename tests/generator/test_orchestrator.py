"""Tests for end-to-end rule generation."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias
from unittest.mock import patch

import pytest

from dnrgen.constants.config import DEFAULT_GOOGLE_SCRIPT_ID
from dnrgen.exceptions import ConfigurationError, PersistenceError, SerializationError
from dnrgen.generator import generate_all_rule_sets, generate_workspace, serialize_rule_sets
from dnrgen.manifest import load_content_scripts
from dnrgen.model import Rule, RuleAction

ManifestFactory: TypeAlias = Callable[..., dict[str, Any]]
ManifestWriter: TypeAlias = Callable[[Path, dict[str, Any]], Path]


def test_generate_all_rule_sets_order_and_counts(
    google_matches: list[str], make_manifest: ManifestFactory
) -> None:
    content_scripts = load_content_scripts(make_manifest(google_matches))

    rule_sets = generate_all_rule_sets(content_scripts, google_script_id=DEFAULT_GOOGLE_SCRIPT_ID)

    assert list(rule_sets) == ["dnt_policy", "dnt_signal", "gen204", "bypass_redirects"]
    assert {name: len(rules) for name, rules in rule_sets.items()} == {
        "dnt_policy": 1,
        "dnt_signal": 2,
        "gen204": 2,
        "bypass_redirects": 10,
    }
    assert rule_sets["gen204"][1].condition.url_filter == "|https://www.google.de/gen_204^"


def test_generate_all_rule_sets_missing_script_fails() -> None:
    content_scripts = load_content_scripts({"content_scripts": [{"js": ["other.js"], "matches": ["<all_urls>"]}]})

    with pytest.raises(ConfigurationError, match="No content_scripts entry"):
        generate_all_rule_sets(content_scripts, google_script_id=DEFAULT_GOOGLE_SCRIPT_ID)


def test_generate_workspace_writes_all_files(workspace: Path) -> None:
    result = generate_workspace(root=workspace)

    out_dir = workspace / "src" / "data" / "dnr"
    assert result.output_dir == out_dir.resolve()
    assert sorted(path.name for path in out_dir.iterdir()) == [
        "bypass_redirects.json",
        "dnt_policy.json",
        "dnt_signal.json",
        "gen204.json",
    ]
    assert result.counts == {"dnt_policy": 1, "dnt_signal": 2, "gen204": 2, "bypass_redirects": 10}
    assert result.total_rules == 15

    gen204 = json.loads((out_dir / "gen204.json").read_text(encoding="utf-8"))
    assert [rule["id"] for rule in gen204] == [1, 2]
    redirects = json.loads((out_dir / "bypass_redirects.json").read_text(encoding="utf-8"))
    assert [rule["action"]["type"] for rule in redirects[:5]] == ["redirect"] * 4 + ["allow"]


def test_generate_workspace_output_is_byte_identical(workspace: Path) -> None:
    generate_workspace(root=workspace)
    out_dir = workspace / "src" / "data" / "dnr"
    first = {path.name: path.read_bytes() for path in out_dir.iterdir()}

    generate_workspace(root=workspace)
    second = {path.name: path.read_bytes() for path in out_dir.iterdir()}

    assert first == second


def test_generate_workspace_overwrites_stale_files(workspace: Path) -> None:
    out_dir = workspace / "src" / "data" / "dnr"
    out_dir.mkdir(parents=True)
    (out_dir / "gen204.json").write_text('[{"id": 99}]', encoding="utf-8")

    generate_workspace(root=workspace)

    gen204 = json.loads((out_dir / "gen204.json").read_text(encoding="utf-8"))
    assert [rule["id"] for rule in gen204] == [1, 2]


def test_generate_workspace_honours_config(workspace: Path) -> None:
    (workspace / "dnrgen.yaml").write_text(
        "output_dir: build/rules\nrule_set_files:\n  gen204: beacons.json\npriorities:\n  dnt_check_allow: 7\n",
        encoding="utf-8",
    )

    result = generate_workspace(root=workspace)

    out_dir = workspace / "build" / "rules"
    assert result.written["gen204"] == out_dir.resolve() / "beacons.json"
    policy = json.loads((out_dir / "dnt_policy.json").read_text(encoding="utf-8"))
    assert policy[0]["priority"] == 7


def test_generate_workspace_explicit_paths_override_config(
    tmp_path: Path, google_matches: list[str], make_manifest: ManifestFactory, write_manifest: ManifestWriter
) -> None:
    manifest_path = write_manifest(tmp_path / "ext", make_manifest(google_matches))
    out_dir = tmp_path / "out"

    result = generate_workspace(root=tmp_path, manifest_path=manifest_path, output_dir=out_dir)

    assert set(result.written.values()) == {
        out_dir.resolve() / name
        for name in ("dnt_policy.json", "dnt_signal.json", "gen204.json", "bypass_redirects.json")
    }


def test_generate_workspace_dry_run_writes_nothing(workspace: Path) -> None:
    result = generate_workspace(root=workspace, dry_run=True)

    assert result.written == {}
    assert result.counts["bypass_redirects"] == 10
    assert not (workspace / "src" / "data").exists()


def test_generate_workspace_missing_declaration_writes_nothing(tmp_path: Path, write_manifest: ManifestWriter) -> None:
    write_manifest(tmp_path, {"content_scripts": [{"js": ["js/contentscripts/dnt.js"], "matches": ["<all_urls>"]}]})

    with pytest.raises(ConfigurationError, match="No content_scripts entry"):
        generate_workspace(root=tmp_path)

    assert not (tmp_path / "src" / "data").exists()


def test_generate_workspace_empty_host_list(
    tmp_path: Path, make_manifest: ManifestFactory, write_manifest: ManifestWriter
) -> None:
    write_manifest(tmp_path, make_manifest([]))

    result = generate_workspace(root=tmp_path)

    assert result.counts == {"dnt_policy": 1, "dnt_signal": 2, "gen204": 0, "bypass_redirects": 0}
    assert (tmp_path / "src" / "data" / "dnr" / "gen204.json").read_text(encoding="utf-8") == "[]\n"


def test_generate_workspace_stops_at_first_failed_write(workspace: Path) -> None:
    with patch(
        "dnrgen.generator.orchestrator.write_text_atomic",
        side_effect=[None, PersistenceError("disk full")],
    ) as write:
        with pytest.raises(PersistenceError, match="disk full"):
            generate_workspace(root=workspace)

    assert write.call_count == 2


def test_serialize_rule_sets_rejects_duplicate_ids() -> None:
    block = Rule(id=1, priority=1, action=RuleAction(type="block"))

    with pytest.raises(SerializationError, match="RULE001"):
        serialize_rule_sets({"gen204": (block, block)})


def test_serialize_rule_sets_empty_list() -> None:
    assert serialize_rule_sets({"gen204": ()}) == {"gen204": "[]\n"}


def test_generate_workspace_unencodable_host_writes_nothing(
    tmp_path: Path, make_manifest: ManifestFactory, write_manifest: ManifestWriter
) -> None:
    write_manifest(tmp_path, make_manifest(["https://www.google.com/*", "https://www.goo\ud800gle.com/*"]))

    with pytest.raises(SerializationError, match="Cannot encode payload"):
        generate_workspace(root=tmp_path)

    assert not (tmp_path / "src" / "data").exists()
