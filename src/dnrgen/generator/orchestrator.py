"""End-to-end rule generation for dnrgen.

A run is all-or-nothing: every rule set is generated, checked and encoded
before the first file is written.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from dnrgen.config import load_config
from dnrgen.constants.config import (
    DEFAULT_GOOGLE_SCRIPT_ID,
    RULE_SET_BYPASS_REDIRECTS,
    RULE_SET_DNT_POLICY,
    RULE_SET_DNT_SIGNAL,
    RULE_SET_GEN204,
)
from dnrgen.constants.reporting import RULES_TEMP_PREFIX, RULES_TEMP_SUFFIX
from dnrgen.exceptions import SerializationError
from dnrgen.exceptions.validation import ValidationError, format_errors
from dnrgen.io import dump_json, write_text_atomic
from dnrgen.manifest import extract_google_hosts, load_content_scripts, load_manifest
from dnrgen.model import ContentScriptEntry, GenerationResult, Rule
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers
from dnrgen.rules import (
    build_dnt_policy_rule,
    build_dnt_signal_rules,
    build_gen204_block_rules,
    build_google_redirect_rules,
    check_rule_list,
)

logger = logging.getLogger(__name__)


def generate_all_rule_sets(
    content_scripts: Sequence[ContentScriptEntry],
    *,
    google_script_id: str = DEFAULT_GOOGLE_SCRIPT_ID,
    priorities: PriorityTiers = DEFAULT_PRIORITY_TIERS,
) -> dict[str, tuple[Rule, ...]]:
    """Build every rule set in generation order."""
    rule_sets: dict[str, tuple[Rule, ...]] = {
        RULE_SET_DNT_POLICY: build_dnt_policy_rule(priorities),
        RULE_SET_DNT_SIGNAL: build_dnt_signal_rules(priorities),
    }

    hosts = extract_google_hosts(content_scripts, google_script_id)
    logger.debug("Found %d Google hosts for %s", len(hosts), google_script_id)

    rule_sets[RULE_SET_GEN204] = build_gen204_block_rules(hosts, priorities)
    rule_sets[RULE_SET_BYPASS_REDIRECTS] = build_google_redirect_rules(hosts, priorities)
    return rule_sets


def serialize_rule_sets(rule_sets: Mapping[str, Sequence[Rule]]) -> dict[str, str]:
    """Check and encode each rule set as a JSON document."""
    errors: list[ValidationError] = []
    for name, rules in rule_sets.items():
        errors.extend(check_rule_list(name, rules))
    if errors:
        raise SerializationError(f"Generated rule lists are malformed:\n{format_errors(errors)}")

    return {name: dump_json([rule.to_dict() for rule in rules]) for name, rules in rule_sets.items()}


def write_rule_sets(
    documents: Mapping[str, str],
    output_dir: Path,
    rule_set_files: Mapping[str, str],
) -> dict[str, Path]:
    """Overwrite each rule set's file with its encoded document.

    Stops at the first failed write.
    """
    written: dict[str, Path] = {}
    for name, content in documents.items():
        path = output_dir / rule_set_files[name]
        write_text_atomic(
            path=path,
            content=content,
            temp_prefix=RULES_TEMP_PREFIX,
            temp_suffix=RULES_TEMP_SUFFIX,
        )
        logger.info("Wrote %s", path)
        written[name] = path
    return written


def generate_workspace(
    *,
    root: Path,
    config_path: Path | None = None,
    manifest_path: Path | None = None,
    output_dir: Path | None = None,
    dry_run: bool = False,
) -> GenerationResult:
    """Generate and write all rule files for an extension workspace."""
    root = root.resolve()
    config = load_config(root, config_path)

    manifest_file = manifest_path.resolve() if manifest_path else config.manifest_path(root)
    out_dir = output_dir.resolve() if output_dir else config.output_path(root)

    content_scripts = load_content_scripts(load_manifest(manifest_file))
    rule_sets = generate_all_rule_sets(
        content_scripts,
        google_script_id=config.google_script,
        priorities=config.priorities,
    )
    documents = serialize_rule_sets(rule_sets)

    if dry_run:
        logger.info("Dry run: no rule files written")
        return GenerationResult(rule_sets=rule_sets, output_dir=out_dir)

    written = write_rule_sets(documents, out_dir, config.rule_set_files)
    return GenerationResult(rule_sets=rule_sets, output_dir=out_dir, written=written)
