"""Rule-set generation pipeline."""

from __future__ import annotations

from dnrgen.generator.orchestrator import (
    generate_all_rule_sets,
    generate_workspace,
    serialize_rule_sets,
    write_rule_sets,
)

__all__ = [
    "generate_all_rule_sets",
    "generate_workspace",
    "serialize_rule_sets",
    "write_rule_sets",
]
