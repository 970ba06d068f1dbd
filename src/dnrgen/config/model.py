"""Config data model for dnrgen runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dnrgen.constants.config import (
    DEFAULT_GOOGLE_SCRIPT_ID,
    DEFAULT_MANIFEST_PATH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_RULE_SET_FILES,
)
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers


@dataclass(frozen=True)
class GeneratorConfig:
    """Resolved generator config."""

    manifest: str = DEFAULT_MANIFEST_PATH
    output_dir: str = DEFAULT_OUTPUT_DIR
    google_script: str = DEFAULT_GOOGLE_SCRIPT_ID
    rule_set_files: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_RULE_SET_FILES))
    priorities: PriorityTiers = DEFAULT_PRIORITY_TIERS

    def manifest_path(self, root: Path) -> Path:
        """Manifest location resolved against the workspace root."""
        return (root / self.manifest).resolve()

    def output_path(self, root: Path) -> Path:
        """Output directory resolved against the workspace root."""
        return (root / self.output_dir).resolve()
