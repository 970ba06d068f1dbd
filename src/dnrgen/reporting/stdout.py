"""Plain-text stdout reporter for generation results."""

from __future__ import annotations

from dnrgen.constants.reporting import RULE_SET_LABELS
from dnrgen.model import GenerationResult


def _count_line(name: str, count: int) -> str:
    singular, plural = RULE_SET_LABELS.get(name, (f"{name} rule", f"{name} rules"))
    return f"Generated {count} {singular if count == 1 else plural}"


class StdoutReporter:
    """Formats a generation result as human-readable stdout output."""

    def __init__(self, result: GenerationResult, *, verbose: bool = False) -> None:
        self.result = result
        self.verbose = verbose

    def render(self) -> str:
        """Render one count line per rule set followed by the output location."""
        lines = [_count_line(name, count) for name, count in self.result.counts.items()]

        if self.result.written:
            lines.append(f"Wrote {len(self.result.written)} rule files to {self.result.output_dir}")
            if self.verbose:
                lines.extend(f"  {name}: {path}" for name, path in self.result.written.items())
        else:
            lines.append(f"Dry run: no rule files written to {self.result.output_dir}")

        if self.verbose:
            lines.append(f"Total rules: {self.result.total_rules}")
        return "\n".join(lines)
