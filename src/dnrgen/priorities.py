"""Named DNR priority tiers and their cross-list ordering checks.

The engine resolves conflicts between rules from different rule lists by
priority, so the tiers used by independently generated lists must keep a
fixed order. ``check_priority_tiers`` enforces that order whenever tiers are
loaded from configuration.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from dnrgen.constants.config import (
    PRIORITY_BLOCK,
    PRIORITY_DNT_CHECK_ALLOW,
    PRIORITY_DNT_HEADER,
    PRIORITY_REDIRECT,
    PRIORITY_REDIRECT_ENCODED_ALLOW,
)


@dataclass(frozen=True)
class PriorityTiers:
    """Priority value for each kind of generated rule."""

    dnt_check_allow: int = PRIORITY_DNT_CHECK_ALLOW
    dnt_header: int = PRIORITY_DNT_HEADER
    block: int = PRIORITY_BLOCK
    redirect: int = PRIORITY_REDIRECT
    redirect_encoded_allow: int = PRIORITY_REDIRECT_ENCODED_ALLOW

    def as_dict(self) -> dict[str, int]:
        """Return tier values keyed by tier name."""
        return asdict(self)


DEFAULT_PRIORITY_TIERS = PriorityTiers()


def check_priority_tiers(tiers: PriorityTiers) -> list[str]:
    """Return a message for every violated tier invariant; empty when consistent."""
    problems: list[str] = []
    values = tiers.as_dict()

    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            problems.append(f"{name} must be a positive integer, got {value!r}")
    if problems:
        return problems

    if tiers.redirect_encoded_allow <= tiers.redirect:
        problems.append(
            f"redirect_encoded_allow ({tiers.redirect_encoded_allow}) must be higher than redirect ({tiers.redirect})"
        )

    for name in ("dnt_header", "block", "redirect", "redirect_encoded_allow"):
        if tiers.dnt_check_allow <= values[name]:
            problems.append(f"dnt_check_allow ({tiers.dnt_check_allow}) must be higher than {name} ({values[name]})")

    return problems
