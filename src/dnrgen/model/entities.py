"""Dataclass entities for manifest input and DNR rule output."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dnrgen.constants.rules import HEADER_OPERATION_SET
from dnrgen.types import ActionType, JsonObject


@dataclass(frozen=True)
class MatchPattern:
    """A parsed content-script match pattern.

    ``host`` and ``path`` are empty for the special ``<all_urls>`` pattern.
    """

    raw: str
    scheme: str
    host: str
    path: str


@dataclass(frozen=True)
class ContentScriptEntry:
    """One ``content_scripts`` declaration from the extension manifest."""

    script_ids: frozenset[str]
    match_patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class HeaderOperation:
    """A request header modification."""

    header: str
    value: str
    operation: str = HEADER_OPERATION_SET

    def to_dict(self) -> JsonObject:
        """Serialize into the engine's ``requestHeaders`` item shape."""
        return {"header": self.header, "operation": self.operation, "value": self.value}


@dataclass(frozen=True)
class Redirect:
    """Redirect target expressed as a regex substitution."""

    regex_substitution: str

    def to_dict(self) -> JsonObject:
        """Serialize into the engine's ``redirect`` shape."""
        return {"regexSubstitution": self.regex_substitution}


@dataclass(frozen=True)
class RuleAction:
    """What the engine does when a rule matches."""

    type: ActionType
    request_headers: tuple[HeaderOperation, ...] = ()
    redirect: Redirect | None = None

    def to_dict(self) -> JsonObject:
        """Serialize into the engine's ``action`` shape."""
        payload: JsonObject = {"type": self.type}
        if self.request_headers:
            payload["requestHeaders"] = [header.to_dict() for header in self.request_headers]
        if self.redirect is not None:
            payload["redirect"] = self.redirect.to_dict()
        return payload


@dataclass(frozen=True)
class RuleCondition:
    """Request predicate. An empty condition matches every request."""

    resource_types: tuple[str, ...] = ()
    url_filter: str | None = None
    regex_filter: str | None = None

    def to_dict(self) -> JsonObject:
        """Serialize into the engine's ``condition`` shape, omitting unset fields."""
        payload: JsonObject = {}
        if self.resource_types:
            payload["resourceTypes"] = list(self.resource_types)
        if self.url_filter is not None:
            payload["urlFilter"] = self.url_filter
        if self.regex_filter is not None:
            payload["regexFilter"] = self.regex_filter
        return payload


@dataclass(frozen=True)
class Rule:
    """A single static DNR rule."""

    id: int
    priority: int
    action: RuleAction
    condition: RuleCondition = RuleCondition()

    def to_dict(self) -> JsonObject:
        """Serialize into the engine rule schema."""
        return {
            "id": self.id,
            "priority": self.priority,
            "action": self.action.to_dict(),
            "condition": self.condition.to_dict(),
        }


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generator run."""

    rule_sets: dict[str, tuple[Rule, ...]]
    output_dir: Path | None = None
    written: dict[str, Path] = field(default_factory=dict)

    @property
    def counts(self) -> dict[str, int]:
        """Number of rules emitted per rule set, in generation order."""
        return {name: len(rules) for name, rules in self.rule_sets.items()}

    @property
    def total_rules(self) -> int:
        """Total number of rules across all rule sets."""
        return sum(self.counts.values())
