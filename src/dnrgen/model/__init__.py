"""Core data models for dnrgen."""

from .entities import (
    ContentScriptEntry,
    GenerationResult,
    HeaderOperation,
    MatchPattern,
    Redirect,
    Rule,
    RuleAction,
    RuleCondition,
)

__all__ = [
    "ContentScriptEntry",
    "GenerationResult",
    "HeaderOperation",
    "MatchPattern",
    "Redirect",
    "Rule",
    "RuleAction",
    "RuleCondition",
]
