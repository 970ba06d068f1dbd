"""Shared type aliases for dnrgen."""

from .common import ActionType, JsonObject, JsonScalar, JsonValue

__all__ = [
    "ActionType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
