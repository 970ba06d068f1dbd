"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "dnrgen"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: compile static declarativeNetRequest rule files from an extension manifest"
