"""Shared file I/O helpers."""

from .json_io import dump_json, load_json_file, write_text_atomic

__all__ = ["dump_json", "load_json_file", "write_text_atomic"]
