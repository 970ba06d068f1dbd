"""JSON read/write helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from dnrgen.constants.reporting import JSON_INDENT
from dnrgen.exceptions import PersistenceError, SerializationError


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def dump_json(payload: object) -> str:
    """Render a payload as pretty-printed JSON text with a trailing newline."""
    try:
        text = json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False) + "\n"
        text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode payload as JSON: {exc}") from exc
    return text


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    temp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
        os.replace(temp_name, path)
    except Exception as exc:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        if isinstance(exc, OSError):
            raise PersistenceError(f"Cannot write {path}: {exc}") from exc
        raise
