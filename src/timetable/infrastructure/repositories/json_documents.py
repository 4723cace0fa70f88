"""Helpers for reading and writing JSON documents on disk."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def read_document(file_path: Path) -> Any | None:
    """Return the decoded JSON stored at ``file_path`` or ``None`` when missing."""

    if not file_path.exists():
        return None
    with file_path.open("r", encoding="utf-8") as input_file:
        return json.load(input_file)


def write_document(file_path: Path, data: Any) -> None:
    """Serialize ``data`` to ``file_path`` replacing any previous content atomically."""

    file_path.parent.mkdir(parents=True, exist_ok=True)
    descriptor, temp_name = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(descriptor, "w", encoding="utf-8") as output_file:
            json.dump(data, output_file, ensure_ascii=False, indent=2)
        os.replace(temp_name, file_path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
