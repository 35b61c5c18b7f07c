"""Filesystem helpers used by the scaffolding workflow.

Two error contracts live side by side here:

- folder_exists() and list_files() never raise. They answer False / []
  when the path cannot be inspected.
- create_folder(), remove_folder(), load_json() and save_to_file() raise
  FileOperationError naming the path, so the caller can report it.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

from adkgen.scaffold.errors import FileOperationError


def folder_exists(path: Path) -> bool:
    """Return True if anything, a dangling symlink included, is at path. Never raises."""
    try:
        return path.exists() or path.is_symlink()
    except OSError:
        return False


def create_folder(path: Path) -> None:
    """Create path, including missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileOperationError("create folder", path, exc) from exc


def remove_folder(path: Path) -> None:
    """Recursively delete path. Irreversible."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise FileOperationError("remove folder", path, exc) from exc


def list_files(path: Path) -> list[str]:
    """Return sorted entry names in path, or [] if it cannot be listed."""
    try:
        return sorted(entry.name for entry in path.iterdir())
    except OSError:
        return []


def load_json(path: Path) -> Any:
    """Read and parse a JSON file."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise FileOperationError("read or parse file", path, exc) from exc


def save_to_file(path: Path, data: Any) -> None:
    """Write data to path.

    Strings are written verbatim; anything else is serialized as JSON
    with 2-space indentation.
    """
    content = data if isinstance(data, str) else json.dumps(data, indent=2)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileOperationError("write file", path, exc) from exc
