"""Utility helpers for filesystem access and path handling."""

from __future__ import annotations

import os
import stat
from pathlib import Path


def resolve_directory(path: Path | str) -> Path:
    """Resolve and validate a user supplied directory path."""
    dir_path = Path(path).expanduser().resolve()
    if not dir_path.exists():
        raise FileNotFoundError(f"Directory does not exist: {dir_path}")
    if not dir_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {dir_path}")
    return dir_path


def is_protected(path: Path) -> bool:
    """Return True when *path* exists but must not be overwritten."""
    if not path.exists():
        return False
    if not os.access(path, os.W_OK):
        return True
    # access() always grants root write permission; honour the mode bits too.
    return not path.stat().st_mode & stat.S_IWUSR


def is_within(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def format_path(path: Path, base: Path | None = None) -> str:
    """Return a user friendly representation of *path* relative to *base* when possible."""
    if base:
        try:
            relative = path.relative_to(base)
            if relative == Path("."):
                return "."
            return f"./{relative.as_posix()}"
        except ValueError:
            return str(path)
    return str(path)
