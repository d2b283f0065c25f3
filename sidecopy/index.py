"""Sidecar index persistence for copied files.

Each destination directory carries one JSON index file listing, per copied
file, the source path it came from and the metadata collected at copy time.
Entries are keyed by base filename so a moved source tree still maps onto
the same copies.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from .config import DEFAULT_INDEX_NAME
from .text import Messages


class IndexParseError(ValueError):
    """Raised when a sidecar index exists but does not hold a valid entry list."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(Messages.ERROR_INDEX_PARSE.format(path=path, reason=reason))
        self.path = path
        self.reason = reason


@dataclass(slots=True)
class IndexEntry:
    source: str
    metadata: list[Any] = field(default_factory=list)

    @property
    def name(self) -> str:
        return base_name(self.source)

    def to_payload(self) -> dict[str, Any]:
        return {"source": self.source, "metadata": list(self.metadata)}


def base_name(path: Path | str) -> str:
    """Return the final component of *path*."""
    return Path(path).name


def index_path(directory: Path, index_name: str = DEFAULT_INDEX_NAME) -> Path:
    return Path(directory) / index_name


def _entry_from_payload(raw: object, path: Path, position: int) -> IndexEntry:
    if not isinstance(raw, dict):
        raise IndexParseError(path, f"entry {position} is not an object")
    source = raw.get("source")
    metadata = raw.get("metadata", [])
    if not isinstance(source, str) or not source:
        raise IndexParseError(path, f"entry {position} has no source path")
    if not isinstance(metadata, list):
        raise IndexParseError(path, f"entry {position} metadata is not a list")
    return IndexEntry(source=source, metadata=list(metadata))


def read_index(
    directory: Path, index_name: str = DEFAULT_INDEX_NAME
) -> list[IndexEntry]:
    """Load the entries stored for *directory*; a missing index is empty."""
    path = index_path(directory, index_name)
    if not path.exists():
        return []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise IndexParseError(path, str(exc)) from exc
    if not isinstance(raw, list):
        raise IndexParseError(path, "top-level value is not a list")
    return [_entry_from_payload(item, path, pos) for pos, item in enumerate(raw)]


def merge_entries(entries: Iterable[IndexEntry]) -> list[IndexEntry]:
    """Deduplicate *entries* by base filename and sort them.

    For every base filename the winning source path is the one seen last.
    Among entries carrying that winning path, the last one is kept so a
    re-copy replaces the metadata recorded by an earlier copy.
    """
    items = list(entries)
    winners: dict[str, str] = {}
    for entry in items:
        winners[entry.name] = entry.source

    chosen: dict[str, IndexEntry] = {}
    for entry in items:
        if winners[entry.name] == entry.source:
            chosen[entry.name] = entry
    return [chosen[name] for name in sorted(set(winners))]


def serialize_entries(entries: Sequence[IndexEntry]) -> str:
    if not entries:
        return "[]\n"
    lines = [
        json.dumps(entry.to_payload(), ensure_ascii=False, sort_keys=True)
        for entry in entries
    ]
    return "[\n" + ",\n".join(f"  {line}" for line in lines) + "\n]\n"


def _atomic_write_text(path: Path, content: str) -> None:
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(content, encoding="utf-8", newline="\n")
    os.replace(tmp, path)


def write_index(
    directory: Path,
    entries: Iterable[IndexEntry],
    index_name: str = DEFAULT_INDEX_NAME,
) -> Path:
    """Merge *entries* and replace the sidecar index of *directory*."""
    path = index_path(directory, index_name)
    _atomic_write_text(path, serialize_entries(merge_entries(entries)))
    return path
