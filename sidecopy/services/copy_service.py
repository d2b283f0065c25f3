"""Logic helpers for the `sidecopy copy`, `update` and `recopy` commands."""

from __future__ import annotations

import os
import shutil
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from ..config import DEFAULT_INDEX_NAME
from ..index import IndexEntry, base_name, index_path, read_index, write_index
from ..providers.base import ProviderLike, as_provider, collect_metadata
from ..text import Messages
from ..utils import is_protected


@dataclass(slots=True)
class CopiedFile:
    source: Path
    destination: Path
    metadata: list[Any] = field(default_factory=list)


@dataclass(slots=True)
class CopyResult:
    directory: Path
    copied: list[CopiedFile] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    index_path: Path | None = None

    @property
    def count(self) -> int:
        return len(self.copied)


@dataclass(slots=True)
class UpdateResult:
    directory: Path
    kept: list[IndexEntry] = field(default_factory=list)
    removed: list[IndexEntry] = field(default_factory=list)
    index_path: Path | None = None


def _ensure_writable_directory(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    if not os.access(directory, os.W_OK):
        raise PermissionError(Messages.ERROR_DIRECTORY_NOT_WRITABLE.format(path=directory))


def _force_remove(path: Path) -> None:
    os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
    path.unlink()


def copy_files(
    files: Sequence[Path | str],
    directory: Path,
    *,
    providers: Sequence[ProviderLike] = (),
    skip_protected: bool = True,
    index_name: str = DEFAULT_INDEX_NAME,
) -> CopyResult:
    """Copy *files* into *directory* and record them in its sidecar index.

    Read-only destinations are skipped entirely when *skip_protected* is set,
    otherwise they are removed before copying. A source named like the index
    file is rejected before anything is copied. Any copy failure, including a
    directory sitting at the destination path, propagates and aborts the
    remaining files; the index is written only when at least one file was
    copied.
    """
    directory = Path(directory)
    result = CopyResult(directory=directory)
    if not files:
        return result

    sources = [Path(raw).expanduser().resolve() for raw in files]
    for source in sources:
        if source.name == index_name:
            raise ValueError(
                Messages.ERROR_SOURCE_NAMED_LIKE_INDEX.format(path=source, name=index_name)
            )

    _ensure_writable_directory(directory)
    resolved_providers = [as_provider(provider) for provider in providers]
    working = read_index(directory, index_name)

    for source in sources:
        destination = directory / base_name(source)
        if destination.is_dir():
            raise IsADirectoryError(
                Messages.ERROR_DESTINATION_IS_DIRECTORY.format(path=destination)
            )
        if is_protected(destination):
            if skip_protected:
                result.skipped.append(destination)
                continue
            _force_remove(destination)
        shutil.copy(source, destination)
        metadata = collect_metadata(resolved_providers, source)
        working.append(IndexEntry(source=str(source), metadata=metadata))
        result.copied.append(CopiedFile(source, destination, metadata))

    if result.copied:
        result.index_path = write_index(directory, working, index_name)
    return result


def update_index(directory: Path, *, index_name: str = DEFAULT_INDEX_NAME) -> UpdateResult:
    """Drop entries whose copy no longer exists in *directory*."""
    directory = Path(directory)
    result = UpdateResult(directory=directory)
    for entry in read_index(directory, index_name):
        if (directory / entry.name).is_file():
            result.kept.append(entry)
        else:
            result.removed.append(entry)
    if index_path(directory, index_name).exists():
        result.index_path = write_index(directory, result.kept, index_name)
    return result


def recopy_files(
    directory: Path,
    *,
    providers: Sequence[ProviderLike] = (),
    skip_protected: bool = True,
    index_name: str = DEFAULT_INDEX_NAME,
) -> CopyResult:
    """Copy every indexed source again, ignoring vanished sources and read-only copies."""
    directory = Path(directory)
    sources: list[Path] = []
    for entry in read_index(directory, index_name):
        source = Path(entry.source)
        if not source.is_file():
            continue
        if is_protected(directory / entry.name):
            continue
        sources.append(source)
    return copy_files(
        sources,
        directory,
        providers=providers,
        skip_protected=skip_protected,
        index_name=index_name,
    )
