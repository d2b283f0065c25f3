"""sidecopy package initialization."""

from __future__ import annotations

from .index import IndexEntry, IndexParseError, merge_entries, read_index, write_index
from .providers.base import CallableProvider, MetadataProvider, collect_metadata
from .services.copy_service import (
    CopyResult,
    UpdateResult,
    copy_files,
    recopy_files,
    update_index,
)

__all__ = [
    "__version__",
    "CallableProvider",
    "CopyResult",
    "IndexEntry",
    "IndexParseError",
    "MetadataProvider",
    "UpdateResult",
    "collect_metadata",
    "copy_files",
    "get_version",
    "merge_entries",
    "read_index",
    "recopy_files",
    "update_index",
    "write_index",
]

__version__ = "0.3.0"


def get_version() -> str:
    """Return the current package version."""
    return __version__
