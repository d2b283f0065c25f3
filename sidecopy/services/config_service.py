"""Logic helpers for the `sidecopy config` command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..config import (
    Config,
    load_config,
    set_index_name,
    set_last_directory,
    set_providers,
    set_root,
    set_skip_protected,
)
from ..text import Messages
from .metadata_service import normalize_provider_names


@dataclass(slots=True)
class ConfigUpdateResult:
    root_set: bool = False
    root_cleared: bool = False
    index_name_set: bool = False
    skip_protected_set: bool = False
    providers_set: bool = False
    last_directory_cleared: bool = False

    @property
    def changed(self) -> bool:
        return any(
            (
                self.root_set,
                self.root_cleared,
                self.index_name_set,
                self.skip_protected_set,
                self.providers_set,
                self.last_directory_cleared,
            )
        )


def validate_index_name(value: str) -> str:
    name = value.strip()
    if not name or name in {".", ".."} or Path(name).name != name:
        raise ValueError(Messages.ERROR_INDEX_NAME_INVALID.format(value=value))
    return name


def apply_config_updates(
    *,
    root: Path | str | None = None,
    clear_root: bool = False,
    index_name: str | None = None,
    skip_protected: bool | None = None,
    providers: Sequence[str] | str | None = None,
    clear_last_directory: bool = False,
) -> ConfigUpdateResult:
    """Apply config mutations and report which fields were updated."""

    if root is not None and clear_root:
        raise ValueError(Messages.ERROR_ROOT_CONFLICT)
    # Validate everything before touching the config file.
    name = validate_index_name(index_name) if index_name is not None else None
    provider_names = (
        normalize_provider_names(providers) if providers is not None else None
    )

    result = ConfigUpdateResult()
    if root is not None:
        set_root(root)
        result.root_set = True
    if clear_root:
        set_root(None)
        result.root_cleared = True
    if name is not None:
        set_index_name(name)
        result.index_name_set = True
    if skip_protected is not None:
        set_skip_protected(skip_protected)
        result.skip_protected_set = True
    if provider_names is not None:
        set_providers(provider_names)
        result.providers_set = True
    if clear_last_directory:
        set_last_directory(None)
        result.last_directory_cleared = True
    return result


def get_config_snapshot() -> Config:
    """Return the current configuration dataclass."""

    return load_config()
