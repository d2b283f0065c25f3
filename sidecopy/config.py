"""Global configuration management for sidecopy."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Sequence

DEFAULT_CONFIG_DIR = Path(os.path.expanduser("~")) / ".sidecopy"
CONFIG_DIR = DEFAULT_CONFIG_DIR
CONFIG_FILE = CONFIG_DIR / "config.json"
DEFAULT_INDEX_NAME = ".sidecopy-index.json"
DEFAULT_PROVIDERS: tuple[str, ...] = ("git",)
SUPPORTED_PROVIDERS: tuple[str, ...] = ("git", "hg")


@dataclass
class Config:
    index_name: str = DEFAULT_INDEX_NAME
    skip_protected: bool = True
    providers: list[str] = field(default_factory=lambda: list(DEFAULT_PROVIDERS))
    root: str | None = None
    last_directory: str | None = None


def _coerce_providers(raw: object) -> list[str]:
    if not isinstance(raw, list):
        return list(DEFAULT_PROVIDERS)
    names = [str(item).strip().lower() for item in raw if str(item).strip()]
    return names or list(DEFAULT_PROVIDERS)


def load_config() -> Config:
    if not CONFIG_FILE.exists():
        return Config()
    raw = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    return Config(
        index_name=(raw.get("index_name") or DEFAULT_INDEX_NAME).strip(),
        skip_protected=bool(raw.get("skip_protected", True)),
        providers=_coerce_providers(raw.get("providers")),
        root=raw.get("root") or None,
        last_directory=raw.get("last_directory") or None,
    )


def save_config(config: Config) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data: Dict[str, Any] = {}
    data["index_name"] = config.index_name or DEFAULT_INDEX_NAME
    data["skip_protected"] = bool(config.skip_protected)
    data["providers"] = list(config.providers)
    if config.root:
        data["root"] = config.root
    if config.last_directory:
        data["last_directory"] = config.last_directory
    CONFIG_FILE.write_text(
        json.dumps(data, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def set_root(value: Path | str | None) -> None:
    config = load_config()
    config.root = str(Path(value).expanduser().resolve()) if value else None
    save_config(config)


def set_index_name(value: str) -> None:
    config = load_config()
    config.index_name = value
    save_config(config)


def set_skip_protected(value: bool) -> None:
    config = load_config()
    config.skip_protected = bool(value)
    save_config(config)


def set_providers(values: Sequence[str]) -> None:
    config = load_config()
    config.providers = list(values)
    save_config(config)


def set_last_directory(value: Path | str | None) -> None:
    config = load_config()
    config.last_directory = str(value) if value else None
    save_config(config)
