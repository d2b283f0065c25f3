"""Metadata provider protocol shared by the built-in backends."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Callable, Protocol, Sequence, Union, runtime_checkable

DEFAULT_COMMAND_TIMEOUT = 10.0


@runtime_checkable
class MetadataProvider(Protocol):
    def metadata_for(self, path: Path) -> Any | None:  # pragma: no cover - protocol
        ...


class CallableProvider:
    """Adapt a plain ``callable(path)`` to the provider protocol."""

    def __init__(self, func: Callable[[Path], Any | None]) -> None:
        self._func = func

    def metadata_for(self, path: Path) -> Any | None:
        return self._func(path)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"CallableProvider({name})"


ProviderLike = Union[MetadataProvider, Callable[[Path], Any]]


def as_provider(candidate: ProviderLike) -> MetadataProvider:
    if isinstance(candidate, MetadataProvider):
        return candidate
    return CallableProvider(candidate)


def collect_metadata(providers: Sequence[MetadataProvider], path: Path) -> list[Any]:
    """Query every provider in order and keep the values that are not None."""
    values: list[Any] = []
    for provider in providers:
        value = provider.metadata_for(path)
        if value is not None:
            values.append(value)
    return values


def run_query(command: Sequence[str], *, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> str | None:
    """Run a version-control query and return its stripped stdout.

    An executable that cannot be started, a timeout, a non-zero exit or
    empty output all mean no answer.
    """
    try:
        completed = subprocess.run(
            list(command),
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    if completed.returncode != 0:
        return None
    output = (completed.stdout or "").strip()
    return output or None
