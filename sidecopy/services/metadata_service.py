"""Build metadata providers from configured names."""

from __future__ import annotations

from typing import Callable, Sequence

from ..config import SUPPORTED_PROVIDERS
from ..providers.base import MetadataProvider
from ..providers.git import GitRevisionProvider
from ..providers.mercurial import MercurialRevisionProvider
from ..text import Messages

_PROVIDER_FACTORIES: dict[str, Callable[[], MetadataProvider]] = {
    "git": GitRevisionProvider,
    "hg": MercurialRevisionProvider,
}


def normalize_provider_names(values: Sequence[str] | str) -> list[str]:
    """Return lower-cased provider names, accepting comma separated strings."""
    if isinstance(values, str):
        values = [values]
    names: list[str] = []
    for raw in values:
        for token in raw.split(","):
            token = token.strip().lower()
            if not token:
                continue
            if token not in SUPPORTED_PROVIDERS:
                raise ValueError(
                    Messages.ERROR_PROVIDER_UNKNOWN.format(
                        value=token, allowed=", ".join(SUPPORTED_PROVIDERS)
                    )
                )
            names.append(token)
    if not names:
        raise ValueError(Messages.ERROR_PROVIDERS_EMPTY)
    return names


def resolve_providers(names: Sequence[str]) -> list[MetadataProvider]:
    """Instantiate providers for *names*, keeping their order."""
    return [_PROVIDER_FACTORIES[name]() for name in normalize_provider_names(names)]
