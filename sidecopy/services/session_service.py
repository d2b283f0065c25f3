"""Destination directory resolution with a remembered default."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..config import Config, load_config, set_last_directory
from ..text import Messages
from ..utils import is_within

PromptFn = Callable[[str, str], str]


class DirectoryOutsideRootError(ValueError):
    """Raised when a destination directory escapes the configured root."""


@dataclass(slots=True)
class CopySession:
    last_directory: Path | None = None
    root: Path | None = None

    @classmethod
    def from_config(cls, config: Config) -> "CopySession":
        return cls(
            last_directory=Path(config.last_directory) if config.last_directory else None,
            root=Path(config.root).expanduser().resolve() if config.root else None,
        )

    def default_directory(self) -> Path:
        if self.last_directory is not None:
            if self.root is None or is_within(self.last_directory, self.root):
                return self.last_directory
        if self.root is not None:
            return self.root
        return Path.cwd()


def load_session() -> CopySession:
    return CopySession.from_config(load_config())


def resolve_target_directory(
    session: CopySession,
    directory: Path | str | None,
    prompt: PromptFn,
) -> Path:
    """Return the destination for an operation, prompting when none was given.

    Relative answers are taken relative to the root when one is configured.
    The session remembers the resolved directory.
    """
    if directory is None:
        answer = prompt(Messages.PROMPT_DIRECTORY, str(session.default_directory()))
        directory = answer
    candidate = Path(directory).expanduser()
    if not candidate.is_absolute() and session.root is not None:
        candidate = session.root / candidate
    resolved = candidate.resolve()
    if session.root is not None and not is_within(resolved, session.root):
        raise DirectoryOutsideRootError(
            Messages.ERROR_DIRECTORY_OUTSIDE_ROOT.format(path=resolved, root=session.root)
        )
    session.last_directory = resolved
    return resolved


def remember_session(session: CopySession) -> None:
    """Persist the session's last directory for the next invocation."""
    set_last_directory(session.last_directory)
