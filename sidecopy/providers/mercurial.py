"""Mercurial revision metadata for copied files."""

from __future__ import annotations

from pathlib import Path

from .base import DEFAULT_COMMAND_TIMEOUT, run_query


class MercurialRevisionProvider:
    """Report the working-copy changeset id of the hg repository holding a file."""

    def __init__(self, executable: str = "hg", *, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> None:
        self.executable = executable
        self.timeout = timeout

    def repository_root(self, path: Path) -> Path | None:
        parent = Path(path).expanduser().resolve().parent
        output = run_query(
            [self.executable, "--cwd", str(parent), "root"],
            timeout=self.timeout,
        )
        return Path(output) if output else None

    def metadata_for(self, path: Path) -> str | None:
        root = self.repository_root(path)
        if root is None:
            return None
        return run_query(
            [self.executable, "-R", str(root), "id", "-i"],
            timeout=self.timeout,
        )
