"""Git revision metadata for copied files."""

from __future__ import annotations

from pathlib import Path

from .base import DEFAULT_COMMAND_TIMEOUT, run_query


class GitRevisionProvider:
    """Report the HEAD commit of the git repository holding a file."""

    def __init__(self, executable: str = "git", *, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> None:
        self.executable = executable
        self.timeout = timeout

    def repository_root(self, path: Path) -> Path | None:
        parent = Path(path).expanduser().resolve().parent
        output = run_query(
            [self.executable, "-C", str(parent), "rev-parse", "--show-toplevel"],
            timeout=self.timeout,
        )
        return Path(output) if output else None

    def metadata_for(self, path: Path) -> str | None:
        root = self.repository_root(path)
        if root is None:
            return None
        return run_query(
            [self.executable, "-C", str(root), "rev-parse", "HEAD"],
            timeout=self.timeout,
        )
