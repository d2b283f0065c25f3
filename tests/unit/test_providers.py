from __future__ import annotations

import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest

from sidecopy.providers import base
from sidecopy.providers.base import CallableProvider, MetadataProvider, as_provider, collect_metadata
from sidecopy.providers.git import GitRevisionProvider
from sidecopy.providers.mercurial import MercurialRevisionProvider
from sidecopy.services import metadata_service


class StaticProvider:
    def __init__(self, value):
        self.value = value
        self.seen: list[Path] = []

    def metadata_for(self, path: Path):
        self.seen.append(path)
        return self.value


def _fake_run_factory(responses: dict[str, tuple[int, str]], calls: list[list[str]]):
    def fake_run(command, check, capture_output, text, timeout):
        calls.append(command)
        key = " ".join(command[3:]) if command[1] in {"-C", "-R"} else command[-1]
        returncode, stdout = responses.get(key, (1, ""))
        return SimpleNamespace(returncode=returncode, stdout=stdout)

    return fake_run


def test_collect_metadata_keeps_order_and_drops_none(tmp_path):
    first = StaticProvider("one")
    missing = StaticProvider(None)
    last = StaticProvider(["two", 2])

    values = collect_metadata([first, missing, last], tmp_path / "a.txt")

    assert values == ["one", ["two", 2]]
    assert missing.seen == [tmp_path / "a.txt"]


def test_as_provider_wraps_plain_callables():
    def revision(path):
        return f"rev:{path.name}"

    provider = as_provider(revision)

    assert isinstance(provider, CallableProvider)
    assert provider.metadata_for(Path("/x/a.txt")) == "rev:a.txt"
    assert "revision" in repr(provider)

    static = StaticProvider("x")
    assert as_provider(static) is static
    assert isinstance(static, MetadataProvider)


def test_run_query_returns_stripped_output(monkeypatch):
    monkeypatch.setattr(
        base.subprocess,
        "run",
        lambda *args, **kwargs: SimpleNamespace(returncode=0, stdout="deadbeef\n"),
    )

    assert base.run_query(["git", "rev-parse", "HEAD"]) == "deadbeef"


@pytest.mark.parametrize(
    "outcome",
    [
        SimpleNamespace(returncode=128, stdout="fatal: not a git repository"),
        SimpleNamespace(returncode=0, stdout="   \n"),
    ],
)
def test_run_query_treats_failure_as_missing(monkeypatch, outcome):
    monkeypatch.setattr(base.subprocess, "run", lambda *args, **kwargs: outcome)

    assert base.run_query(["git", "status"]) is None


@pytest.mark.parametrize(
    "error",
    [FileNotFoundError("git"), subprocess.TimeoutExpired(cmd="git", timeout=1)],
)
def test_run_query_handles_missing_executable_and_timeout(monkeypatch, error):
    def fake_run(*args, **kwargs):
        raise error

    monkeypatch.setattr(base.subprocess, "run", fake_run)

    assert base.run_query(["git", "status"]) is None


def test_git_provider_resolves_root_then_head(tmp_path, monkeypatch):
    calls: list[list[str]] = []
    repo = tmp_path / "repo"
    responses = {
        "rev-parse --show-toplevel": (0, f"{repo}\n"),
        "rev-parse HEAD": (0, "abc123\n"),
    }
    monkeypatch.setattr(base.subprocess, "run", _fake_run_factory(responses, calls))

    value = GitRevisionProvider().metadata_for(repo / "pkg" / "a.txt")

    assert value == "abc123"
    assert calls[0][:3] == ["git", "-C", str((repo / "pkg").resolve())]
    assert calls[1] == ["git", "-C", str(repo), "rev-parse", "HEAD"]


def test_git_provider_outside_repository_returns_none(tmp_path, monkeypatch):
    calls: list[list[str]] = []
    monkeypatch.setattr(base.subprocess, "run", _fake_run_factory({}, calls))

    assert GitRevisionProvider().metadata_for(tmp_path / "a.txt") is None
    assert len(calls) == 1


def test_mercurial_provider_queries_changeset(tmp_path, monkeypatch):
    calls: list[list[str]] = []
    repo = tmp_path / "repo"
    responses = {
        "root": (0, f"{repo}\n"),
        "id -i": (0, "0123abcd+\n"),
    }
    monkeypatch.setattr(base.subprocess, "run", _fake_run_factory(responses, calls))

    assert MercurialRevisionProvider().metadata_for(repo / "a.txt") == "0123abcd+"
    assert calls[1] == ["hg", "-R", str(repo), "id", "-i"]


def test_resolve_providers_builds_in_order():
    providers = metadata_service.resolve_providers(["hg", "git"])

    assert isinstance(providers[0], MercurialRevisionProvider)
    assert isinstance(providers[1], GitRevisionProvider)


def test_normalize_provider_names_accepts_comma_lists():
    assert metadata_service.normalize_provider_names(" Git, hg ") == ["git", "hg"]
    assert metadata_service.normalize_provider_names(["git", "hg,git"]) == ["git", "hg", "git"]


@pytest.mark.parametrize("value", ["svn", ["git", "cvs"], " , "])
def test_normalize_provider_names_rejects_invalid(value):
    with pytest.raises(ValueError):
        metadata_service.normalize_provider_names(value)


def test_run_query_handles_unexecutable_command(monkeypatch):
    def fake_run(*args, **kwargs):
        raise PermissionError(13, "Permission denied", "git")

    monkeypatch.setattr(base.subprocess, "run", fake_run)

    assert base.run_query(["git", "rev-parse", "HEAD"]) is None
    assert GitRevisionProvider().metadata_for(Path("/x/a.txt")) is None
