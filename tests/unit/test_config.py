import json

import pytest

from sidecopy import config as config_module
from sidecopy.services import config_service


def _prepare_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    return config_file


def test_load_config_defaults(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)

    cfg = config_module.load_config()

    assert cfg.index_name == config_module.DEFAULT_INDEX_NAME
    assert cfg.skip_protected is True
    assert cfg.providers == ["git"]
    assert cfg.root is None
    assert cfg.last_directory is None


def test_save_and_load_round_trip(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)

    config_module.save_config(
        config_module.Config(
            index_name="prov.json",
            skip_protected=False,
            providers=["hg", "git"],
            root="/data",
            last_directory="/data/out",
        )
    )
    cfg = config_module.load_config()
    stored = json.loads(config_file.read_text())

    assert cfg.index_name == "prov.json"
    assert cfg.skip_protected is False
    assert cfg.providers == ["hg", "git"]
    assert cfg.root == "/data"
    assert cfg.last_directory == "/data/out"
    assert stored["providers"] == ["hg", "git"]


def test_load_config_recovers_from_bad_providers(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)
    config_file.parent.mkdir(parents=True)
    config_file.write_text(json.dumps({"providers": "git", "index_name": ""}))

    cfg = config_module.load_config()

    assert cfg.providers == ["git"]
    assert cfg.index_name == config_module.DEFAULT_INDEX_NAME


def test_set_root_resolves_and_clears(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)

    config_module.set_root(tmp_path / "root")
    assert json.loads(config_file.read_text())["root"] == str((tmp_path / "root").resolve())

    config_module.set_root(None)
    assert "root" not in json.loads(config_file.read_text())


def test_apply_config_updates_reports_changes(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)

    result = config_service.apply_config_updates(
        index_name="prov.json",
        skip_protected=False,
        providers="hg,git",
    )

    assert result.changed is True
    assert result.index_name_set and result.skip_protected_set and result.providers_set
    snapshot = config_service.get_config_snapshot()
    assert snapshot.index_name == "prov.json"
    assert snapshot.skip_protected is False
    assert snapshot.providers == ["hg", "git"]


def test_apply_config_updates_without_changes(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)

    result = config_service.apply_config_updates()

    assert result.changed is False
    assert not config_file.exists()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"index_name": "nested/index.json"},
        {"index_name": ".."},
        {"providers": "svn"},
        {"root": "/tmp", "clear_root": True},
    ],
)
def test_apply_config_updates_rejects_invalid_values(tmp_path, monkeypatch, kwargs):
    config_file = _prepare_config(tmp_path, monkeypatch)

    with pytest.raises(ValueError):
        config_service.apply_config_updates(skip_protected=False, **kwargs)

    assert not config_file.exists()


def test_clear_last_directory(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    config_module.set_last_directory(tmp_path / "out")

    result = config_service.apply_config_updates(clear_last_directory=True)

    assert result.last_directory_cleared is True
    assert config_module.load_config().last_directory is None
