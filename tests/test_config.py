from __future__ import annotations

from pathlib import Path

import pytest

from flat_tree import config as config_module
from flat_tree.config import CONFIG_ENV_VAR, load_config


def test_project_config_file_loads() -> None:
    cfg = load_config(config_module.CONFIG_PATH)

    assert cfg.builder["duplicate_ids"] == "first"
    assert cfg.builder["detect_cycles"] is True
    assert cfg.loader == {"id_field": "id", "parent_field": "parent_id", "children_key": "children"}


def test_partial_config_is_merged_with_defaults(tmp_path: Path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("builder:\n  duplicate_ids: error\ndebug: true\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.builder == {"duplicate_ids": "error", "detect_cycles": True}
    assert cfg.loader["id_field"] == "id"
    assert cfg.debug is True


def test_env_var_selects_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env.yml"
    path.write_text("loader:\n  id_field: key\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().loader["id_field"] == "key"


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yml")


def test_missing_default_config_falls_back(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config_module, "CONFIG_PATH", tmp_path / "absent.yml")

    cfg = load_config()

    assert cfg.builder["duplicate_ids"] == "first"
    assert cfg.debug is False


def test_get_config_is_cached() -> None:
    assert config_module.get_config() is config_module.get_config()
