"""roster.toml discovery and defaults."""

from __future__ import annotations

import logging

import pytest

from roster.config import RosterConfig, init_config, load_config


def test_defaults_without_config(tmp_path):
    cfg = load_config(tmp_path)
    assert cfg.data_path == tmp_path / "user_data" / "user_data.json"
    assert cfg.logging_level() == logging.WARNING


def test_defaults_are_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config()
    assert cfg.data_path.parts[-2:] == ("user_data", "user_data.json")


def test_config_in_start_directory(tmp_path):
    (tmp_path / "roster.toml").write_text(
        '[roster]\ndata_dir = "data"\n\n[logging]\nlevel = "debug"\n'
    )
    cfg = load_config(tmp_path)
    assert cfg.root == tmp_path
    assert cfg.data_path == tmp_path / "data" / "user_data.json"
    assert cfg.logging_level() == logging.DEBUG


def test_parent_config_is_ignored(tmp_path, monkeypatch):
    (tmp_path / "roster.toml").write_text('[roster]\ndata_dir = "elsewhere"\n')
    project = tmp_path / "proj"
    project.mkdir()
    monkeypatch.chdir(project)
    cfg = load_config()
    assert cfg.data_path.resolve() == project.resolve() / "user_data" / "user_data.json"
    assert load_config(project).data_path == project / "user_data" / "user_data.json"


def test_unknown_log_level_falls_back():
    cfg = RosterConfig(root=".", log_level="chatty")
    assert cfg.logging_level() == logging.WARNING


def test_init_config_refuses_overwrite(tmp_path):
    path = init_config(tmp_path)
    assert path.exists()
    assert load_config(tmp_path).data_file == "user_data.json"
    with pytest.raises(FileExistsError):
        init_config(tmp_path)
