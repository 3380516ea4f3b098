from __future__ import annotations

import os
from pathlib import Path

import pytest

from bingo_sim.config import resolve_parameters


def test_defaults_without_config():
    resolved, cfg = resolve_parameters(config_path_str=None, cli_overrides={}, env={})
    assert cfg is None
    assert resolved["input_pattern"] == "day{day}.txt"
    assert resolved["log_level"] == "INFO"
    assert Path(resolved["input_dir"]) == (Path.cwd() / "input").resolve()
    assert resolved["log_file"] is None


def test_env_precedence_over_config(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("log_level: WARNING\ninput_pattern: 'd{day}.in'\n", encoding="utf-8")
    monkeypatch.setenv("BINGO_SIM_LOG_LEVEL", "DEBUG")

    resolved, cfg_path = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={}, env=os.environ
    )
    assert resolved["log_level"] == "DEBUG"
    assert resolved["input_pattern"] == "d{day}.in"
    assert cfg_path == cfg.resolve()


def test_cli_precedence_over_env(monkeypatch):
    monkeypatch.setenv("BINGO_SIM_LOG_LEVEL", "DEBUG")
    resolved, _ = resolve_parameters(
        config_path_str=None, cli_overrides={"log_level": "ERROR"}, env=os.environ
    )
    assert resolved["log_level"] == "ERROR"


def test_unset_cli_values_do_not_override(tmp_path: Path):
    cfg = tmp_path / "config.json"
    cfg.write_text('{"log_level": "WARNING"}', encoding="utf-8")
    resolved, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={"log_level": None}, env={}
    )
    assert resolved["log_level"] == "WARNING"


def test_path_normalization_cli_vs_config(tmp_path: Path, monkeypatch):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    cfg = cfg_dir / "conf.yaml"
    cfg.write_text("input_dir: puzzles\nlog_file: run.log\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    resolved, _ = resolve_parameters(
        config_path_str=str(cfg),
        cli_overrides={"log_file": "cli.log"},
        env={},
    )
    assert Path(resolved["input_dir"]) == (cfg_dir / "puzzles").resolve()
    assert Path(resolved["log_file"]) == (tmp_path / "cli.log").resolve()


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        resolve_parameters(config_path_str=str(tmp_path / "nope.yaml"), cli_overrides={}, env={})


def test_unsupported_config_extension(tmp_path: Path):
    cfg = tmp_path / "config.toml"
    cfg.write_text("log_level = 'DEBUG'\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(cfg), cli_overrides={}, env={})


def test_non_mapping_yaml(tmp_path: Path):
    cfg = tmp_path / "config.yml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(cfg), cli_overrides={}, env={})
