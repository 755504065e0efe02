from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from grid_pathfinder.config.loader import load_config, default_config
from grid_pathfinder.config.models import AppConfig
from grid_pathfinder.utils.global_path import GetConfigPath


@pytest.fixture(autouse=True)
def _no_port_env(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)


def _write(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_defaults_match_reference_deployment():
    cfg = AppConfig()
    assert (cfg.grid.rows, cfg.grid.cols) == (20, 20)
    assert cfg.search.time_limit_ms == 5000
    assert cfg.server.port == 5000
    assert cfg.logging.level == "INFO"


def test_load_config(tmp_path):
    path = _write(tmp_path / "app.yaml", {
        "grid": {"rows": 8, "cols": 12},
        "search": {"time_limit_ms": 250},
        "server": {"host": "127.0.0.1", "port": 8080},
        "logging": {"level": "debug", "file_logging": False},
    })
    cfg = load_config(path)
    assert (cfg.grid.rows, cfg.grid.cols) == (8, 12)
    assert cfg.search.time_limit_ms == 250
    assert cfg.server.host == "127.0.0.1"
    assert cfg.server.port == 8080
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.file_logging is False


def test_partial_config_uses_defaults(tmp_path):
    cfg = load_config(_write(tmp_path / "app.yaml", {"grid": {"rows": 5}}))
    assert cfg.grid.rows == 5
    assert cfg.grid.cols == 20
    assert cfg.search.time_limit_ms == 5000


def test_time_limit_alias(tmp_path):
    cfg = load_config(_write(tmp_path / "app.yaml", {"search": {"timeLimitMs": 100}}))
    assert cfg.search.time_limit_ms == 100


def test_relative_log_dir_resolved_against_program_dir(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    cfg = load_config(_write(config_dir / "config.yaml", {"logging": {"log_dir": "Logs"}}))
    assert Path(cfg.logging.log_dir) == (tmp_path / "Logs").resolve()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_bad_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("grid: [rows: 1\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(path)


@pytest.mark.parametrize("data", [
    {"grid": {"rows": 0}},
    {"grid": {"cols": 65}},
    {"search": {"time_limit_ms": 0}},
    {"server": {"port": 70000}},
    {"logging": {"level": "LOUD"}},
])
def test_invalid_values(tmp_path, data):
    with pytest.raises(ValidationError):
        load_config(_write(tmp_path / "app.yaml", data))


def test_port_env_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    cfg = load_config(_write(tmp_path / "app.yaml", {"server": {"port": 8080}}))
    assert cfg.server.port == 9090


def test_port_env_in_default_config(monkeypatch):
    monkeypatch.setenv("PORT", "7000")
    assert default_config().server.port == 7000


def test_shipped_config_file_loads():
    cfg = load_config(GetConfigPath())
    assert (cfg.grid.rows, cfg.grid.cols) == (20, 20)
    assert cfg.search.time_limit_ms == 5000
