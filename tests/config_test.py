import os

import pytest

from fileserver.config import DEFAULT_HOST, DEFAULT_PORT, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "CONTENT_ROOT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = load_config([])

    assert config.port == DEFAULT_PORT == 8000
    assert config.root == os.path.realpath(tmp_path)
    assert config.host == DEFAULT_HOST
    assert config.log_level == "INFO"


def test_positional_port_and_directory(tmp_path):
    config = load_config(["9090", str(tmp_path / "shared")])

    assert config.port == 9090
    assert config.root == str(tmp_path / "shared")


def test_relative_directory_is_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = load_config(["8001", "files"])
    assert config.root == os.path.join(os.path.realpath(tmp_path), "files")


def test_environment_fills_in(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "7000")
    monkeypatch.setenv("CONTENT_ROOT", str(tmp_path))
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = load_config([])

    assert config == ("127.0.0.1", 7000, str(tmp_path), "DEBUG")


def test_cli_wins_over_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "7000")
    monkeypatch.setenv("CONTENT_ROOT", "/somewhere/else")
    config = load_config(["7001", str(tmp_path)])

    assert config.port == 7001
    assert config.root == str(tmp_path)


def test_bad_port_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        load_config(["not-a-port"])
    assert exc.value.code == 2


def test_bad_port_in_environment_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(SystemExit) as exc:
        load_config([])
    assert exc.value.code == 2
    assert "invalid int value" in capsys.readouterr().err


def test_bad_log_level_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "bogus")
    with pytest.raises(SystemExit) as exc:
        load_config(["8000"])
    assert exc.value.code == 2
    assert "LOG_LEVEL" in capsys.readouterr().err
