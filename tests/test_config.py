"""Tests for configuration loading."""

from pathlib import Path

import pytest

from fxjournal.config import (
    DEFAULT_CONFIG,
    create_template_config,
    get_app_dir,
    get_config_path,
    get_db_path,
    load_config,
)


@pytest.fixture
def app_home(tmp_path, monkeypatch) -> Path:
    monkeypatch.setenv("FXJOURNAL_HOME", str(tmp_path))
    return tmp_path


def test_home_override(app_home: Path):
    assert get_app_dir() == app_home
    assert get_config_path() == app_home / "config.toml"


def test_defaults_without_file(app_home: Path):
    assert load_config() == DEFAULT_CONFIG


def test_loaded_config_is_a_copy(app_home: Path):
    config = load_config()
    config["journal"]["currency"] = "€"

    assert DEFAULT_CONFIG["journal"]["currency"] == "$"


def test_template_round_trip(app_home: Path):
    path = create_template_config()

    assert path.exists()
    assert load_config() == DEFAULT_CONFIG


def test_partial_file_merges_over_defaults(app_home: Path):
    (app_home / "config.toml").write_text(
        '[journal]\ndefault_capital = 2500\ncurrency = "€"\n'
    )

    config = load_config()

    assert config["journal"]["default_capital"] == 2500.0
    assert config["journal"]["currency"] == "€"
    assert config["journal"]["db_file"] == "fxjournal.db"
    assert config["logging"]["level"] == "WARNING"


@pytest.mark.parametrize("value", ["-5", "0", '"lots"'])
def test_invalid_default_capital_falls_back(app_home: Path, value: str, caplog):
    (app_home / "config.toml").write_text(f"[journal]\ndefault_capital = {value}\n")

    with caplog.at_level("WARNING", logger="fxjournal.config"):
        config = load_config()

    assert config["journal"]["default_capital"] == 10000.0
    assert "default_capital" in caplog.text


def test_unreadable_file_uses_defaults(app_home: Path, caplog):
    (app_home / "config.toml").write_text("[journal\nbroken = ")

    with caplog.at_level("WARNING", logger="fxjournal.config"):
        config = load_config()

    assert config == DEFAULT_CONFIG
    assert "Could not read" in caplog.text


def test_db_path_relative_to_app_dir(app_home: Path):
    assert get_db_path(load_config()) == app_home / "fxjournal.db"


def test_db_path_absolute(app_home: Path, tmp_path: Path):
    target = tmp_path / "elsewhere" / "trades.db"
    config = load_config()
    config["journal"]["db_file"] = str(target)

    assert get_db_path(config) == target
