"""Configuration loading for fxjournal.

Settings live in ``config.toml`` inside the app directory,
``~/.config/fxjournal`` unless ``FXJOURNAL_HOME`` points elsewhere.
Missing keys fall back to DEFAULT_CONFIG.
"""

import copy
import logging
import os
from pathlib import Path

import toml

from fxjournal.ledger.state import DEFAULT_INITIAL_CAPITAL, parse_capital

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "FXJOURNAL_HOME"

DEFAULT_CONFIG = {
    "journal": {
        "default_capital": DEFAULT_INITIAL_CAPITAL,
        "currency": "$",
        "db_file": "fxjournal.db",
    },
    "logging": {
        "level": "WARNING",
    },
}


def get_app_dir() -> Path:
    """Get the directory holding the config file and database."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "fxjournal"


def get_config_path() -> Path:
    return get_app_dir() / "config.toml"


def load_config() -> dict:
    """Load configuration merged over the defaults.

    Returns:
        Config dict with every section of DEFAULT_CONFIG present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if not config_path.exists():
        return config

    try:
        user_config = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read %s, using defaults: %s", config_path, e)
        return config

    for section, values in user_config.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)

    capital = parse_capital(config["journal"]["default_capital"])
    if capital is None:
        logger.warning(
            "Invalid journal.default_capital %r, using %s",
            config["journal"]["default_capital"],
            DEFAULT_INITIAL_CAPITAL,
        )
        capital = DEFAULT_INITIAL_CAPITAL
    config["journal"]["default_capital"] = capital

    return config


def create_template_config() -> Path:
    """Write a config file with the default settings.

    Returns:
        Path of the written file.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return config_path


def get_db_path(config: dict) -> Path:
    """Resolve the database file from config, relative to the app dir."""
    db_file = Path(config["journal"]["db_file"]).expanduser()
    if db_file.is_absolute():
        return db_file
    return get_app_dir() / db_file
