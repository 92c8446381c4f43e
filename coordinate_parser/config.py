"""Command line settings loaded from ``parser_config.toml``."""

import os
from pathlib import Path

import toml


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""


ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_FILE_PATH = os.environ.get("COORDINATE_PARSER_CONFIG", ROOT_DIR / "parser_config.toml")
CONFIG_FILE = Path(CONFIG_FILE_PATH)

DEFAULT_CONFIG = {
    "output": {
        "precision": 6,
        "separator": ", ",
    },
    "validation": {
        "check_range": False,
    },
}


def load_config(path=None) -> dict:
    """
    Load settings, filling in defaults for anything the file leaves out.

    Args:
        path: Config file to read (defaults to CONFIG_FILE)

    Returns:
        Dict with "output" and "validation" sections

    Raises:
        ConfigError: If the file exists but is not valid TOML
    """
    path = Path(path) if path is not None else CONFIG_FILE
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    if not path.exists():
        return config

    try:
        loaded = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Config read failed: {e}") from e

    for section, values in loaded.items():
        if isinstance(values, dict):
            config.setdefault(section, {}).update(values)
    return config
