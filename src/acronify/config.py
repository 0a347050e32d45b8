"""
Configuration management for Acronify.

Uses XDG base directories:
- Config: ~/.config/acronify/config.toml
- Data: ~/acronify/ (the slot database lives here)
"""

from pathlib import Path
from typing import Any
import os

from acronify.errors import ConfigError

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_DATA_HOME = Path.home() / "acronify"

# Name of the slot holding the serialized record collection
DEFAULT_SLOT = "acronify_data"


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/acronify)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "acronify"


def get_acronify_home() -> Path:
    """Get the acronify data directory (~/acronify or ACRONIFY_HOME)."""
    if env_home := os.environ.get("ACRONIFY_HOME"):
        return Path(env_home)
    return DEFAULT_DATA_HOME


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_db_path() -> Path:
    """Get the path to acronify.db."""
    return get_acronify_home() / "acronify.db"


def ensure_dirs() -> None:
    """Ensure all required directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_acronify_home().mkdir(parents=True, exist_ok=True)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist. Sections present in the
    file are layered over the defaults one key at a time.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        return get_default_config()

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            user_config = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e

    config = get_default_config()
    for section, values in user_config.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "acronify": {
            "home": str(get_acronify_home()),
        },
        "generation": {
            "min_latency": 1.0,
            "max_latency": 3.0,
            "summary_words": 150,
        },
        "store": {
            "slot": DEFAULT_SLOT,
            "min_latency": 0.2,
            "max_latency": 0.5,
        },
        "lexicon": {
            "path": None,  # TOML file with stop_words / synonyms tables
        },
    }
