"""Predictor configuration and setting resolution."""

import os
from pathlib import Path

import yaml

DEFAULTS = {
    "command": "cd",
    "tokenizer": "separators",
    "last_component": "partial",
    "suggestion": "verbatim",
    "strategy": "ordered",
    "limit": 10,
    "refresh_interval": 120,
    "zoxide": "zoxide",
    "verbosity": 1,
}

CHOICES = {
    "tokenizer": ("separators", "separators_and_space"),
    "last_component": ("exact", "partial"),
    "suggestion": ("verbatim", "query"),
    "strategy": ("ordered", "prefix"),
}

INTEGER_KEYS = ("limit", "refresh_interval", "verbosity")


def get_config_dir() -> Path:
    """Config directory, honouring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "zpredict"


def get_config_file() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> dict:
    """Load config from the config file (empty dict if missing or unreadable)."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        data = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Save config to the config file."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    get_config_file().write_text(yaml.dump(config, default_flow_style=False))


def validate_setting(key: str, value):
    """Check and coerce a setting value.

    Returns the coerced value, raises ValueError for unknown keys or
    values outside the allowed range.
    """
    if key not in DEFAULTS:
        raise ValueError(f"Unknown setting: {key}")

    if key in CHOICES:
        value = str(value).lower()
        if value not in CHOICES[key]:
            allowed = ", ".join(CHOICES[key])
            raise ValueError(f"Invalid value for {key}: {value} (expected one of: {allowed})")
        return value

    if key in INTEGER_KEYS:
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Setting {key} must be an integer") from None
        if key == "verbosity" and not 0 <= value <= 3:
            raise ValueError("Verbosity level must be between 0 and 3")
        if key != "verbosity" and value < 1:
            raise ValueError(f"Setting {key} must be at least 1")
        return value

    value = str(value).strip()
    if not value:
        raise ValueError(f"Setting {key} cannot be empty")
    return value


def get_setting(key: str, config: dict | None = None):
    """Get a setting with its built-in default.

    Invalid values in the config file fall back to the default rather
    than failing every suggestion request.
    """
    if config is None:
        config = load_config()
    if key not in config or config[key] is None:
        return DEFAULTS[key]
    try:
        return validate_setting(key, config[key])
    except ValueError:
        return DEFAULTS[key]


def set_setting(key: str, value) -> None:
    """Validate and save a single setting."""
    value = validate_setting(key, value)
    config = load_config()
    config[key] = value
    save_config(config)


def get_zoxide_binary() -> str:
    """Get the frecency tool binary with resolution priority.

    Priority:
    1. ZPREDICT_ZOXIDE environment variable
    2. Config file
    3. "zoxide" on PATH
    """
    env_bin = os.environ.get("ZPREDICT_ZOXIDE")
    if env_bin:
        return env_bin
    return get_setting("zoxide")


def get_verbosity() -> int:
    """Get verbosity level from config (default: 1).

    Levels:
    - 0: Silent (only errors)
    - 1: Normal (standard output)
    - 2: Verbose (refresh and acquisition details)
    - 3: Debug (skipped lines, feedback callbacks)
    """
    return get_setting("verbosity")


def set_verbosity(level: int) -> None:
    """Save verbosity level to config file (0-3)."""
    set_setting("verbosity", level)
