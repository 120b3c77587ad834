"""Configuration file management for leapcheck."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from leapcheck.domain.models import Year

DEFAULT_RANGE_START = Year(1900)
DEFAULT_RANGE_END = Year(2100)


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "leapcheck" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "range": {"start": DEFAULT_RANGE_START, "end": DEFAULT_RANGE_END},
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_default_range(config_path: Path | None = None) -> tuple[Year, Year]:
    """Get the default year range used by the range command.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Tuple of (start, end). Falls back to 1900-2100 when the file or keys are missing.

    Raises:
        ValueError: If the range section is not a table or a bound is not an integer.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return DEFAULT_RANGE_START, DEFAULT_RANGE_END

    section = config.get("range", {})
    if not isinstance(section, dict):
        raise ValueError(f"range must be a table with start and end, got {section!r}")

    start = section.get("start", DEFAULT_RANGE_START)
    end = section.get("end", DEFAULT_RANGE_END)

    for key, value in (("start", start), ("end", end)):
        # bool is an int subclass; TOML true/false is not a year
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"range.{key} must be an integer, got {value!r}")

    return Year(start), Year(end)
