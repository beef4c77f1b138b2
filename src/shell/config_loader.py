"""Configuration Loader - Imperative Shell.

This module handles loading display strings from the bundled YAML
resource file. All I/O is contained here.

Models (Config, DisplayStrings) are defined in src/core/config.py
to avoid information leakage between layers.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config, DisplayStrings, validate_config


logger = logging.getLogger(__name__)


# Bundled display strings
DEFAULT_STRINGS_PATH = Path(__file__).resolve().parent.parent / "resources" / "strings.yaml"


def _parse_strings(data: dict[str, Any]) -> DisplayStrings:
    """Parse display strings, keeping defaults for missing or null keys."""
    defaults = DisplayStrings()

    def label(key: str) -> str:
        value = data.get(key)
        return getattr(defaults, key) if value is None else str(value)

    return DisplayStrings(
        alert_no=label("alert_no"),
        alert_yes=label("alert_yes"),
        alert_not_available=label("alert_not_available"),
    )


def load_strings(strings_path: str | Path | None = None) -> DisplayStrings:
    """Load display strings from a YAML file.

    This method performs file I/O.

    Args:
        strings_path: Path to YAML strings file (bundled file if None)

    Returns:
        Parsed DisplayStrings (defaults if the file is missing or empty)

    Raises:
        yaml.YAMLError: If the file is invalid YAML
    """
    path = Path(strings_path) if strings_path is not None else DEFAULT_STRINGS_PATH

    if not path.exists():
        logger.warning("Strings file not found: %s, using defaults", path)
        return DisplayStrings()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Strings file is empty, using defaults")
        return DisplayStrings()

    if not isinstance(data, dict):
        logger.warning("Strings file %s is not a mapping, using defaults", path)
        return DisplayStrings()

    return _parse_strings(data)


def load_config(strings_path: str | Path | None = None) -> Config:
    """Load the application configuration.

    Args:
        strings_path: Path to YAML strings file (bundled file if None)

    Returns:
        Config with loaded display strings
    """
    config = Config(strings=load_strings(strings_path))

    result = validate_config(config)
    for error in result.errors:
        logger.warning("Config %s: %s (%s)", error.field, error.message, error.severity)

    return config
