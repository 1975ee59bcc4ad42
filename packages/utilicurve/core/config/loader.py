"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from utilicurve.core.config.models import AppConfig

logger = logging.getLogger(__name__)

# Default app config path (can be overridden)
DEFAULT_APP_CONFIG_PATH = Path("utilicurve.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    with path.open("r", encoding="utf-8") as f:
        if fmt == "json":
            try:
                content = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        else:
            try:
                # safe_load returns None for empty files
                content = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to utilicurve.yaml in the working directory.

    Returns:
        Validated AppConfig. When no path is given and utilicurve.yaml is
        absent, all defaults.

    Raises:
        FileNotFoundError: If an explicitly given path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        if not DEFAULT_APP_CONFIG_PATH.exists():
            logger.debug(f"No config file at {DEFAULT_APP_CONFIG_PATH}, using defaults")
            return AppConfig()
        path = DEFAULT_APP_CONFIG_PATH

    return AppConfig.model_validate(load_config(path))
