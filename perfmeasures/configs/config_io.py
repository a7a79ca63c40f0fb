"""Configuration file I/O (YAML/JSON load/save as dict)."""

import json
import os
from typing import Any

import yaml

from perfmeasures.utils.errors import ConfigError


def ensure_parent_dir(filepath: str) -> None:
    """Create parent directory of filepath if needed."""
    parent = os.path.dirname(filepath) or "."
    os.makedirs(parent, exist_ok=True)


def _require_mapping(data: Any, filepath: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {filepath}")
    return data


def _read_text(filepath: str) -> str:
    """Read a config file as UTF-8 text, raising ConfigError if it cannot be read."""
    try:
        with open(filepath, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {filepath}: {e}") from e


def load_yaml_file(filepath: str) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Args:
        filepath: Path to YAML file

    Returns:
        Loaded config as dict; empty dict if file is empty
    """
    text = _read_text(filepath)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {filepath}: {e}") from e
    return _require_mapping(data, filepath)


def load_json_file(filepath: str) -> dict[str, Any]:
    """Load a JSON file into a dictionary.

    Args:
        filepath: Path to JSON file

    Returns:
        Loaded config as dict; empty dict if file is empty
    """
    text = _read_text(filepath)
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {filepath}: {e}") from e
    return _require_mapping(data, filepath)


def save_yaml_file(filepath: str, data: dict[str, Any]) -> None:
    """Save a dictionary to a YAML file."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False)


def save_json_file(filepath: str, data: dict[str, Any], indent: int = 2) -> None:
    """Save a dictionary to a JSON file."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
