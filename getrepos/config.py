"""
Credentials file loading for get-repos.

"Configuration is just organized preferences. Load them carefully."
"""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models import DEFAULT_GITHUB_HOST, Config

TOKEN_ENV_VAR = "GITHUB_TOKEN"

YAML_SUFFIXES = (".yaml", ".yml")


def _parse(path: Path, text: str) -> Any:
    """Parse the file body as YAML or JSON depending on its extension."""
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse settings file {path}: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not parse settings file {path}: {e}") from e


def _string_field(data: dict[str, Any], key: str, path: Path) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"Field '{key}' in {path} must be a string")
    return value


def config_from_dict(data: Any, path: Path) -> Config:
    """
    Build a Config from a parsed settings record.

    Args:
        data: Parsed file contents
        path: Source file, used in error messages

    Returns:
        The validated configuration

    Raises:
        ConfigError: If the record has the wrong shape
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping at the top level")

    types = data.get("types")
    if types is None:
        types = []
    if not isinstance(types, list) or not all(isinstance(t, str) for t in types):
        raise ConfigError(f"Field 'types' in {path} must be a list of strings")

    backup_dir = _string_field(data, "backup-dir", path)
    if not backup_dir:
        raise ConfigError(f"Field 'backup-dir' in {path} is required")

    token = _string_field(data, "token", path) or os.getenv(TOKEN_ENV_VAR, "")

    return Config(
        token=token,
        backup_dir=Path(backup_dir),
        types=list(types),
        affiliation=_string_field(data, "org", path),
        github_host=_string_field(data, "github-host", path) or DEFAULT_GITHUB_HOST,
    )


def load_config(path: Path | str) -> Config:
    """
    Load the credentials file.

    Args:
        path: JSON (or YAML, by extension) settings file

    Returns:
        The loaded configuration

    Raises:
        ConfigError: If the file does not exist, cannot be read or is malformed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"File, {path}, for settings, does not exist!")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read settings file {path}: {e}") from e

    return config_from_dict(_parse(path, text), path)
