# kedgify/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (kedgify/config/defaults/default.yaml), always loaded
    2. User config file, if given, overrides defaults

Usage:
    from kedgify.config.loader import load_config

    config = load_config()                       # defaults only
    config = load_config("./kedgify.yaml")       # defaults + user overrides

    patterns = config.resolver.patterns
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from kedgify.config.schema import KedgifyConfig
from kedgify.core.exceptions import ConfigError
from kedgify.logging.logger import get_logger
from kedgify.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults" / "default.yaml"
ROOT_KEY = "kedgify"


def deep_merge(base: dict, override: dict) -> dict:
    """Merge override into a copy of base. Dicts merge recursively, anything else is replaced."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}", path=str(path)) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file {path}: {exc}", path=str(path)) from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping", path=str(path))

    # Files may be wrapped under the root key (as the defaults are) or flat.
    if ROOT_KEY in raw and isinstance(raw[ROOT_KEY], dict):
        raw = raw[ROOT_KEY]
    return raw


def load_config_dict(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """Return the merged raw configuration (defaults + user file)."""
    merged = _read_yaml(DEFAULTS_PATH)

    if path is not None:
        user_path = Path(path)
        if not user_path.is_file():
            raise ConfigError(f"config file not found: {user_path}", path=str(user_path))
        logger.debug(f"{CONFIG} Loading user config from {user_path}")
        merged = deep_merge(merged, _read_yaml(user_path))

    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> KedgifyConfig:
    """
    Load and validate the configuration.

    Raises:
        ConfigError: If the user file is missing, not valid YAML, or does
                     not match the schema.
    """
    raw = load_config_dict(path)
    try:
        return KedgifyConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}", path=str(path) if path else None) from exc
