"""Configuration loading, merging, and caching."""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib

from pydantic import ValidationError

from .defaults import DEFAULT_CONFIG_DICT
from .errors import ConfigError
from .schema import BucketBuildConfig

CONFIG_ENV = "BUCKETBUILD_CONFIG"


@lru_cache(maxsize=1)
def locate_config_file() -> Optional[Path]:
    """Locate the configuration file using the documented priority order."""
    env_override = os.environ.get(CONFIG_ENV)
    if env_override:
        path = Path(env_override).expanduser()
        if not path.exists():
            raise ConfigError(f"{CONFIG_ENV} points to missing file: {path}")
        return path.resolve()

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        candidate = Path(xdg_home).expanduser() / "bucketbuild" / "config.toml"
        if candidate.exists():
            return candidate.resolve()

    candidate = Path.home() / ".config" / "bucketbuild" / "config.toml"
    if candidate.exists():
        return candidate.resolve()

    return None


def load_toml(path: Path) -> Dict[str, Any]:
    """Load a TOML file with helpful error reporting."""
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:  # pragma: no cover - file permission/path errors
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge dictionaries, returning a new dict."""
    result: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config() -> BucketBuildConfig:
    """Load and validate the effective configuration."""
    config_data = copy.deepcopy(DEFAULT_CONFIG_DICT)
    if config_path := locate_config_file():
        config_data = merge_configs(config_data, load_toml(config_path))
    try:
        return BucketBuildConfig.from_dict(config_data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


_CONFIG_INSTANCE: Optional[BucketBuildConfig] = None


def get_config() -> BucketBuildConfig:
    """Get the cached configuration object."""
    global _CONFIG_INSTANCE
    if _CONFIG_INSTANCE is None:
        _CONFIG_INSTANCE = load_config()
    return _CONFIG_INSTANCE


def reload_config() -> BucketBuildConfig:
    """Force reload configuration from disk."""
    global _CONFIG_INSTANCE
    locate_config_file.cache_clear()
    _CONFIG_INSTANCE = load_config()
    return _CONFIG_INSTANCE
