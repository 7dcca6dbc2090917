"""Public interface for the bucketbuild configuration system."""

from __future__ import annotations

from .errors import ConfigError
from .loader import (
    get_config,
    load_config,
    locate_config_file,
    merge_configs,
    reload_config,
)
from .schema import BucketBuildConfig

__all__ = [
    "BucketBuildConfig",
    "ConfigError",
    "get_config",
    "load_config",
    "locate_config_file",
    "merge_configs",
    "reload_config",
]
