"""Built-in default configuration for bucketbuild."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    "build": {
        "manifest": "Cargo.toml",
        "command": ["cargo", "build"],
    },
    "layout": {
        "download_dir": "Downloads",
        "suffix": ["home", "project"],
    },
    "cli": {
        "trace": True,
    },
}
