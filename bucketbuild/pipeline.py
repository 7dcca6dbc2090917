"""Locate-then-build orchestration for an unpacked bucket tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from rich.markup import escape

from bucketbuild import locator
from bucketbuild.builder import BuildRequest, BuildResult
from bucketbuild.configuration import BucketBuildConfig, ConfigError, get_config
from bucketbuild.locator import Trace
from bucketbuild.logging import console
from bucketbuild.paths import SearchLayout, search_layout

BUCKET_ENV = "BUCKET_NAME"


def bucket_name(environ: Optional[Mapping[str, str]] = None) -> str:
    """Read ``BUCKET_NAME``, raising ConfigError when unset or blank."""
    env = os.environ if environ is None else environ
    value = (env.get(BUCKET_ENV) or "").strip()
    if not value:
        raise ConfigError(f"{BUCKET_ENV} is not defined")
    return value


def resolve_layout(
    *,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
    config: Optional[BucketBuildConfig] = None,
) -> SearchLayout:
    """Compute ``<cwd>/<download_dir>/<bucket>/<suffix...>``.

    The bucket is checked before the config file is read.
    """
    bucket = bucket_name(environ)
    config = config or get_config()
    return search_layout(
        cwd if cwd is not None else Path.cwd(),
        bucket,
        download_dir=config.layout.download_dir,
        suffix=config.layout.suffix,
    )


def locate_root(
    layout: SearchLayout,
    config: BucketBuildConfig,
    *,
    trace: Optional[Trace] = None,
) -> Path:
    """Search upward from the layout start; raise NotFoundError on a miss."""
    manifest = config.build.manifest
    console.print(
        f"[info]Starting search for {manifest} from:[/] {escape(str(layout.start_dir))}",
        highlight=False,
    )
    return locator.require(layout.start_dir, manifest, trace=trace)


def run(
    *,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
    config: Optional[BucketBuildConfig] = None,
    trace: Optional[Trace] = None,
) -> BuildResult:
    """Locate the project under the bucket download and build it once.

    Raises ConfigError, NotFoundError or BuildError; none are retried.
    """
    bucket_name(environ)
    config = config or get_config()
    layout = resolve_layout(environ=environ, cwd=cwd, config=config)
    root = locate_root(layout, config, trace=trace)
    request = BuildRequest(root=root, command=tuple(config.build.command))
    return request.run()
