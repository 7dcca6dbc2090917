from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, NoReturn, Optional

import typer
from rich.markup import escape
from typer.models import CommandFunctionType

from bucketbuild import __version__, ui
from bucketbuild.builder import BuildError
from bucketbuild.configuration import BucketBuildConfig, ConfigError, reload_config
from bucketbuild.locator import NotFoundError
from bucketbuild.logging import console, set_trace_enabled
from bucketbuild.pipeline import BUCKET_ENV

HELP_OPTION_NAMES = ["-h", "--help"]
COMMAND_CONTEXT = {"help_option_names": HELP_OPTION_NAMES}

DOCTOR_REMEDIATIONS = {
    "cargo": "Install the Rust toolchain: https://rustup.rs",
    f"${BUCKET_ENV}": "Export the name of the downloaded bucket.",
}

CLI_ERRORS = (ConfigError, NotFoundError, BuildError)

# Command name to handler, as returned by each command module's register()
CommandMap = Dict[str, CommandFunctionType]


def load_cli_config() -> BucketBuildConfig:
    """Load configuration, turning errors into a clean exit."""
    try:
        return reload_config()
    except ConfigError as exc:
        fail(exc)


def refresh_cli_context() -> None:
    """Drop cached configuration and restore default trace output."""
    reload_config()
    set_trace_enabled(True)


def apply_trace_setting(config: BucketBuildConfig, quiet: bool) -> None:
    set_trace_enabled(config.cli.trace and not quiet)


def command_environ(bucket: Optional[str]) -> Dict[str, str]:
    """Process environment, with ``--bucket`` taking precedence."""
    environ = dict(os.environ)
    if bucket is not None:
        environ[BUCKET_ENV] = bucket
    return environ


def resolve_cwd(cwd: Optional[Path]) -> Path:
    return cwd if cwd is not None else Path.cwd()


def fail(exc: Exception) -> NoReturn:
    """Print a domain error and exit with status 1."""
    console.print(f"[error]{escape(str(exc))}[/]")
    if isinstance(exc, BuildError) and exc.result is not None:
        ui.show_build_output(exc.result)
    raise typer.Exit(code=1)


def print_version() -> None:
    console.print(f"[bold]bucketbuild[/bold] [accent]v{__version__}[/]")
