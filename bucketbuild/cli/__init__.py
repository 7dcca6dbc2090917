"""Typer application wiring for the bucketbuild command line."""

from __future__ import annotations

import sys

import typer
from rich.markup import escape

from bucketbuild import __description__
from bucketbuild.logging import console

from .commands import build, config, doctor, locate, version
from .common import CLI_ERRORS, COMMAND_CONTEXT, CommandMap, print_version

app = typer.Typer(
    help=__description__,
    context_settings=COMMAND_CONTEXT,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

COMMANDS: CommandMap = {}
for module in (build, locate, doctor, config, version):
    COMMANDS.update(module.register(app))


def _version_callback(value: bool) -> None:
    if value:
        print_version()
        raise typer.Exit()


@app.callback()
def root(
    version_: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Locate an unpacked Cargo project and build it."""


def main() -> None:
    try:
        app()
    except CLI_ERRORS as exc:  # pragma: no cover - commands handle these
        console.print(f"[error]{escape(str(exc))}[/]")
        sys.exit(1)


__all__ = ["app", "main", "COMMANDS"]
