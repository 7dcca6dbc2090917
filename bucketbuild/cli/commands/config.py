"""Config command for showing where settings come from."""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from bucketbuild.configuration import locate_config_file
from bucketbuild.logging import console

from ..common import COMMAND_CONTEXT, CommandMap, load_cli_config


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def config() -> None:
        """Show the config file in use and the effective settings."""
        effective = load_cli_config()
        path = locate_config_file()
        console.print(
            f"[info]Config file:[/] {escape(str(path)) if path else '[muted]none (built-in defaults)[/]'}"
        )

        table = Table(title="Settings", header_style="bold cyan")
        table.add_column("Key")
        table.add_column("Value")
        for section, values in effective.to_dict().items():
            for key, value in values.items():
                if isinstance(value, list):
                    value = " ".join(str(item) for item in value)
                table.add_row(f"{section}.{key}", str(value))
        console.print(table)

    return {"config": config}
