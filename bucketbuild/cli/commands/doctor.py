"""Doctor command for environment diagnostics and dependency checks."""

from __future__ import annotations

import os

import typer

from bucketbuild import ui
from bucketbuild.logging import console
from bucketbuild.pipeline import BUCKET_ENV
from bucketbuild.system import check_dependency, check_env

from ..common import (
    COMMAND_CONTEXT,
    DOCTOR_REMEDIATIONS,
    CommandMap,
    load_cli_config,
)


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def doctor() -> None:
        """Check that the build tool and bucket variable are available."""
        config = load_cli_config()
        program = config.build.command[0]
        checks = [
            check_dependency(program, ["--version"]),
            check_env(BUCKET_ENV, os.environ),
        ]
        ui.show_checks(checks)

        missing = [check for check in checks if not check.ok]
        if missing:
            console.print("[error]Missing requirements detected:[/]")
            for check in missing:
                guidance = DOCTOR_REMEDIATIONS.get(
                    check.name, "Install it or ensure it is set."
                )
                console.print(f"[error]- {check.name}[/] {guidance}")
            raise typer.Exit(code=1)

        ui.success_panel("doctor complete: environment ready.")

    return {"doctor": doctor}
