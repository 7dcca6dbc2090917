"""Build command: locate the project under the bucket download and build it."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from bucketbuild import pipeline, ui
from bucketbuild.logging import status_spinner

from ..common import (
    CLI_ERRORS,
    COMMAND_CONTEXT,
    CommandMap,
    apply_trace_setting,
    command_environ,
    fail,
    load_cli_config,
    resolve_cwd,
)


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def build(
        bucket: Optional[str] = typer.Option(
            None, "--bucket", "-b", help="Bucket name (overrides $BUCKET_NAME)."
        ),
        cwd: Optional[Path] = typer.Option(
            None,
            "--cwd",
            help="Base directory holding the downloads folder (default: cwd).",
            file_okay=False,
        ),
        quiet: bool = typer.Option(
            False, "--quiet", "-q", help="Hide per-directory search traces."
        ),
    ) -> None:
        """Find the nearest manifest above the unpacked bucket and run the build."""
        environ = command_environ(bucket)
        try:
            pipeline.bucket_name(environ)
        except CLI_ERRORS as exc:
            fail(exc)

        config = load_cli_config()
        apply_trace_setting(config, quiet)
        label = " ".join(config.build.command)
        try:
            with status_spinner(f"Running {label}"):
                result = pipeline.run(
                    environ=environ, cwd=resolve_cwd(cwd), config=config
                )
        except CLI_ERRORS as exc:
            fail(exc)

        ui.success_panel(f"build complete: {escape(str(result.root))}")

    return {"build": build}
