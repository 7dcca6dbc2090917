"""Locate command: report the project root without building."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from bucketbuild import locator, pipeline
from bucketbuild.logging import console

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
    def locate(
        start: Optional[Path] = typer.Argument(
            None,
            help="Directory to search upward from (default: the bucket layout).",
        ),
        bucket: Optional[str] = typer.Option(
            None, "--bucket", "-b", help="Bucket name (overrides $BUCKET_NAME)."
        ),
        cwd: Optional[Path] = typer.Option(
            None, "--cwd", help="Base directory holding the downloads folder."
        ),
        quiet: bool = typer.Option(
            False, "--quiet", "-q", help="Hide per-directory search traces."
        ),
    ) -> None:
        """Print the nearest directory holding the manifest.

        START and --bucket/--cwd are exclusive: START searches from that
        directory, the options search from the bucket layout.
        """
        if start is not None and (bucket is not None or cwd is not None):
            raise typer.BadParameter(
                "START cannot be combined with --bucket or --cwd",
                param_hint="START",
            )

        environ = command_environ(bucket)
        try:
            if start is None:
                pipeline.bucket_name(environ)
            config = load_cli_config()
            apply_trace_setting(config, quiet)
            if start is not None:
                root = locator.require(start, config.build.manifest)
            else:
                layout = pipeline.resolve_layout(
                    environ=environ, cwd=resolve_cwd(cwd), config=config
                )
                root = pipeline.locate_root(layout, config)
        except CLI_ERRORS as exc:
            fail(exc)
        console.print(str(root), markup=False, highlight=False, soft_wrap=True)

    return {"locate": locate}
