"""UI utilities for rich console output."""

from __future__ import annotations

from typing import Iterable

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bucketbuild.builder import BuildResult
from bucketbuild.logging import console
from bucketbuild.system import CheckResult


def show_checks(checks: Iterable[CheckResult]) -> None:
    """Display environment checks in a formatted table."""
    table = Table(title="Environment", show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")
    for check in checks:
        status = "[ok]ok" if check.ok else "[error]missing"
        table.add_row(check.name, status, escape(_first_line(check.detail)))
    console.print(table)


def show_build_output(result: BuildResult) -> None:
    """Render captured build streams, one panel per non-empty stream."""
    if result.stdout.strip():
        console.print(
            Panel(escape(result.stdout.rstrip()), title="stdout", border_style="cyan")
        )
    if result.stderr.strip():
        console.print(
            Panel(escape(result.stderr.rstrip()), title="stderr", border_style="yellow")
        )


def success_panel(message: str) -> None:
    """Display a success message in a green panel."""
    console.print(Panel.fit(f"[ok]{message}[/]", border_style="green"))


def _first_line(detail: str) -> str:
    lines = [line.strip() for line in (detail or "").splitlines() if line.strip()]
    return lines[0] if lines else ""
