from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

from rich.markup import escape

from .logging import console

DEFAULT_COMMAND: Tuple[str, ...] = ("cargo", "build")


@dataclass(frozen=True)
class BuildResult:
    """Captured outcome of one build process."""

    root: Path
    command: Tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Both streams joined, stdout first, for diagnostics."""
        parts = (self.stdout.strip(), self.stderr.strip())
        return "\n".join(part for part in parts if part)


class BuildError(RuntimeError):
    """Raised when the build command cannot start or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        root: Path,
        command: Sequence[str],
        result: Optional[BuildResult] = None,
    ):
        super().__init__(message)
        self.root = root
        self.command = tuple(command)
        self.result = result

    @property
    def returncode(self) -> Optional[int]:
        return self.result.returncode if self.result else None

    @property
    def output(self) -> str:
        return self.result.output if self.result else ""


@dataclass(frozen=True)
class BuildRequest:
    """A located project root plus the command that builds it."""

    root: Path
    command: Tuple[str, ...] = DEFAULT_COMMAND

    def run(self, env: Optional[Mapping[str, str]] = None) -> BuildResult:
        return build(self.root, self.command, env=env)


def _format_command(command: Sequence[str]) -> str:
    return " ".join(command)


def build(
    root: Path,
    command: Sequence[str] = DEFAULT_COMMAND,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> BuildResult:
    """Run ``command`` inside ``root`` and wait for it to finish.

    Both output streams are captured. A non-zero exit raises
    :class:`BuildError` with the captured result attached.
    """
    command = tuple(command)
    if not command:
        raise BuildError("build command is empty", root=root, command=command)
    label = _format_command(command)
    if not root.is_dir():
        raise BuildError(
            f"build root is not a directory: {root}", root=root, command=command
        )

    console.print(
        f"[info]Starting {escape(label)} in: {escape(str(root))}[/]", highlight=False
    )
    try:
        proc = subprocess.run(
            list(command),
            cwd=root,
            env=dict(env) if env is not None else None,
            text=True,
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise BuildError(
            f"Error executing {label}: {exc}", root=root, command=command
        ) from exc

    result = BuildResult(
        root=root,
        command=command,
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )
    if not result.ok:
        raise BuildError(
            f"Error executing {label}: exited with code {result.returncode}",
            root=root,
            command=command,
            result=result,
        )
    if result.stdout:
        console.print(
            f"[info]Build stdout:[/] {escape(result.stdout.rstrip())}", highlight=False
        )
    if result.stderr:
        console.print(
            f"[warn]Build stderr:[/] {escape(result.stderr.rstrip())}", highlight=False
        )
    return result
