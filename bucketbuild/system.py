from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass
class CheckResult:
    name: str
    ok: bool
    detail: str = ""


def _run_command(args: List[str]) -> Tuple[bool, str]:
    try:
        proc = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        output = exc.output if isinstance(exc, subprocess.CalledProcessError) else ""
        return False, (output or str(exc))
    return True, proc.stdout.strip()


def check_dependency(
    name: str, version_args: Optional[List[str]] = None
) -> CheckResult:
    if shutil.which(name) is None:
        return CheckResult(name=name, ok=False, detail="not found in PATH")
    if version_args:
        ok, output = _run_command([name] + version_args)
        return CheckResult(name=name, ok=ok, detail=output if ok else "unable to run")
    return CheckResult(name=name, ok=True, detail="available")


def check_env(name: str, environ) -> CheckResult:
    """Report whether an environment variable is set to a non-blank value."""
    value = (environ.get(name) or "").strip()
    if not value:
        return CheckResult(name=f"${name}", ok=False, detail="not set")
    return CheckResult(name=f"${name}", ok=True, detail=value)
