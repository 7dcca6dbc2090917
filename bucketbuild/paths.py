"""Helpers for resolving where an unpacked bucket tree is searched from."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True)
class SearchLayout:
    """Resolved starting point for a project search."""

    download_root: Path
    bucket: str
    start_dir: Path


def absolute(path: Path) -> Path:
    """Make ``path`` absolute against the cwd without resolving symlinks."""
    path = Path(path).expanduser()
    return path if path.is_absolute() else Path.cwd() / path


def search_layout(
    base: Path,
    bucket: str,
    download_dir: str = "Downloads",
    suffix: Sequence[str] = ("home", "project"),
) -> SearchLayout:
    """Build ``<base>/<download_dir>/<bucket>/<suffix...>``; pure path math."""
    download_root = absolute(base) / download_dir
    return SearchLayout(
        download_root=download_root,
        bucket=bucket,
        start_dir=download_root.joinpath(bucket, *suffix),
    )


def ascend(start: Optional[Path] = None) -> Iterator[Path]:
    """Yield ``start`` (default: cwd) and each parent up to the filesystem root."""
    current = absolute(start) if start is not None else Path.cwd()
    while True:
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent
