"""Upward search for the directory holding a build manifest."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

from bucketbuild import logging as log
from bucketbuild.paths import ascend

DEFAULT_MANIFEST = "Cargo.toml"

Trace = Callable[[str], None]


class NotFoundError(LookupError):
    """Raised when no ancestor of the start directory holds the manifest."""

    def __init__(self, start_dir: Path, manifest: str = DEFAULT_MANIFEST):
        self.start_dir = start_dir
        self.manifest = manifest
        super().__init__(f"{manifest} not found in {start_dir} or any parent directory")


def has_manifest(directory: Path, manifest: str = DEFAULT_MANIFEST) -> bool:
    """Return True when ``directory/manifest`` is a regular, readable file."""
    candidate = directory / manifest
    return candidate.is_file() and os.access(candidate, os.R_OK)


def locate(
    start_dir: Path,
    manifest: str = DEFAULT_MANIFEST,
    *,
    trace: Optional[Trace] = None,
) -> Optional[Path]:
    """Return the deepest directory at or above ``start_dir`` holding ``manifest``.

    Walks parent by parent and stops at the first match. Returns ``None``
    once the filesystem root has been checked without a match. Only
    existence checks are made; nothing on disk is touched.
    """
    emit = trace or log.trace
    for candidate in ascend(start_dir):
        emit(f"Checking {manifest} in: {candidate / manifest}")
        if has_manifest(candidate, manifest):
            return candidate
        emit(f"Parent directory: {candidate.parent}")
    return None


def require(
    start_dir: Path,
    manifest: str = DEFAULT_MANIFEST,
    *,
    trace: Optional[Trace] = None,
) -> Path:
    """Like :func:`locate` but raise :class:`NotFoundError` on a miss."""
    root = locate(start_dir, manifest, trace=trace)
    if root is None:
        raise NotFoundError(start_dir, manifest)
    return root
