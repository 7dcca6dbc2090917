from __future__ import annotations

import pytest
from typer.testing import CliRunner

from bucketbuild.cli.common import refresh_cli_context
from bucketbuild.configuration import loader as loader_module


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep config lookups away from the real home directory per test."""

    monkeypatch.delenv("BUCKETBUILD_CONFIG", raising=False)
    monkeypatch.delenv("BUCKET_NAME", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    loader_module.locate_config_file.cache_clear()
    refresh_cli_context()
    yield
    loader_module.locate_config_file.cache_clear()
    loader_module._CONFIG_INSTANCE = None


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def traces():
    """Collect locator trace lines instead of printing them."""
    lines: list[str] = []
    return lines
