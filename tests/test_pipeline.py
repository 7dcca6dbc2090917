"""Tests for the locate-then-build orchestration."""

from __future__ import annotations

import sys
from copy import deepcopy
from pathlib import Path

import pytest

from bucketbuild import pipeline
from bucketbuild.builder import BuildError
from bucketbuild.configuration import BucketBuildConfig, ConfigError
from bucketbuild.configuration import loader as loader_module
from bucketbuild.configuration.defaults import DEFAULT_CONFIG_DICT
from bucketbuild.locator import NotFoundError


def _config(command=None) -> BucketBuildConfig:
    data = deepcopy(DEFAULT_CONFIG_DICT)
    if command is not None:
        data["build"]["command"] = list(command)
    return BucketBuildConfig.from_dict(data)


def _unpacked(tmp_path: Path, bucket: str = "abc123") -> Path:
    project = tmp_path / "Downloads" / bucket / "home" / "project"
    project.mkdir(parents=True)
    (project / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
    return project


@pytest.mark.parametrize("environ", [{}, {"BUCKET_NAME": ""}, {"BUCKET_NAME": "  "}])
def test_run_requires_bucket_before_touching_filesystem(environ, monkeypatch):
    def explode(*_args, **_kwargs):
        raise AssertionError("filesystem accessed")

    monkeypatch.setattr(pipeline.locator, "locate", explode)
    monkeypatch.setattr(pipeline, "search_layout", explode)

    with pytest.raises(ConfigError, match="BUCKET_NAME is not defined"):
        pipeline.run(environ=environ, cwd=Path("/nowhere"), config=_config())


def test_run_checks_bucket_before_loading_config(tmp_path, monkeypatch):
    broken = tmp_path / "broken.toml"
    broken.write_text("[build\n", encoding="utf-8")
    monkeypatch.setenv("BUCKETBUILD_CONFIG", str(broken))
    loader_module.locate_config_file.cache_clear()
    loader_module._CONFIG_INSTANCE = None

    with pytest.raises(ConfigError, match="BUCKET_NAME is not defined"):
        pipeline.run(environ={}, cwd=tmp_path)

    with pytest.raises(ConfigError, match="BUCKET_NAME is not defined"):
        pipeline.resolve_layout(environ={"BUCKET_NAME": ""}, cwd=tmp_path)


def test_resolve_layout_builds_download_path(tmp_path):
    layout = pipeline.resolve_layout(
        environ={"BUCKET_NAME": "abc123"}, cwd=tmp_path, config=_config()
    )

    assert layout.bucket == "abc123"
    assert layout.download_root == tmp_path / "Downloads"
    assert layout.start_dir == tmp_path / "Downloads" / "abc123" / "home" / "project"


def test_resolve_layout_honours_custom_layout(tmp_path):
    data = deepcopy(DEFAULT_CONFIG_DICT)
    data["layout"] = {"download_dir": "dl", "suffix": ["src"]}
    config = BucketBuildConfig.from_dict(data)

    layout = pipeline.resolve_layout(
        environ={"BUCKET_NAME": "b1"}, cwd=tmp_path, config=config
    )

    assert layout.start_dir == tmp_path / "dl" / "b1" / "src"


def test_run_builds_located_project(tmp_path):
    project = _unpacked(tmp_path)
    config = _config(
        [sys.executable, "-c", "import os; print('built', os.path.basename(os.getcwd()))"]
    )
    traces: list[str] = []

    result = pipeline.run(
        environ={"BUCKET_NAME": "abc123"},
        cwd=tmp_path,
        config=config,
        trace=traces.append,
    )

    assert result.ok
    assert result.root == project
    assert result.stdout.strip() == "built project"
    assert len(traces) == 1


def test_run_not_found_skips_build(tmp_path, monkeypatch):
    (tmp_path / "Downloads" / "abc123" / "home" / "project").mkdir(parents=True)
    monkeypatch.setattr("bucketbuild.locator.has_manifest", lambda *_: False)

    def no_build(*_args, **_kwargs):
        raise AssertionError("build attempted")

    monkeypatch.setattr("bucketbuild.builder.build", no_build)

    with pytest.raises(NotFoundError) as excinfo:
        pipeline.run(
            environ={"BUCKET_NAME": "abc123"},
            cwd=tmp_path,
            config=_config(),
            trace=lambda _line: None,
        )

    assert excinfo.value.start_dir == tmp_path / "Downloads" / "abc123" / "home" / "project"


def test_run_propagates_build_failure(tmp_path):
    _unpacked(tmp_path)
    config = _config(
        [sys.executable, "-c", "import sys; sys.stderr.write('linker failed'); sys.exit(101)"]
    )

    with pytest.raises(BuildError) as excinfo:
        pipeline.run(
            environ={"BUCKET_NAME": "abc123"},
            cwd=tmp_path,
            config=config,
            trace=lambda _line: None,
        )

    assert excinfo.value.returncode == 101
    assert "linker failed" in excinfo.value.output


def test_run_reads_process_environment(tmp_path, monkeypatch):
    project = _unpacked(tmp_path, bucket="from-env")
    monkeypatch.setenv("BUCKET_NAME", "from-env")
    config = _config([sys.executable, "-c", "pass"])

    result = pipeline.run(cwd=tmp_path, config=config, trace=lambda _line: None)

    assert result.root == project
