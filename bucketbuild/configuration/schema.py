"""Pydantic models describing the effective configuration."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class BuildConfig(_Section):
    manifest: str = Field(default="Cargo.toml", min_length=1)
    command: List[str] = Field(default_factory=lambda: ["cargo", "build"], min_length=1)

    @field_validator("manifest")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("manifest must be a bare filename")
        return value

    @field_validator("command")
    @classmethod
    def _non_blank_program(cls, value: List[str]) -> List[str]:
        if not value[0].strip():
            raise ValueError("command program must not be blank")
        return value


class LayoutConfig(_Section):
    download_dir: str = "Downloads"
    suffix: List[str] = Field(default_factory=lambda: ["home", "project"])


class CLIConfig(_Section):
    trace: bool = True


class BucketBuildConfig(_Section):
    build: BuildConfig = Field(default_factory=BuildConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BucketBuildConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
