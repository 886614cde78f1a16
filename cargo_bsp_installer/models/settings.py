"""Typed installer settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class DiscoverySettings(BaseModel):
    """Where the discovery file goes and the static values it carries."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    directory: str = ".bsp"
    filename: str = "cargo-bsp.json"
    name: str = "cargo-bsp"
    version: str = "0.1.0"
    bsp_version: str = "2.1.0"
    languages: tuple[str, ...] = ("rust",)

    @field_validator("directory", "filename")
    @classmethod
    def _single_path_component(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"'{value}' must be a single path component")
        return value


class BuildSettings(BaseModel):
    """How the server binary is compiled."""

    model_config = ConfigDict(frozen=True)

    toolchain: str = "cargo"
    profile: Literal["release", "debug"] = "release"
    binary: str = "server"
    verify_artifact: bool = False


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


class InstallerSettings(BaseModel):
    """Complete installer configuration."""

    model_config = ConfigDict(frozen=True)

    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    build: BuildSettings = Field(default_factory=BuildSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
