"""
BSP connection details written to the discovery file.

An IDE reads ``.bsp/<name>.json`` to learn how to spawn the build server. The
field names on disk follow the BSP connection protocol, which uses camelCase.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cargo_bsp_installer.models.settings import DiscoverySettings


class DiscoveryDocument(BaseModel):
    """How to start a BSP server and which languages it supports."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    argv: list[str] = Field(min_length=1, max_length=1)
    version: str
    bsp_version: str = Field(alias="bspVersion")
    languages: list[str]

    @field_validator("languages")
    @classmethod
    def _unique_languages(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("languages must not contain duplicates")
        return value

    @classmethod
    def for_server(cls, server_path: str, settings: DiscoverySettings) -> "DiscoveryDocument":
        """Build the document that launches the server binary at ``server_path``."""
        return cls(
            name=settings.name,
            argv=[server_path],
            version=settings.version,
            bsp_version=settings.bsp_version,
            languages=list(settings.languages),
        )

    def to_json(self) -> str:
        """Serialize with the on-disk field names."""
        return self.model_dump_json(by_alias=True, indent=2) + "\n"
