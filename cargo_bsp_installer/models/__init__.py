"""Data models for the installer."""

from .discovery import DiscoveryDocument
from .request import BuildArtifact, InstallRequest, InstallState
from .settings import BuildSettings, DiscoverySettings, InstallerSettings, LoggingSettings

__all__ = [
    "BuildArtifact",
    "BuildSettings",
    "DiscoveryDocument",
    "DiscoverySettings",
    "InstallRequest",
    "InstallState",
    "InstallerSettings",
    "LoggingSettings",
]
