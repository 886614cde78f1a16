"""Installer stages."""

from .arguments import validate_arguments
from .builder import Builder, CargoBuilder
from .directory import check_directory
from .emitter import ConfigEmitter
from .errors import BuildFailure, DirectoryNotFoundError, FilesystemError, InstallerError, UsageError
from .pipeline import Installer
from .reporter import Reporter

__all__ = [
    "BuildFailure",
    "Builder",
    "CargoBuilder",
    "ConfigEmitter",
    "DirectoryNotFoundError",
    "FilesystemError",
    "Installer",
    "InstallerError",
    "Reporter",
    "UsageError",
    "check_directory",
    "validate_arguments",
]
