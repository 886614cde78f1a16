"""Installer error types. Each one ends the run with its exit code."""


class InstallerError(Exception):
    """Base class for failures reported to the user."""

    exit_code = 1


class UsageError(InstallerError):
    """Bad or missing command line arguments."""

    def __init__(self, usage: str, message: str | None = None) -> None:
        self.usage = usage
        super().__init__(message or usage)


class DirectoryNotFoundError(InstallerError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory not found: {path}")


class BuildFailure(InstallerError):
    """The build toolchain failed. Carries the toolchain's exit status."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class FilesystemError(InstallerError):
    """The discovery directory or file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")
