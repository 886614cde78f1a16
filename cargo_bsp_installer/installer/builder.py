"""Compilation of the cargo-bsp server binary."""

import subprocess
from pathlib import Path
from typing import Protocol

from loguru import logger

from cargo_bsp_installer.installer.errors import BuildFailure
from cargo_bsp_installer.models.request import BuildArtifact
from cargo_bsp_installer.models.settings import BuildSettings

# Exit status a shell reports for a command it cannot find
COMMAND_NOT_FOUND = 127


class Builder(Protocol):
    """Anything that can produce the server binary."""

    def build(self) -> BuildArtifact:
        """Build the server and return where it was placed.

        Raises:
            BuildFailure: If the build did not succeed
        """
        ...


def artifact_path(workspace_root: Path, settings: BuildSettings) -> Path:
    """Where cargo places the binary for the configured profile."""
    return workspace_root.resolve() / "target" / settings.profile / settings.binary


class CargoBuilder:
    """Runs ``cargo build`` in the installer's workspace."""

    def __init__(self, workspace_root: Path, settings: BuildSettings | None = None):
        """Initialize the builder.

        Args:
            workspace_root: Cargo workspace holding the server crate
            settings: Toolchain, profile and binary name
        """
        self.settings = settings or BuildSettings()
        self.workspace_root = workspace_root.resolve()
        # Fixed now so later cwd changes in the process cannot move it
        self.artifact = BuildArtifact(absolute_path=artifact_path(self.workspace_root, self.settings))

    def command(self) -> list[str]:
        cmd = [self.settings.toolchain, "build"]
        if self.settings.profile == "release":
            cmd.append("--release")
        return cmd

    def build(self) -> BuildArtifact:
        cmd = self.command()
        logger.info(f"Building server: {' '.join(cmd)} (in {self.workspace_root})")

        try:
            result = subprocess.run(cmd, cwd=self.workspace_root, check=False)
        except FileNotFoundError as e:
            raise BuildFailure(f"Build toolchain not found: {self.settings.toolchain}", COMMAND_NOT_FOUND) from e
        except OSError as e:
            raise BuildFailure(f"Cannot run {self.settings.toolchain}: {e}") from e

        if result.returncode != 0:
            # Negative return codes mean the toolchain was killed by a signal
            exit_code = result.returncode if result.returncode > 0 else 128 - result.returncode
            raise BuildFailure(f"Build failed: {' '.join(cmd)} exited with status {result.returncode}", exit_code)

        path = self.artifact.absolute_path
        if not path.exists():
            if self.settings.verify_artifact:
                raise BuildFailure(f"Build succeeded but the server binary is missing: {path}")
            logger.warning(f"Server binary not found at {path}; the discovery file will point there anyway")

        logger.info(f"Server binary: {path}")
        return self.artifact
