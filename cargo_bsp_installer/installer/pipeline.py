"""The install run: arguments, directory, build, discovery file, report."""

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from cargo_bsp_installer.installer.arguments import validate_arguments
from cargo_bsp_installer.installer.builder import Builder
from cargo_bsp_installer.installer.directory import check_directory
from cargo_bsp_installer.installer.emitter import ConfigEmitter
from cargo_bsp_installer.installer.errors import InstallerError
from cargo_bsp_installer.installer.reporter import Reporter
from cargo_bsp_installer.models.request import InstallState


class Installer:
    """Runs each stage in order and stops at the first failure."""

    def __init__(
        self,
        builder: Builder,
        emitter: ConfigEmitter | None = None,
        reporter: Reporter | None = None,
        base_dir: Path | None = None,
    ):
        """Initialize the installer.

        Args:
            builder: Produces the server binary
            emitter: Writes the discovery file
            reporter: Prints the outcome
            base_dir: Directory relative targets are resolved against
        """
        self.builder = builder
        self.emitter = emitter or ConfigEmitter()
        self.reporter = reporter or Reporter()
        self.base_dir = base_dir
        self.state = InstallState.START
        self.config_file: Path | None = None

    def _advance(self, state: InstallState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state

    def run(self, args: Sequence[str], prog: str) -> int:
        """Install into the directory named by ``args``.

        Returns:
            Process exit status
        """
        if self.state.is_terminal:
            raise RuntimeError(f"Installer already finished ({self.state.value})")

        try:
            request = validate_arguments(args, prog)
            self._advance(InstallState.ARGS_CHECKED)

            target_dir = check_directory(request, self.base_dir)
            self._advance(InstallState.DIR_CHECKED)

            artifact = self.builder.build()
            self._advance(InstallState.BUILT)

            config_file = self.emitter.emit(target_dir, artifact.absolute_path)
            self.config_file = config_file
            self._advance(InstallState.CONFIG_WRITTEN)
        except InstallerError as e:
            logger.debug(f"Failed in state {self.state.value}: {e}")
            self._advance(InstallState.FAILED)
            self.reporter.failure(e)
            return e.exit_code

        self.reporter.success(config_file)
        self._advance(InstallState.DONE)
        return 0
