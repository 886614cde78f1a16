"""User-facing installer output."""

from pathlib import Path

from loguru import logger

from cargo_bsp_installer.installer.errors import InstallerError, UsageError
from cargo_bsp_installer.utils.logging_setup import REPORT_CHANNEL


class Reporter:
    """Prints the final outcome of a run on the report channel."""

    def __init__(self) -> None:
        self._log = logger.bind(channel=REPORT_CHANNEL)

    def usage(self, text: str) -> None:
        self._log.info(text.rstrip("\n"))

    def failure(self, error: InstallerError) -> None:
        if isinstance(error, UsageError):
            self.usage(error.usage)
            if str(error) != error.usage:
                self._log.error(str(error))
            return
        self._log.error(str(error))

    def success(self, config_file: Path) -> None:
        self._log.success(f"cargo-bsp installed: {config_file}")
