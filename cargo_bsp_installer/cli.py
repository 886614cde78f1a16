"""Command line entry point: ``cargo-bsp-install DIRECTORY``."""

import sys
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from cargo_bsp_installer.config import load_settings
from cargo_bsp_installer.installer import CargoBuilder, ConfigEmitter, Installer, Reporter, UsageError
from cargo_bsp_installer.installer.arguments import validate_arguments
from cargo_bsp_installer.utils.logging_setup import configure_logging


def main(argv: Sequence[str] | None = None, prog: str | None = None) -> int:
    """Build the server in the current directory and register it in DIRECTORY."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = prog or Path(sys.argv[0]).name

    # Config problems are only logged after the real sinks are in place
    configure_logging()

    # Usage comes first, even when the configuration is broken
    try:
        validate_arguments(args, prog)
    except UsageError as e:
        Reporter().failure(e)
        return e.exit_code

    try:
        settings = load_settings()
    except ValueError as e:
        logger.error(str(e))
        return 1
    configure_logging(settings.logging.level)

    # Paths are fixed against the invocation directory before any stage runs
    workspace_root = Path.cwd()
    installer = Installer(
        builder=CargoBuilder(workspace_root, settings.build),
        emitter=ConfigEmitter(settings.discovery),
        reporter=Reporter(),
        base_dir=workspace_root,
    )
    return installer.run(args, prog)


if __name__ == "__main__":
    sys.exit(main())
