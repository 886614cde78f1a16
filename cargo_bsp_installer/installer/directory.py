"""Target directory check."""

from pathlib import Path

from loguru import logger

from cargo_bsp_installer.installer.errors import DirectoryNotFoundError
from cargo_bsp_installer.models.request import InstallRequest


def check_directory(request: InstallRequest, base_dir: Path | None = None) -> Path:
    """Resolve the requested target to an existing directory.

    Args:
        request: Validated install request
        base_dir: Directory relative targets are resolved against (defaults to cwd)

    Returns:
        Absolute path of the target directory

    Raises:
        DirectoryNotFoundError: If the path is missing or not a directory
    """
    # Taken literally; the shell has already expanded "~"
    target = Path(request.target_directory)
    if not target.is_absolute():
        target = (base_dir or Path.cwd()) / target

    try:
        resolved = target.resolve()
    except (OSError, RuntimeError) as e:
        logger.error(f"Cannot resolve {request.target_directory}: {e}")
        raise DirectoryNotFoundError(request.target_directory) from e

    if not resolved.is_dir():
        raise DirectoryNotFoundError(request.target_directory)

    logger.debug(f"Target directory: {resolved}")
    return resolved
