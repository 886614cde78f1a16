"""Writing the BSP discovery file into the target project."""

import contextlib
import os
import tempfile
from pathlib import Path

from loguru import logger

from cargo_bsp_installer.installer.errors import FilesystemError
from cargo_bsp_installer.models.discovery import DiscoveryDocument
from cargo_bsp_installer.models.settings import DiscoverySettings


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


class ConfigEmitter:
    """Creates ``<target>/.bsp`` and writes the connection file into it."""

    def __init__(self, settings: DiscoverySettings | None = None):
        self.settings = settings or DiscoverySettings()

    def config_dir(self, target_dir: Path) -> Path:
        return target_dir / self.settings.directory

    def config_file(self, target_dir: Path) -> Path:
        return self.config_dir(target_dir) / self.settings.filename

    def ensure_config_dir(self, target_dir: Path) -> Path:
        """Create the hidden config directory. An existing one is fine.

        Raises:
            FilesystemError: If the directory cannot be created
        """
        config_dir = self.config_dir(target_dir)
        try:
            config_dir.mkdir(exist_ok=True)
        except FileExistsError as e:
            raise FilesystemError(str(config_dir), "exists and is not a directory") from e
        except OSError as e:
            logger.error(f"Failed to create {config_dir}: {e}")
            raise FilesystemError(str(config_dir), e.strerror or str(e)) from e
        return config_dir

    def write_document(self, target_dir: Path, document: DiscoveryDocument) -> Path:
        """Replace the discovery file with ``document``.

        The content goes to a temporary file next to the destination and is
        renamed over it, so readers see either the old or the new document.

        Args:
            target_dir: Absolute path of the target project
            document: Document to write

        Returns:
            Path of the written file

        Raises:
            FilesystemError: If the file cannot be written
        """
        config_dir = self.ensure_config_dir(target_dir)
        destination = config_dir / self.settings.filename
        tmp_path = None

        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=config_dir,
                prefix=f".{self.settings.filename}.",
                suffix=".tmp",
                delete=False,
            ) as tmp_file:
                tmp_path = Path(tmp_file.name)
                tmp_file.write(document.to_json())
            # NamedTemporaryFile creates 0600; use the mode open() would give
            tmp_path.chmod(0o666 & ~_current_umask())
            os.replace(tmp_path, destination)
        except OSError as e:
            logger.error(f"Failed to write {destination}: {e}")
            if tmp_path and tmp_path.exists():
                with contextlib.suppress(OSError):
                    tmp_path.unlink()
            raise FilesystemError(str(destination), e.strerror or str(e)) from e

        logger.info(f"Wrote {destination}")
        return destination

    def emit(self, target_dir: Path, server_path: Path) -> Path:
        """Write the document that launches ``server_path`` into ``target_dir``."""
        document = DiscoveryDocument.for_server(str(server_path), self.settings)
        return self.write_document(target_dir, document)
