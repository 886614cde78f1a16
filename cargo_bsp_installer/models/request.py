"""Values passed between installer stages."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class InstallRequest:
    target_directory: str


@dataclass(frozen=True)
class BuildArtifact:
    absolute_path: Path


class InstallState(Enum):
    """Installer progress. DONE and FAILED are terminal."""

    START = "start"
    ARGS_CHECKED = "args_checked"
    DIR_CHECKED = "dir_checked"
    BUILT = "built"
    CONFIG_WRITTEN = "config_written"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (InstallState.DONE, InstallState.FAILED)
