"""Pytest configuration for installer tests."""

import io
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path so tests run without installing the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cargo_bsp_installer.installer.errors import InstallerError  # noqa: E402
from cargo_bsp_installer.models.request import BuildArtifact  # noqa: E402
from cargo_bsp_installer.utils.logging_setup import configure_logging  # noqa: E402


class FakeBuilder:
    """Builder that returns a fixed artifact path without compiling anything."""

    def __init__(self, artifact_path: Path, error: InstallerError | None = None):
        self.artifact_path = artifact_path
        self.error = error
        self.calls = 0

    def build(self) -> BuildArtifact:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return BuildArtifact(absolute_path=self.artifact_path)


class ReportStreams:
    """In-memory stdout/stderr that the installer's loguru sinks write to."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        configure_logging("WARNING", stdout=self.out, stderr=self.err)

    def readouterr(self) -> tuple[str, str]:
        """Return and clear what was written so far, as (out, err)."""
        captured = (self.out.getvalue(), self.err.getvalue())
        for stream in (self.out, self.err):
            stream.seek(0)
            stream.truncate()
        return captured


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep user config out of tests and drop sinks bound to captured streams."""
    monkeypatch.delenv("CARGO_BSP_INSTALL_CONFIG", raising=False)
    monkeypatch.delenv("CARGO_BSP_LOG_LEVEL", raising=False)
    yield
    logger.remove()


@pytest.fixture
def builder_factory() -> type[FakeBuilder]:
    return FakeBuilder


@pytest.fixture
def fake_builder() -> FakeBuilder:
    return FakeBuilder(Path("/repo/target/release/server"))


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A target project directory."""
    project = tmp_path / "proj"
    project.mkdir()
    (project / "Cargo.toml").write_text('[package]\nname = "proj"\nversion = "0.1.0"\n')
    return project


@pytest.fixture
def report_streams() -> ReportStreams:
    """Route installer output to in-memory streams."""
    return ReportStreams()
