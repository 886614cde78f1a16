"""Tests for stage ordering in the installer."""

import json
from pathlib import Path
from typing import Any

import pytest

from cargo_bsp_installer.installer.emitter import ConfigEmitter
from cargo_bsp_installer.installer.errors import BuildFailure, FilesystemError
from cargo_bsp_installer.installer.pipeline import Installer
from cargo_bsp_installer.models.request import InstallState


class TestInstaller:
    """Test that each stage gates the next one."""

    def test_successful_run(self, project_dir: Path, fake_builder: Any, report_streams: Any) -> None:
        installer = Installer(fake_builder)

        exit_code = installer.run([str(project_dir)], "install.sh")

        assert exit_code == 0
        assert installer.state is InstallState.DONE
        assert installer.config_file == project_dir.resolve() / ".bsp" / "cargo-bsp.json"
        data = json.loads(installer.config_file.read_text())
        assert data["argv"] == ["/repo/target/release/server"]
        assert data["languages"] == ["rust"]
        assert "cargo-bsp installed" in report_streams.readouterr()[0]

    @pytest.mark.parametrize("args", [[], ["-h"], ["--help"]])
    def test_usage_touches_nothing(
        self, args: list[str], project_dir: Path, fake_builder: Any, report_streams: Any
    ) -> None:
        installer = Installer(fake_builder, base_dir=project_dir)

        assert installer.run(args, "install.sh") == 1

        assert installer.state is InstallState.FAILED
        assert fake_builder.calls == 0
        assert not (project_dir / ".bsp").exists()
        out, err = report_streams.readouterr()
        assert "usage: install.sh" in out
        assert "installed" not in out

    def test_missing_directory_skips_build(
        self, tmp_path: Path, fake_builder: Any, report_streams: Any
    ) -> None:
        missing = tmp_path / "nonexistent"
        installer = Installer(fake_builder)

        assert installer.run([str(missing)], "install.sh") == 1

        assert fake_builder.calls == 0
        assert not missing.exists()
        assert list(tmp_path.rglob(".bsp")) == []
        assert str(missing) in report_streams.readouterr()[1]

    def test_build_failure_keeps_status_and_writes_nothing(
        self, project_dir: Path, builder_factory: Any, report_streams: Any
    ) -> None:
        builder = builder_factory(Path("/repo/target/release/server"), BuildFailure("Build failed", 101))
        installer = Installer(builder)

        assert installer.run([str(project_dir)], "install.sh") == 101

        assert installer.state is InstallState.FAILED
        assert not (project_dir / ".bsp").exists()
        out, err = report_streams.readouterr()
        assert "Build failed" in err
        assert out == ""

    def test_filesystem_failure_is_reported(
        self, project_dir: Path, fake_builder: Any, report_streams: Any
    ) -> None:
        class BrokenEmitter(ConfigEmitter):
            def emit(self, target_dir: Path, server_path: Path) -> Path:
                raise FilesystemError(str(target_dir / ".bsp"), "Permission denied")

        installer = Installer(fake_builder, emitter=BrokenEmitter())

        assert installer.run([str(project_dir)], "install.sh") == 1

        assert fake_builder.calls == 1
        out, err = report_streams.readouterr()
        assert "Permission denied" in err
        assert out == ""

    def test_finished_installer_cannot_rerun(self, project_dir: Path, fake_builder: Any) -> None:
        installer = Installer(fake_builder)
        installer.run([str(project_dir)], "install.sh")

        with pytest.raises(RuntimeError):
            installer.run([str(project_dir)], "install.sh")
