"""Tests for npm dependency installation."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import FakeNpm
from rich.console import Console

from adkgen.models.options import Language
from adkgen.scaffold.errors import InstallError
from adkgen.scaffold.installer import install_commands, install_dependencies

MAIN_INSTALL = ["npm", "install", "@google/adk", "@google/adk-devtools", "zod@3.25.76", "dotenv"]
TS_INSTALL = ["npm", "install", "typescript", "--save-dev"]


class TestInstallCommands:
    def test_typescript_installs_dev_dependency_first(self) -> None:
        assert install_commands(Language.TYPESCRIPT) == [TS_INSTALL, MAIN_INSTALL]

    def test_javascript_single_install(self) -> None:
        assert install_commands(Language.JAVASCRIPT) == [MAIN_INSTALL]


class TestInstallDependencies:
    def test_runs_in_agent_dir(self, tmp_path: Path, fake_npm: FakeNpm) -> None:
        install_dependencies(tmp_path, Language.TYPESCRIPT, runner=fake_npm)
        assert [cmd for cmd, _ in fake_npm.calls] == [TS_INSTALL, MAIN_INSTALL]
        for _, kwargs in fake_npm.calls:
            assert kwargs["cwd"] == tmp_path
            assert kwargs["check"] is False
            assert "timeout" not in kwargs

    def test_nonzero_exit_raises_without_retry(self, tmp_path: Path) -> None:
        npm = FakeNpm(returncode=1, stderr="ERR! 404")
        with pytest.raises(InstallError) as exc_info:
            install_dependencies(tmp_path, Language.TYPESCRIPT, runner=npm)
        assert len(npm.calls) == 1
        assert exc_info.value.command == TS_INSTALL
        assert exc_info.value.returncode == 1
        assert exc_info.value.stderr == "ERR! 404"
        assert "exited with code 1" in str(exc_info.value)

    def test_missing_npm_raises(self, tmp_path: Path) -> None:
        def _missing(command, **kwargs):
            raise FileNotFoundError("npm")

        with pytest.raises(InstallError) as exc_info:
            install_dependencies(tmp_path, Language.JAVASCRIPT, runner=_missing)
        assert exc_info.value.returncode is None
        assert "could not run 'npm install" in str(exc_info.value)

    def test_echoes_commands_to_console(self, tmp_path: Path, fake_npm: FakeNpm, console: Console) -> None:
        install_dependencies(tmp_path, Language.JAVASCRIPT, runner=fake_npm, console=console)
        assert "$ npm install @google/adk" in console.file.getvalue()
