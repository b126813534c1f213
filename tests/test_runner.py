"""Tests for SubprocessRunner: uses the current Python interpreter as the child."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from project_inspector.exceptions import CommandExecutionError
from project_inspector.runner import CommandRunner, SubprocessRunner


class TestSubprocessRunner:
    def test_satisfies_protocol(self):
        assert isinstance(SubprocessRunner(), CommandRunner)

    @pytest.mark.asyncio
    async def test_success(self, tmp_path: Path):
        runner = SubprocessRunner()
        assert await runner.run(sys.executable, ["-c", "pass"], tmp_path) == 0

    @pytest.mark.asyncio
    async def test_runs_in_cwd(self, tmp_path: Path):
        runner = SubprocessRunner()
        script = "import pathlib; pathlib.Path('marker.txt').write_text('ok')"
        await runner.run(sys.executable, ["-c", script], tmp_path)
        assert (tmp_path / "marker.txt").read_text() == "ok"

    @pytest.mark.asyncio
    async def test_non_zero_exit(self, tmp_path: Path):
        runner = SubprocessRunner()
        with pytest.raises(CommandExecutionError) as exc_info:
            await runner.run(sys.executable, ["-c", "import sys; sys.exit(3)"], tmp_path)
        assert exc_info.value.returncode == 3
        assert exc_info.value.command[0] == sys.executable

    @pytest.mark.asyncio
    async def test_executable_not_found(self, tmp_path: Path):
        runner = SubprocessRunner()
        with pytest.raises(CommandExecutionError) as exc_info:
            await runner.run("definitely-not-a-package-manager-xyz", ["install"], tmp_path)
        assert exc_info.value.returncode is None
        assert "cannot start" in exc_info.value.reason
