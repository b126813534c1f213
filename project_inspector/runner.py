"""Child-process collaborator for delegated package-manager commands."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from project_inspector.exceptions import CommandExecutionError

log = structlog.get_logger("project_inspector.runner")


@runtime_checkable
class CommandRunner(Protocol):
    """Interface the inspector needs to run a command."""

    async def run(self, executable: str, args: list[str], cwd: Path) -> int: ...


class SubprocessRunner:
    """Run a command with the parent's stdin/stdout/stderr attached.

    Output streams straight to the terminal, so nothing is captured. There is
    no timeout: the call returns when the child exits.
    """

    async def run(self, executable: str, args: list[str], cwd: Path) -> int:
        """Run *executable* with *args* in *cwd* and wait for it.

        Returns 0 on success. Raises ``CommandExecutionError`` on a non-zero
        exit code or when the process cannot be spawned.
        """
        cmd = [executable, *args]
        try:
            proc = await asyncio.create_subprocess_exec(*cmd, cwd=str(cwd))
        except OSError as e:
            # FileNotFoundError covers both a missing executable and a missing cwd
            raise CommandExecutionError(cmd, None, f"cannot start {executable}: {e}") from e

        returncode = await proc.wait()
        if returncode != 0:
            log.debug("command.exit", command=cmd, returncode=returncode)
            raise CommandExecutionError(cmd, returncode, f"exit code {returncode}")
        return returncode
