"""Thin wrappers around host executables and subprocess execution."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


class CommandExecutionError(Exception):
    """Raised when a command could not be launched or did not finish."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"{command}: {reason}")
        self.command = command
        self.reason = reason


@dataclass(frozen=True)
class CommandResult:
    """Exit status of a finished command."""

    code: int


def command_exists(name: str) -> bool:
    """Return True if ``name`` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def exec_command(
    command: str,
    cwd: str,
    *,
    silent: bool = True,
    timeout: Optional[float] = None,
) -> CommandResult:
    """Run ``command`` with ``cwd`` as its working directory.

    The command line is split into arguments and run without a shell, so a
    program that cannot be launched surfaces as an error rather than as a
    shell exit status. The working directory is handed to the child process
    only; the current process directory is never changed.

    Args:
        command: Command line to execute.
        cwd: Directory the command runs in.
        silent: Discard stdout/stderr instead of passing them through.
        timeout: Seconds to wait before giving up, or None to wait forever.

    Returns:
        CommandResult with the exit status.

    Raises:
        CommandExecutionError: If ``cwd`` is missing, the program cannot be
            found or spawned, or the timeout expires.
    """
    if not os.path.isdir(cwd):
        raise CommandExecutionError(command, f"working directory not found: {cwd}")

    argv = shlex.split(command)
    if not argv:
        raise CommandExecutionError(command, "empty command")
    executable = shutil.which(argv[0])
    if executable is None:
        raise CommandExecutionError(command, f"executable not found: {argv[0]}")
    argv[0] = executable

    output = subprocess.DEVNULL if silent else None
    logger.debug("Running %r in %s (timeout=%s)", argv, cwd, timeout)
    try:
        result = subprocess.run(  # noqa: S603
            argv,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=output,
            stderr=output,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandExecutionError(command, f"timed out after {exc.timeout}s") from exc
    except OSError as exc:
        raise CommandExecutionError(command, str(exc)) from exc

    return CommandResult(code=result.returncode)
