"""Run one external command and report how it ended.

The child gets no terminal streams: stdin, stdout and stderr all point at
the null device.  The result is a ``ProcessOutcome`` rather than an
exception, so the caller decides how a failure is surfaced.
"""

from __future__ import annotations

import asyncio
import shlex
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from nestcord.models import LaunchError, NonZeroExit, ProcessOutcome, ProcessSuccess
from nestcord.utils import get_logger

logger = get_logger(__name__)

Runner = Callable[[str, Sequence[str], Path], Awaitable[ProcessOutcome]]


async def run_process(
    command: str,
    arguments: Sequence[str],
    working_directory: str | Path,
) -> ProcessOutcome:
    """Run ``command arguments...`` through the shell in *working_directory*.

    Args:
        command: Executable name, looked up by the shell.
        arguments: Arguments, each shell-quoted before the line is built.
        working_directory: Directory the child runs in.

    Returns:
        ``ProcessSuccess`` for exit status 0, ``NonZeroExit`` for any other
        status, ``LaunchError`` when the process could not be started.
    """
    cmdline = shlex.join([command, *arguments])
    cwd = Path(working_directory)
    logger.debug("Running %s (cwd=%s)", cmdline, cwd)

    try:
        process = await asyncio.create_subprocess_shell(
            cmdline,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
            cwd=str(cwd),
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", cmdline, exc)
        return LaunchError(cause=exc)

    code = await process.wait()
    logger.debug("%s exited with %s", cmdline, code)
    if code == 0:
        return ProcessSuccess()
    return NonZeroExit(code=code)
