"""Spinner feedback around a running external command.

``ProgressReporter`` sits between the pipeline and the process runner.  It
keeps a status line alive while the child runs and prints a check line when
the step succeeds.  Failures are left to the caller to report, and the
outcome it is given is returned unchanged.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import AsyncIterator, Optional, Protocol

from rich.console import Console
from rich.markup import escape

from nestcord.models import PipelineStep, ProcessOutcome
from nestcord.runner.process import Runner, run_process
from nestcord.utils import console as default_console


class StatusLine(Protocol):
    """Anything with an ``update(text)`` method, e.g. ``rich.status.Status``."""

    def update(self, status: str) -> None: ...


class ProgressReporter:
    """Wraps runner invocations with a periodically refreshed status line.

    Attributes:
        status: The status line being refreshed.
        interval: Seconds between "still running" updates.
        ticks: Number of updates emitted so far (across all steps).
    """

    def __init__(
        self,
        status: StatusLine,
        interval: float = 0.5,
        console: Optional[Console] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.status = status
        self.interval = interval
        self.console = console or default_console
        self.ticks = 0
        self._tickers: list[asyncio.Task[None]] = []

    @property
    def pending_timers(self) -> int:
        """Number of recurring updaters still running."""
        return len(self._tickers)

    @contextlib.asynccontextmanager
    async def ticking(self, message: str) -> AsyncIterator[None]:
        """Refresh the status line with *message* until the block exits."""
        task = asyncio.create_task(self._tick(message))
        self._tickers.append(task)
        try:
            yield
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            self._tickers.remove(task)

    async def _tick(self, message: str) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.ticks += 1
            self.status.update(message)

    async def track(
        self,
        step: PipelineStep,
        runner: Runner = run_process,
    ) -> ProcessOutcome:
        """Run *step* through *runner* with live feedback; return its outcome."""
        self.status.update(escape(step.label))
        async with self.ticking(escape(f"{step.display} is still running...")):
            outcome = await runner(step.command, step.arguments, step.working_directory)

        if outcome.ok:
            self.console.print(f"[green]✔[/green] {escape(step.label)}")
        return outcome
