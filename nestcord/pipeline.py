"""nestcord project pipeline.

Turns one ``ProjectRequest`` into a NestJS project with a discord.js bot
wired in:

Step 1: GENERATE  -- ``npx @nestjs/cli new <name> -p <pm>`` in the working directory.
Step 2: MANIFEST  -- set ``description`` in the generated ``package.json``.
Step 3: TEMPLATES -- write the Discord module, service and ``.env``.
Step 4: INSTALL   -- ``<pm> add discord.js`` inside the new project.

Steps run strictly in order.  The first failure stops the run; nothing that
was already created or installed is rolled back, and no step is retried.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from nestcord.config import Config
from nestcord.errors import PipelineError, ProcessExitError, ProcessLaunchError
from nestcord.models import (
    LaunchError,
    NonZeroExit,
    PipelineFailure,
    PipelineOutcome,
    PipelineStep,
    PipelineSuccess,
    ProjectRequest,
)
from nestcord.runner.process import Runner, run_process
from nestcord.runner.progress import ProgressReporter
from nestcord.scaffolder.emitter import EMIT_LABEL, TemplateEmitter
from nestcord.scaffolder.manifest import MANIFEST_LABEL, update_manifest_description
from nestcord.utils import console as default_console
from nestcord.utils import get_logger, print_error, print_success

logger = get_logger(__name__)

GENERATE_LABEL = "Running NestJS CLI to create the project"
INSTALL_LABEL = "Installing {dependency} package"
UNEXPECTED_LABEL = "Unexpected error"


class ProjectPipeline:
    """Runs the four scaffolding steps for one request.

    Attributes:
        config: Tool configuration (generator command, dependency, intervals).
        cwd: Directory the project is created in.  Never read from the
            process; the caller passes it in.
        runner: Coroutine used to launch external commands.
        emitter: Writes the template files.
    """

    def __init__(
        self,
        config: Config,
        cwd: str | Path,
        runner: Runner = run_process,
        emitter: Optional[TemplateEmitter] = None,
        console: Optional[Console] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.cwd = Path(cwd)
        self.runner = runner
        self.emitter = emitter or TemplateEmitter()
        self.console = console or default_console
        self.clock = clock

    # ------------------------------------------------------------------
    # Step descriptors
    # ------------------------------------------------------------------

    def generator_step(self, request: ProjectRequest) -> PipelineStep:
        command, *prefix = self.config.generator
        return PipelineStep(
            label=GENERATE_LABEL,
            command=command,
            arguments=(*prefix, "new", request.name, "-p", request.package_manager.value),
            working_directory=self.cwd,
        )

    def install_step(self, request: ProjectRequest) -> PipelineStep:
        return PipelineStep(
            label=INSTALL_LABEL.format(dependency=self.config.bot_dependency),
            command=request.package_manager.value,
            arguments=("add", self.config.bot_dependency),
            working_directory=self.project_dir(request),
        )

    def project_dir(self, request: ProjectRequest) -> Path:
        return self.cwd / request.name

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def run(self, request: ProjectRequest) -> PipelineOutcome:
        """Execute every step for *request*.

        Returns:
            ``PipelineSuccess`` with the elapsed wall-clock seconds, or
            ``PipelineFailure`` naming the step that failed.  Errors raised
            by steps, expected or not, are reported here once and never
            propagate further.
        """
        start = self.clock()
        failure: Optional[PipelineError] = None

        with self.console.status("Starting project creation...", spinner="dots") as status:
            reporter = ProgressReporter(status, self.config.progress_interval, self.console)
            try:
                await self._execute(request, status, reporter)
            except PipelineError as exc:
                failure = exc
            except Exception as exc:
                logger.exception("Unexpected error while creating %r", request.name)
                failure = PipelineError(UNEXPECTED_LABEL, f"{type(exc).__name__}: {exc}")
                failure.__cause__ = exc

        if failure is not None:
            logger.info("Pipeline failed at %r: %s", failure.label, failure)
            print_error("Failed to create the NestJS project.", out=self.console)
            self.console.print(f"[red]{escape(str(failure))}[/red]")
            return PipelineFailure(label=failure.label, error=failure, step=failure.step)

        elapsed = self.clock() - start
        print_success(
            f"Project {escape(request.name)} successfully created in {elapsed:.2f}s!",
            out=self.console,
        )
        return PipelineSuccess(elapsed_seconds=elapsed, project_dir=self.project_dir(request))

    async def _execute(
        self,
        request: ProjectRequest,
        status: Status,
        reporter: ProgressReporter,
    ) -> None:
        project_dir = self.project_dir(request)

        await self._run_command(reporter, self.generator_step(request))

        status.update(f"{MANIFEST_LABEL}...")
        await update_manifest_description(project_dir, self.config.manifest_description)
        self.console.print(f"[green]✔[/green] {MANIFEST_LABEL}")

        status.update(f"{EMIT_LABEL}...")
        written = await self.emitter.emit(project_dir)
        self.console.print(f"[green]✔[/green] {EMIT_LABEL} [dim]({len(written)} files)[/dim]")

        await self._run_command(reporter, self.install_step(request))

    async def _run_command(self, reporter: ProgressReporter, step: PipelineStep) -> None:
        logger.info("%s: %s", step.label, step.display)
        outcome = await reporter.track(step, self.runner)
        if isinstance(outcome, NonZeroExit):
            raise ProcessExitError(step, outcome.code)
        if isinstance(outcome, LaunchError):
            raise ProcessLaunchError(step, outcome.cause)
