"""Exception hierarchy for nestcord.

``AnswerValidationError`` and ``PromptAborted`` belong to the interactive
prompt stage and never reach the pipeline.  Everything raised inside the
pipeline derives from ``PipelineError`` and carries the label of the step
that failed, so the top of the pipeline can report it without inspecting
the concrete type.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from nestcord.models import PipelineStep


class NestcordError(Exception):
    """Base class for every error raised by nestcord."""


class AnswerValidationError(NestcordError):
    """Raised by a question validator when the user's answer is rejected."""


class PromptAborted(NestcordError):
    """Raised when the user aborts the interactive prompts (Ctrl-C / EOF)."""


class PipelineError(NestcordError):
    """Raised when a pipeline step fails irrecoverably."""

    def __init__(
        self,
        label: str,
        message: str,
        step: Optional["PipelineStep"] = None,
    ) -> None:
        self.label = label
        self.step = step
        super().__init__(f"{label}: {message}")


class ProcessLaunchError(PipelineError):
    """The external command could not be started."""

    def __init__(self, step: "PipelineStep", cause: BaseException) -> None:
        self.cause = cause
        super().__init__(
            step.label,
            f"could not start '{step.display}': {cause}",
            step=step,
        )


class ProcessExitError(PipelineError):
    """The external command exited with a non-zero status."""

    def __init__(self, step: "PipelineStep", code: int) -> None:
        self.code = code
        super().__init__(
            step.label,
            f"{step.display} failed with exit code {code}",
            step=step,
        )


class FileSystemError(PipelineError):
    """Reading, parsing or writing a project file failed."""

    def __init__(self, label: str, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(label, f"{self.path}: {cause}")
