"""Data model for the nestcord scaffolding pipeline.

``ProjectRequest`` is the validated user input.  ``PipelineStep`` describes
one external command invocation.  Process and pipeline results are small
tagged variants so callers branch on the type instead of parsing messages.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# User input
# ---------------------------------------------------------------------------

class PackageManager(str, Enum):
    """Package managers the NestJS generator understands."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def start_command(self) -> str:
        """Command that starts the generated project's dev server."""
        if self is PackageManager.NPM:
            return "npm run start:dev"
        return f"{self.value} start:dev"


class ProjectRequest(BaseModel):
    """The project the user asked for.  Immutable once created."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project directory / package name")
    package_manager: PackageManager = Field(..., description="Package manager to install with")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def from_answers(cls, answers: Mapping[str, Any]) -> "ProjectRequest":
        """Build a request from the prompt answers mapping."""
        return cls(
            name=answers["projectName"],
            package_manager=answers["packageManager"],
        )


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineStep:
    """One external command invocation."""

    label: str
    command: str
    arguments: tuple[str, ...]
    working_directory: Path

    @property
    def display(self) -> str:
        """Shell-quoted command line, as it is handed to the shell."""
        return shlex.join([self.command, *self.arguments])


# ---------------------------------------------------------------------------
# Process outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProcessSuccess:
    """The command exited with status 0."""

    ok = True


@dataclass(frozen=True)
class NonZeroExit:
    """The command exited with a non-zero status."""

    code: int
    ok = False


@dataclass(frozen=True)
class LaunchError:
    """The command could not be started."""

    cause: BaseException
    ok = False


ProcessOutcome = Union[ProcessSuccess, NonZeroExit, LaunchError]


# ---------------------------------------------------------------------------
# Pipeline outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineSuccess:
    """Every step completed."""

    elapsed_seconds: float
    project_dir: Path
    ok = True


@dataclass(frozen=True)
class PipelineFailure:
    """A step failed; later steps never ran."""

    label: str
    error: BaseException
    step: Optional[PipelineStep] = None
    ok = False


PipelineOutcome = Union[PipelineSuccess, PipelineFailure]
