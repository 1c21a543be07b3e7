"""Shared pytest fixtures for the nestcord test suite.

Provides reusable fixtures for:
- A Rich console that records output instead of drawing on the terminal
- A fast ``Config`` (short progress interval, no welcome animation)
- A fake NestJS / package-manager toolchain standing in for ``run_process``
- A sample generated ``package.json``
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Sequence

import pytest
from rich.console import Console

from nestcord.config import Config
from nestcord.models import LaunchError, NonZeroExit, ProcessOutcome, ProcessSuccess


# ---------------------------------------------------------------------------
# Console & config
# ---------------------------------------------------------------------------

class RecordingConsole(Console):
    """Console writing to an in-memory buffer; ``text`` returns what was printed."""

    def __init__(self) -> None:
        self._sink = io.StringIO()
        super().__init__(file=self._sink, force_terminal=False, width=200, color_system=None)

    @property
    def text(self) -> str:
        return self._sink.getvalue()


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def fast_config() -> Config:
    """Config with a tiny progress interval and no welcome animation."""
    return Config(progress_interval=0.01, welcome_seconds=0)


# ---------------------------------------------------------------------------
# Generated project
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "my-bot",
    "version": "0.0.1",
    "description": "",
    "author": "",
    "private": True,
    "license": "UNLICENSED",
    "scripts": {
        "build": "nest build",
        "start": "nest start",
        "start:dev": "nest start --watch",
    },
    "dependencies": {
        "@nestjs/common": "^10.0.0",
        "@nestjs/core": "^10.0.0",
    },
}


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def generated_project(tmp_path: Path, sample_manifest: dict[str, Any]) -> Path:
    """A directory that looks like fresh ``nest new my-bot`` output."""
    project = tmp_path / "my-bot"
    (project / "src").mkdir(parents=True)
    (project / "package.json").write_text(json.dumps(sample_manifest, indent=2), encoding="utf-8")
    return project


# ---------------------------------------------------------------------------
# Fake toolchain
# ---------------------------------------------------------------------------

class FakeToolchain:
    """Records every command and pretends to be ``npx @nestjs/cli`` / ``npm``.

    A successful ``... new <name> ...`` call creates ``<cwd>/<name>/package.json``.

    Args:
        exit_codes: Exit status per command name (default 0).
        launch_errors: Command names that fail to start.
        manifest: Document written as the generated ``package.json``.
    """

    def __init__(
        self,
        exit_codes: dict[str, int] | None = None,
        launch_errors: Sequence[str] = (),
        manifest: dict[str, Any] | None = None,
    ) -> None:
        self.exit_codes = exit_codes or {}
        self.launch_errors = set(launch_errors)
        self.manifest = manifest if manifest is not None else SAMPLE_MANIFEST
        self.calls: list[tuple[str, tuple[str, ...], Path]] = []

    async def __call__(
        self, command: str, arguments: Sequence[str], working_directory: Path
    ) -> ProcessOutcome:
        arguments = tuple(arguments)
        self.calls.append((command, arguments, Path(working_directory)))
        if command in self.launch_errors:
            return LaunchError(cause=FileNotFoundError(command))
        code = self.exit_codes.get(command, 0)
        if code != 0:
            return NonZeroExit(code=code)
        if "new" in arguments:
            name = arguments[arguments.index("new") + 1]
            project = Path(working_directory) / name
            (project / "src").mkdir(parents=True, exist_ok=True)
            (project / "package.json").write_text(
                json.dumps(self.manifest, indent=2), encoding="utf-8"
            )
        return ProcessSuccess()

    @property
    def commands(self) -> list[str]:
        return [command for command, _, _ in self.calls]


@pytest.fixture
def fake_toolchain():
    """Factory for ``FakeToolchain`` instances."""
    return FakeToolchain
