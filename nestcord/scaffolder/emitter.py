"""Write the discord.js wiring files into a generated NestJS project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional, Sequence

from jinja2 import TemplateError

from nestcord.errors import FileSystemError
from nestcord.scaffolder.templates import TemplateRenderer
from nestcord.utils import get_logger

logger = get_logger(__name__)

EMIT_LABEL = "Creating Discord module, service and .env"


@dataclass(frozen=True)
class Artifact:
    """A generated file: which template renders it and where it goes."""

    template: str
    relative_path: PurePosixPath


DISCORD_ARTIFACTS: tuple[Artifact, ...] = (
    Artifact("discord/discord.module.ts.j2", PurePosixPath("src/discord/discord.module.ts")),
    Artifact("discord/discord.service.ts.j2", PurePosixPath("src/discord/discord.service.ts")),
    Artifact("discord/env.j2", PurePosixPath(".env")),
)


class TemplateEmitter:
    """Renders a fixed set of artifacts below a project root."""

    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        artifacts: Sequence[Artifact] = DISCORD_ARTIFACTS,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.artifacts = tuple(artifacts)

    def artifact_paths(self, project_root: str | Path) -> list[Path]:
        """Absolute destinations of every artifact under *project_root*."""
        root = Path(project_root)
        return [root / artifact.relative_path for artifact in self.artifacts]

    async def emit(self, project_root: str | Path) -> list[Path]:
        """Write every artifact, creating directories as needed.

        Existing files are overwritten.

        Raises:
            FileSystemError: If a template cannot be rendered or a file
                cannot be written.  Files written before the failure stay.
        """
        written: list[Path] = []
        for artifact, target in zip(self.artifacts, self.artifact_paths(project_root)):
            try:
                await self.renderer.render_to_file(artifact.template, target)
            except (OSError, TemplateError) as exc:
                raise FileSystemError(EMIT_LABEL, target, exc) from exc
            logger.debug("Wrote %s", target)
            written.append(target)
        return written
