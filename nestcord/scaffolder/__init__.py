"""nestcord scaffolder -- files added on top of a freshly generated NestJS project.

Quick usage::

    from nestcord.scaffolder import TemplateEmitter, update_manifest_description

    await update_manifest_description("my-bot", "Created with ...")
    written = await TemplateEmitter().emit("my-bot")
"""

from nestcord.scaffolder.emitter import DISCORD_ARTIFACTS, Artifact, TemplateEmitter
from nestcord.scaffolder.manifest import update_manifest_description
from nestcord.scaffolder.templates import TemplateRenderer

__all__ = [
    "DISCORD_ARTIFACTS",
    "Artifact",
    "TemplateEmitter",
    "TemplateRenderer",
    "update_manifest_description",
]
