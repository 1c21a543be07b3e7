"""nestcord configuration.

Typed settings for the scaffolding pipeline.  All settings use Pydantic v2
models so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
import shlex
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_DESCRIPTION = "Created with Discord Bot With NestJS CLI by Mquiuqui"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseModel):
    """Global nestcord configuration.

    Instances are created once by the CLI entry point and passed to the
    pipeline; nothing reads the environment after that.
    """

    generator: list[str] = Field(
        default_factory=lambda: ["npx", "@nestjs/cli"],
        min_length=1,
        description="Command (and leading arguments) that runs the NestJS project generator",
    )
    bot_dependency: str = Field(default="discord.js", min_length=1)
    manifest_description: str = Field(default=DEFAULT_DESCRIPTION)
    progress_interval: float = Field(
        default=0.5, gt=0, description="Seconds between 'still running' status updates"
    )
    welcome_seconds: float = Field(
        default=3.0, ge=0, description="How long the welcome animation plays"
    )
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NESTCORD_GENERATOR, NESTCORD_BOT_DEPENDENCY,
            NESTCORD_PROGRESS_INTERVAL, NESTCORD_WELCOME_SECONDS,
            NESTCORD_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NESTCORD_GENERATOR"):
            kwargs["generator"] = shlex.split(os.environ["NESTCORD_GENERATOR"])
        if os.environ.get("NESTCORD_BOT_DEPENDENCY"):
            kwargs["bot_dependency"] = os.environ["NESTCORD_BOT_DEPENDENCY"]
        if os.environ.get("NESTCORD_PROGRESS_INTERVAL"):
            kwargs["progress_interval"] = os.environ["NESTCORD_PROGRESS_INTERVAL"]
        if os.environ.get("NESTCORD_WELCOME_SECONDS"):
            kwargs["welcome_seconds"] = os.environ["NESTCORD_WELCOME_SECONDS"]
        if os.environ.get("NESTCORD_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["NESTCORD_LOG_LEVEL"]
        return cls(**kwargs)
