"""Decorative terminal output: banner, welcome animation, next steps."""

from __future__ import annotations

import asyncio
import time
from typing import Optional, Sequence

from rich.align import Align
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from nestcord import DISPLAY_NAME
from nestcord.models import ProjectRequest
from nestcord.utils import console as default_console

PASTEL = ("#74ebd5", "#8fd3f4", "#a18cd1", "#fbc2eb", "#fad0c4", "#ffd1a9")
RAINBOW = ("red", "dark_orange", "yellow", "green", "cyan", "blue", "magenta")

WELCOME_MESSAGE = f"Welcome to {DISPLAY_NAME}! Let's start 🚀"

_FRAME_SECONDS = 0.1


def gradient_text(message: str, palette: Sequence[str], offset: int = 0) -> Text:
    """Colour *message* one character at a time, cycling through *palette*."""
    text = Text()
    for index, char in enumerate(message):
        text.append(char, style=f"bold {palette[(index + offset) % len(palette)]}")
    return text


def show_title(console: Optional[Console] = None) -> None:
    """Print the tool name in a pastel banner."""
    out = console or default_console
    out.print(
        Panel(
            Align.center(gradient_text(DISPLAY_NAME + "!", PASTEL)),
            border_style="bright_magenta",
            padding=(1, 4),
        )
    )


async def show_welcome(
    message: str = WELCOME_MESSAGE,
    duration: float = 3.0,
    console: Optional[Console] = None,
) -> None:
    """Play a rainbow animation of *message* for *duration* seconds."""
    out = console or default_console
    deadline = time.monotonic() + max(duration, 0.0)
    frame = 0
    with Live(gradient_text(message, RAINBOW), console=out, transient=False) as live:
        while time.monotonic() < deadline:
            await asyncio.sleep(min(_FRAME_SECONDS, max(deadline - time.monotonic(), 0.0)))
            frame += 1
            live.update(gradient_text(message, RAINBOW, offset=frame))


def show_next_steps(request: ProjectRequest, console: Optional[Console] = None) -> None:
    """Tell the user how to start the project that was just created."""
    out = console or default_console
    out.print()
    out.print(gradient_text(f"✨ Project {request.name} is ready to use!", PASTEL))
    out.print("[blue]\nRun the following commands to get started:[/blue]")
    out.print(Text(f"  cd {request.name}", style="cyan"))
    out.print(Text(f"  {request.package_manager.start_command}", style="cyan"))
