"""Shared utility functions for nestcord.

Provides the Rich console and its output helpers, logging setup, and JSON
I/O used by the manifest patcher.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)

_LOGGER_NAME = "nestcord"
_configured = False


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Route the ``nestcord`` logger through Rich on stderr.

    Safe to call more than once; later calls only change the level.
    """
    global _configured
    logger = logging.getLogger(_LOGGER_NAME)
    if not _configured:
        handler = RichHandler(
            console=err_console,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
    logger.setLevel(level.upper())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``nestcord`` logger for *name*."""
    if name == _LOGGER_NAME or name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file whose top level is an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as JSON indented with two spaces.

    The write is performed in a worker thread to avoid blocking the event
    loop.  Key order is preserved.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str, *, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, *, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{message}[/bold red]")


def print_info(message: str, *, out: Console | None = None) -> None:
    """Print a blue informational message."""
    (out or console).print(f"[blue]{message}[/blue]")
