"""Command-line entry point.

Usage::

    nestcord            # show help
    nestcord help
    nestcord version
    nestcord init       # interactive project creation
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from nestcord import DISPLAY_NAME, __version__
from nestcord.config import Config
from nestcord.display import show_next_steps, show_title, show_welcome
from nestcord.errors import PromptAborted
from nestcord.models import ProjectRequest
from nestcord.pipeline import ProjectPipeline
from nestcord.prompts import PROJECT_QUESTIONS, collect_answers
from nestcord.runner.process import run_process
from nestcord.utils import configure_logging, console, get_logger, print_error, print_info

logger = get_logger(__name__)

COMMANDS: dict[str, str] = {
    "init": "Create a new Discord Bot project",
    "version": "Display the CLI version",
    "help": "Show this help message",
}


def show_help(out: Optional[Console] = None) -> None:
    out = out or console
    out.print("\n[blue]Available commands:[/blue]")
    for name, description in COMMANDS.items():
        out.print(f"[cyan]{name:<8}[/cyan] - {description}")


def show_version(out: Optional[Console] = None) -> None:
    (out or console).print(f"[green]{DISPLAY_NAME} version: {__version__}[/green]")


async def run_init(config: Config, cwd: Path, out: Optional[Console] = None) -> bool:
    """Interactive flow behind ``nestcord init``.  Returns ``True`` on success."""
    out = out or console
    out.clear()
    print_info(f"Launching {DISPLAY_NAME}...", out=out)
    show_title(out)
    await show_welcome(duration=config.welcome_seconds, console=out)

    print_info("Gathering project details...", out=out)
    print_info("Asking for project details...", out=out)
    try:
        answers = collect_answers(PROJECT_QUESTIONS, console=out)
    except PromptAborted as exc:
        print_error(f"Aborted: {escape(str(exc))}", out=out)
        return False
    request = ProjectRequest.from_answers(answers)
    out.print(
        f"[green]Project name: {escape(request.name)}, "
        f"Package manager: {request.package_manager.value}[/green]"
    )

    print_info("Starting project creation process...", out=out)
    pipeline = ProjectPipeline(config, cwd, runner=run_process, console=out)
    outcome = await pipeline.run(request)
    if not outcome.ok:
        return False

    show_next_steps(request, out)
    return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nestcord",
        description=f"{DISPLAY_NAME} -- scaffold a NestJS project with a discord.js bot",
        add_help=False,
    )
    parser.add_argument("command", nargs="*", help="init | version | help")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``nestcord`` and ``python -m nestcord``."""
    args, extra = _build_parser().parse_known_args(argv)
    tokens = [*args.command, *extra]

    if not tokens or "help" in tokens:
        show_help()
        return

    if "version" in tokens:
        show_version()
        return

    if "init" in tokens:
        try:
            config = Config.from_env()
        except ValidationError as exc:
            print_error("Invalid configuration:")
            console.print(escape(str(exc)))
            sys.exit(1)
        configure_logging(config.log_level)

        try:
            ok = asyncio.run(run_init(config, Path.cwd()))
        except KeyboardInterrupt:
            print_error("Interrupted.")
            sys.exit(1)
        if not ok:
            sys.exit(1)
        return

    print_error(f"Unknown command: {escape(tokens[0])}")
    show_help()


if __name__ == "__main__":
    main()
