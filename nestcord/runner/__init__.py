"""External command execution with spinner feedback.

Quick usage::

    from nestcord.runner import ProgressReporter, run_process

    outcome = await run_process("npm", ["add", "discord.js"], project_dir)
"""

from nestcord.runner.process import Runner, run_process
from nestcord.runner.progress import ProgressReporter

__all__ = [
    "ProgressReporter",
    "Runner",
    "run_process",
]
