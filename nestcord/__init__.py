"""nestcord -- scaffold a NestJS project wired for a discord.js bot.

Quick usage::

    nestcord init
    python -m nestcord version
"""

__version__ = "1.0.0"

DISPLAY_NAME = "Discord Bot With NestJS CLI"
