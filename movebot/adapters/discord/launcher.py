"""Launcher for MoveBot."""

import asyncio
import sys
from typing import Optional

from movebot.config import AppConfig
from movebot.adapters.discord.adapter import load_timezone
from movebot.adapters.discord.bot import MoveBot
from movebot.domain.orchestrator import MoveOrchestrator


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: AppConfig) -> MoveBot:
    """Wire the orchestrator and the Discord client from config."""
    orchestrator = MoveOrchestrator(config.mover_roles, message_uri=config.message_uri)
    return MoveBot(
        orchestrator,
        command_prefix=config.command_prefix,
        notify_denied=config.notify_denied,
        timezone=load_timezone(config.timezone),
    )


async def launch(config: Optional[AppConfig] = None):
    config = config or AppConfig.from_env()
    if not config.discord_token:
        _log("DISCORD_TOKEN not set; not starting MoveBot.")
        return

    bot = build_bot(config)
    _log(f"Launching MoveBot (mover roles: {', '.join(sorted(config.mover_roles)) or 'owner only'})")
    async with bot:
        await bot.start(config.discord_token)


def main():
    asyncio.run(launch())


if __name__ == "__main__":
    main()
