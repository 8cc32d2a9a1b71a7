"""Discord host for the move command."""

from movebot.adapters.discord.adapter import (
    DiscordChannelAdapter,
    DiscordChannelDirectory,
    to_identity,
    to_invocation,
    to_movable,
)
from movebot.adapters.discord.bot import MoveBot

__all__ = [
    "DiscordChannelAdapter",
    "DiscordChannelDirectory",
    "MoveBot",
    "to_identity",
    "to_invocation",
    "to_movable",
]
