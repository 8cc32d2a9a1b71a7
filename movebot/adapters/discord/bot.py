"""MoveBot: discord.Client host for the move command.

Discord adapter layer: parses `!move` / `!version` / `!help` and
delegates the move itself to MoveOrchestrator.
"""

import sys
from datetime import tzinfo
from typing import List, Optional

import discord

from movebot.config import __version__
from movebot.adapters.discord.adapter import to_invocation
from movebot.domain.formatter import outcome_text, split_message
from movebot.domain.orchestrator import MoveOrchestrator


def _log(msg: str):
    print(msg, file=sys.stderr)


class MoveBot(discord.Client):
    """Discord bot that moves messages between channels of a server."""

    def __init__(
        self,
        orchestrator: MoveOrchestrator,
        command_prefix: str = "!",
        notify_denied: bool = False,
        timezone: Optional[tzinfo] = None,
    ):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents)

        self.orchestrator = orchestrator
        self.command_prefix = command_prefix
        self.notify_denied = notify_denied
        self._tz = timezone

    @property
    def usage(self) -> str:
        return f"Usage: `{self.command_prefix}move <message-id> <#target-channel> [reason...]`"

    async def on_ready(self):
        _log(f"[MoveBot] logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user or message.author.bot:
            return

        content = message.content.strip()
        if not content.startswith(self.command_prefix):
            return
        parts = content[len(self.command_prefix):].split()
        if not parts:
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd == "move":
            await self._handle_move(message, args)
        elif cmd == "version":
            await self._handle_version(message)
        elif cmd == "help":
            await self._handle_help(message)

    async def _handle_version(self, message: discord.Message):
        await message.reply(f"MoveBot running on Version {__version__}")

    async def _handle_help(self, message: discord.Message):
        help_text = (
            "**MoveBot commands**\n"
            f"`{self.command_prefix}move <message-id> <#target-channel> [reason...]`: move a message\n"
            f"`{self.command_prefix}version`: show the running version\n"
            f"`{self.command_prefix}help`: this help"
        )
        await message.channel.send(help_text)

    async def _handle_move(self, message: discord.Message, args: List[str]):
        if len(args) < 2:
            await message.channel.send(self.usage)
            return

        invocation = to_invocation(message, args, self._tz)
        try:
            outcome = await self.orchestrator.execute_move(invocation)
        except Exception as e:
            _log(f"[MoveBot] move failed: {e}")
            await message.channel.send(f"[MoveBot] error: {e}")
            return

        reply = outcome_text(outcome, notify_denied=self.notify_denied)
        if reply:
            for chunk in split_message(reply):
                await message.channel.send(chunk)
