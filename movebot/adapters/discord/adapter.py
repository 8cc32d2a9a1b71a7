"""Discord adapter: exposes discord.py objects through the move ports.

Converts discord.Message / discord.Member into domain records and wraps
channels and guilds as ChannelPort / ChannelDirectoryPort so the
orchestrator never touches discord directly.
"""

import sys
from datetime import tzinfo
from typing import Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import discord

from movebot.domain.formatter import split_message
from movebot.domain.models import Attachment, Identity, MovableMessage, PostedMessage
from movebot.ports.inbound import Invocation


def _log(msg: str):
    print(msg, file=sys.stderr)


def load_timezone(name: str) -> Optional[tzinfo]:
    """Resolve an IANA zone name; empty or unknown names mean "as provided"."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        _log(f"[MoveBot] unknown timezone {name!r}, using timestamps as provided")
        return None


def to_identity(user, guild: Optional[discord.Guild] = None) -> Identity:
    """Convert a discord.Member (or bare User outside guilds) to an Identity."""
    # Plain discord.User has no roles attribute
    roles = frozenset(role.name for role in getattr(user, "roles", ()))
    is_owner = guild is not None and guild.owner_id == user.id
    return Identity(
        id=user.id,
        display_name=str(user),
        roles=roles,
        is_owner=is_owner,
    )


def to_movable(message: discord.Message, tz: Optional[tzinfo] = None) -> MovableMessage:
    timestamp = message.created_at
    if tz is not None:
        timestamp = timestamp.astimezone(tz)
    return MovableMessage(
        id=message.id,
        author=to_identity(message.author, message.guild),
        content=message.content or "",
        timestamp=timestamp,
        attachments=tuple(Attachment(url=a.url, filename=a.filename) for a in message.attachments),
    )


class DiscordChannelAdapter:
    """ChannelPort implementation over a messageable guild channel."""

    def __init__(self, channel, tz: Optional[tzinfo] = None):
        self._channel = channel
        self._tz = tz

    @property
    def id(self) -> int:
        return self._channel.id

    @property
    def server_id(self) -> Optional[int]:
        guild = getattr(self._channel, "guild", None)
        return guild.id if guild is not None else None

    async def fetch_message(self, message_id: int) -> Optional[MovableMessage]:
        try:
            message = await self._channel.fetch_message(message_id)
        except discord.NotFound:
            return None
        return to_movable(message, self._tz)

    async def send(self, text: str) -> PostedMessage:
        sent = []
        try:
            for chunk in split_message(text):
                sent.append(await self._channel.send(chunk))
        except Exception:
            await self._remove_partial(sent)
            raise
        return PostedMessage(id=sent[0].id, channel_id=self._channel.id, server_id=self.server_id)

    async def _remove_partial(self, sent: Sequence[discord.Message]) -> None:
        """Best-effort removal of chunks posted before a later chunk failed."""
        for message in sent:
            try:
                await message.delete()
            except discord.HTTPException as e:
                _log(f"[MoveBot] could not remove partial post {message.id} in {self._channel.id}: {e}")

    async def delete_message(self, message_id: int) -> None:
        await self._channel.get_partial_message(message_id).delete()


class DiscordChannelDirectory:
    """ChannelDirectoryPort implementation over one guild's channels."""

    def __init__(self, guild: Optional[discord.Guild], tz: Optional[tzinfo] = None):
        self._guild = guild
        self._tz = tz

    def get_channel(self, channel_id: int) -> Optional[DiscordChannelAdapter]:
        if self._guild is None:
            return None
        channel = discord.utils.get(self._guild.channels, id=channel_id)
        # Categories and forums cannot take a plain message
        if channel is None or not isinstance(channel, discord.abc.Messageable):
            return None
        return DiscordChannelAdapter(channel, self._tz)


def to_invocation(message: discord.Message, args: Sequence[str], tz: Optional[tzinfo] = None) -> Invocation:
    """Build an Invocation from a `move <message-id> <#channel> [reason...]` command."""
    guild = message.guild
    return Invocation(
        identity=to_identity(message.author, guild),
        source_channel=DiscordChannelAdapter(message.channel, tz),
        channels=DiscordChannelDirectory(guild, tz),
        command_message_id=message.id,
        message_token=args[0],
        channel_token=args[1],
        reason=tuple(args[2:]),
    )
