"""Target channel and source message resolution.

Pure Python, no framework dependencies. Failures are raised as
ResolutionError subtypes in a fixed order: malformed token, unknown
channel, missing server, missing message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from movebot.domain.errors import (
    MalformedChannelTokenError,
    MessageNotFoundError,
    MissingServerContextError,
    UnknownChannelError,
)
from movebot.domain.models import MovableMessage

if TYPE_CHECKING:
    from movebot.ports.outbound import ChannelDirectoryPort, ChannelPort

# Mention markup around a channel id: <#1234>
CHANNEL_TOKEN_DECORATION = "<#>"
# Discord ids are unsigned 64-bit snowflakes
SNOWFLAKE_MAX = 2**64 - 1


@dataclass(frozen=True)
class Resolution:
    target_channel: ChannelPort
    server_id: int
    message: MovableMessage


def parse_channel_token(token: str) -> int:
    """Strip mention markup from a channel token and return the channel id."""
    stripped = (token or "").translate({ord(c): None for c in CHANNEL_TOKEN_DECORATION}).strip()
    # str.isdigit() also accepts superscripts and other unicode digits
    if not stripped.isascii() or not stripped.isdigit():
        raise MalformedChannelTokenError(token)
    return int(stripped)


def parse_message_id(token: str) -> Optional[int]:
    stripped = (token or "").strip()
    if not stripped.isascii() or not stripped.isdigit():
        return None
    message_id = int(stripped)
    if message_id > SNOWFLAKE_MAX:
        return None
    return message_id


async def resolve(
    channel_token: str,
    message_token: str,
    source_channel: ChannelPort,
    channels: ChannelDirectoryPort,
) -> Resolution:
    """Locate the target channel and the message to move."""
    target_id = parse_channel_token(channel_token)

    target_channel = channels.get_channel(target_id)
    if target_channel is None:
        raise UnknownChannelError(target_id)

    server_id = source_channel.server_id
    if server_id is None:
        raise MissingServerContextError(source_channel.id)

    message_id = parse_message_id(message_token)
    if message_id is None:
        raise MessageNotFoundError(message_token)
    message = await source_channel.fetch_message(message_id)
    if message is None:
        raise MessageNotFoundError(message_token, message_id)

    return Resolution(target_channel=target_channel, server_id=server_id, message=message)
