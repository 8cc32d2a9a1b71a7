"""Inbound port: platform-agnostic move request."""

from dataclasses import dataclass
from typing import Tuple

from movebot.domain.models import Identity
from movebot.ports.outbound import ChannelDirectoryPort, ChannelPort


@dataclass(frozen=True)
class Invocation:
    """A single request to move a message.

    Built by the host per command call and discarded once the move
    completes or aborts.
    """

    identity: Identity
    source_channel: ChannelPort
    channels: ChannelDirectoryPort
    command_message_id: int
    message_token: str
    channel_token: str
    reason: Tuple[str, ...] = ()
