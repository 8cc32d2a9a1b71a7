"""Port interfaces (Hexagonal Architecture)."""

from movebot.ports.outbound import ChannelDirectoryPort, ChannelPort
from movebot.ports.inbound import Invocation

__all__ = [
    "ChannelDirectoryPort",
    "ChannelPort",
    "Invocation",
]
