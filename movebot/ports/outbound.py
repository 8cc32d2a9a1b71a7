"""Outbound ports: capabilities the host hands to the core."""

from typing import Optional, Protocol, runtime_checkable

from movebot.domain.models import MovableMessage, PostedMessage


@runtime_checkable
class ChannelPort(Protocol):
    """A channel the core can read from, post to and delete in."""

    @property
    def id(self) -> int: ...

    @property
    def server_id(self) -> Optional[int]: ...

    async def fetch_message(self, message_id: int) -> Optional[MovableMessage]: ...

    async def send(self, text: str) -> PostedMessage: ...

    async def delete_message(self, message_id: int) -> None: ...


@runtime_checkable
class ChannelDirectoryPort(Protocol):
    """Channel lookup scoped to one server."""

    def get_channel(self, channel_id: int) -> Optional[ChannelPort]: ...
