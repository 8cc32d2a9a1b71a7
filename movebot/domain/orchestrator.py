"""MoveOrchestrator: the move pipeline, no framework dependencies.

Authorizer -> Resolver -> Formatter -> Mover, strictly in sequence.
Every failure comes back as an outcome value; nothing is retried.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable

from movebot.domain.authorizer import is_authorized
from movebot.domain.errors import (
    MalformedChannelTokenError,
    MessageNotFoundError,
    MissingServerContextError,
    PostFailedError,
    UnknownChannelError,
)
from movebot.domain.formatter import DEFAULT_MESSAGE_URI, format_moved_message
from movebot.domain.models import (
    ChannelNotFound,
    Denied,
    MessageNotFound,
    MoveOutcome,
    NoServer,
    PostFailed,
)
from movebot.domain.mover import move_message
from movebot.domain.resolver import resolve

if TYPE_CHECKING:
    from movebot.ports.inbound import Invocation


def _log(msg: str):
    print(msg, file=sys.stderr)


class MoveOrchestrator:
    """Runs one move per invocation. Holds only read-only configuration."""

    def __init__(self, authorized_roles: Iterable[str], message_uri: str = DEFAULT_MESSAGE_URI):
        self.authorized_roles = frozenset(authorized_roles)
        self.message_uri = message_uri

    def is_authorized(self, invocation: Invocation) -> bool:
        return is_authorized(invocation.identity, self.authorized_roles)

    async def execute_move(self, invocation: Invocation) -> MoveOutcome:
        identity = invocation.identity
        if not self.is_authorized(invocation):
            _log(f"[MoveBot] denied move for user {identity.id}")
            return Denied(user_id=identity.id)

        source = invocation.source_channel
        try:
            resolution = await resolve(
                invocation.channel_token,
                invocation.message_token,
                source,
                invocation.channels,
            )
        except MalformedChannelTokenError as e:
            _log(f"[MoveBot] {e}")
            return ChannelNotFound(attempted_id=None, token=e.token)
        except UnknownChannelError as e:
            _log(f"[MoveBot] {e}")
            return ChannelNotFound(attempted_id=e.channel_id, token=invocation.channel_token)
        except MissingServerContextError as e:
            _log(f"[MoveBot] {e}")
            return NoServer(channel_id=e.channel_id)
        except MessageNotFoundError as e:
            _log(f"[MoveBot] {e}")
            return MessageNotFound(message_token=e.message_token)

        text = format_moved_message(identity, source.id, resolution.message, invocation.reason)

        try:
            return await move_message(
                source,
                invocation.command_message_id,
                resolution.target_channel,
                resolution.server_id,
                resolution.message,
                text,
                self.message_uri,
            )
        except PostFailedError as e:
            return PostFailed(target_channel_id=e.channel_id, cause=str(e.cause))
