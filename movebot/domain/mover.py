"""Post-then-delete sequencing of a move.

Order: drop the command message (best effort), post the quote, delete
the original, build the confirmation. The original is never deleted
unless the post succeeded.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import TYPE_CHECKING, Union

from movebot.domain.errors import PostFailedError
from movebot.domain.formatter import format_confirmation
from movebot.domain.models import MovableMessage, Moved, OriginalDeleteFailed

if TYPE_CHECKING:
    from movebot.ports.outbound import ChannelPort


def _log(msg: str):
    print(msg, file=sys.stderr)


async def delete_command_message(source_channel: ChannelPort, command_message_id: int) -> None:
    """Remove the triggering command. Failure is logged, never raised."""
    try:
        await source_channel.delete_message(command_message_id)
    except Exception as e:
        _log(f"[MoveBot] could not delete command message {command_message_id}: {e}")


async def move_message(
    source_channel: ChannelPort,
    command_message_id: int,
    target_channel: ChannelPort,
    server_id: int,
    message: MovableMessage,
    text: str,
    uri_template: str,
) -> Union[Moved, OriginalDeleteFailed]:
    """Repost ``text`` to the target channel and remove the original.

    Raises PostFailedError if the post fails; nothing else is touched then.
    """
    await delete_command_message(source_channel, command_message_id)

    try:
        posted = await target_channel.send(text)
    except Exception as e:
        _log(f"[MoveBot] post to channel {target_channel.id} failed: {e}")
        raise PostFailedError(target_channel.id, e) from e

    posted = replace(posted, channel_id=target_channel.id, server_id=server_id)
    confirmation = format_confirmation(uri_template, posted)

    try:
        await source_channel.delete_message(message.id)
    except Exception as e:
        _log(f"[MoveBot] moved message {message.id} but could not delete the original: {e}")
        return OriginalDeleteFailed(posted=posted, confirmation_text=confirmation, cause=str(e))

    _log(f"[MoveBot] moved message {message.id} from {source_channel.id} to {target_channel.id} as {posted.id}")
    return Moved(posted=posted, confirmation_text=confirmation)
