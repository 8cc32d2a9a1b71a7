"""Text rendering for moved messages and replies.

Pure Python, no framework dependencies. Output uses Discord markup:
<@id> renders a user mention, <#id> a channel mention.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from movebot.domain.models import (
    ChannelNotFound,
    Denied,
    Identity,
    MessageNotFound,
    MovableMessage,
    MoveOutcome,
    Moved,
    NoServer,
    OriginalDeleteFailed,
    PostedMessage,
    PostFailed,
)

DEFAULT_MESSAGE_URI = "https://discord.com/channels/SERVER_ID/CHANNEL_ID/MESSAGE_ID"
TIMESTAMP_FORMAT = "%d.%m.%Y um %H:%M:%S"
QUOTE_PREFIX = "> "
EMPTY_CONTENT_PLACEHOLDER = "(there was no message content - did you move an attachment without text?)"
ATTACHMENTS_HEADER = "Attachments of the original message:"
NO_MESSAGE_FOUND = "_Unfortunately I cannot find a message with the given message id :(_"
NO_SERVER_FOUND = "No server found :("
DENIED = "You are not allowed to move messages."

# Discord rejects messages longer than this
MESSAGE_LIMIT = 2000


def format_timestamp(timestamp: datetime) -> str:
    return timestamp.strftime(TIMESTAMP_FORMAT)


def format_reason(reason: Optional[Sequence[str]]) -> str:
    """Reason line, or "" when no reason words were given."""
    if not reason:
        return ""
    return f"**Reason provided:**: _{' '.join(reason)}_"


def format_quote(content: str) -> str:
    # Literal emptiness check: whitespace-only content is still quoted
    if content == "":
        return EMPTY_CONTENT_PLACEHOLDER
    return "\n".join(QUOTE_PREFIX + line for line in content.split("\n"))


def format_attachments(message: MovableMessage) -> str:
    if not message.attachments:
        return ""
    links = "\n".join(f"- {attachment.url}" for attachment in message.attachments)
    return f"\n{ATTACHMENTS_HEADER}\n{links}"


def format_moved_message(
    mover: Identity,
    source_channel_id: int,
    message: MovableMessage,
    reason: Optional[Sequence[str]] = None,
) -> str:
    """Build the annotated quote posted into the target channel."""
    parts = [f"_This message was moved here by <@{mover.id}> from channel <#{source_channel_id}>._"]
    reason_line = format_reason(reason)
    if reason_line:
        parts.append(reason_line)
    parts.append(f"_<@{message.author.id}> wrote at {format_timestamp(message.timestamp)}_")
    parts.append(format_quote(message.content))
    attachments = format_attachments(message)
    if attachments:
        parts.append(attachments)
    return "\n".join(parts)


def message_uri(template: str, posted: PostedMessage) -> str:
    return (
        template.replace("SERVER_ID", str(posted.server_id))
        .replace("CHANNEL_ID", str(posted.channel_id))
        .replace("MESSAGE_ID", str(posted.id))
    )


def format_confirmation(template: str, posted: PostedMessage) -> str:
    return f"_This message was moved and can now be found here:_\n{message_uri(template, posted)}"


def outcome_text(outcome: MoveOutcome, notify_denied: bool = False) -> Optional[str]:
    """Reply for the source channel, or None to stay silent."""
    if isinstance(outcome, Moved):
        return outcome.confirmation_text
    if isinstance(outcome, Denied):
        return DENIED if notify_denied else None
    if isinstance(outcome, ChannelNotFound):
        if outcome.attempted_id is None:
            return f"Unknown channel {outcome.token}"
        return f"Unknown channel {outcome.attempted_id}"
    if isinstance(outcome, MessageNotFound):
        return NO_MESSAGE_FOUND
    if isinstance(outcome, NoServer):
        return NO_SERVER_FOUND
    if isinstance(outcome, PostFailed):
        return f"_Could not post the moved message to <#{outcome.target_channel_id}>: {outcome.cause}_"
    if isinstance(outcome, OriginalDeleteFailed):
        return (
            f"{outcome.confirmation_text}\n"
            f"_The original message could not be removed ({outcome.cause}), please delete it manually._"
        )
    raise TypeError(f"unknown move outcome: {outcome!r}")


def _cut_line(line: str, limit: int) -> List[str]:
    """Cut one over-long line into pieces; quoted pieces keep the quote prefix."""
    if line.startswith(QUOTE_PREFIX) and limit > len(QUOTE_PREFIX):
        body = line[len(QUOTE_PREFIX):]
        width = limit - len(QUOTE_PREFIX)
        return [QUOTE_PREFIX + body[i:i + width] for i in range(0, len(body), width)]
    return [line[i:i + limit] for i in range(0, len(line), limit)]


def split_message(text: str, limit: int = MESSAGE_LIMIT) -> List[str]:
    """Split a message into chunks that fit Discord's character limit.

    Chunks break at newlines, so quoted lines and attachment links stay
    whole. Only a single line longer than the limit is cut inside.
    """
    if len(text) <= limit:
        return [text]
    chunks = []
    current = None
    for line in text.split("\n"):
        pieces = _cut_line(line, limit) if len(line) > limit else [line]
        for piece in pieces:
            if current is None:
                current = piece
            elif len(current) + 1 + len(piece) <= limit:
                current += "\n" + piece
            else:
                if current:
                    chunks.append(current)
                current = piece
    if current:
        chunks.append(current)
    return chunks
