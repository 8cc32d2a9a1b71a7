"""Domain layer: pure Python, no framework dependencies."""

from movebot.domain.models import (
    Attachment,
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
from movebot.domain.authorizer import is_authorized
from movebot.domain.formatter import format_moved_message, outcome_text
from movebot.domain.orchestrator import MoveOrchestrator

__all__ = [
    "Attachment",
    "ChannelNotFound",
    "Denied",
    "Identity",
    "MessageNotFound",
    "MovableMessage",
    "MoveOutcome",
    "Moved",
    "NoServer",
    "OriginalDeleteFailed",
    "PostedMessage",
    "PostFailed",
    "is_authorized",
    "format_moved_message",
    "outcome_text",
    "MoveOrchestrator",
]
