"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional, Tuple, Union


@dataclass(frozen=True)
class Identity:
    """A caller or message author as seen by the core."""

    id: int
    display_name: str = ""
    roles: FrozenSet[str] = field(default_factory=frozenset)
    is_owner: bool = False


@dataclass(frozen=True)
class Attachment:
    url: str
    filename: str = ""


@dataclass(frozen=True)
class MovableMessage:
    """The message being moved. Read-only apart from its deletion."""

    id: int
    author: Identity
    content: str
    timestamp: datetime
    attachments: Tuple[Attachment, ...] = ()


@dataclass(frozen=True)
class PostedMessage:
    """Reference to a message the bot posted."""

    id: int
    channel_id: int
    server_id: Optional[int]


# -- Outcomes of a move invocation --


@dataclass(frozen=True)
class Moved:
    posted: PostedMessage
    confirmation_text: str


@dataclass(frozen=True)
class Denied:
    user_id: int


@dataclass(frozen=True)
class ChannelNotFound:
    attempted_id: Optional[int]
    token: str = ""


@dataclass(frozen=True)
class MessageNotFound:
    message_token: str


@dataclass(frozen=True)
class NoServer:
    channel_id: int


@dataclass(frozen=True)
class PostFailed:
    target_channel_id: int
    cause: str


@dataclass(frozen=True)
class OriginalDeleteFailed:
    """Post succeeded but the original could not be removed."""

    posted: PostedMessage
    confirmation_text: str
    cause: str


MoveOutcome = Union[
    Moved,
    Denied,
    ChannelNotFound,
    MessageNotFound,
    NoServer,
    PostFailed,
    OriginalDeleteFailed,
]
