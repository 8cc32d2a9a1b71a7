"""Move error taxonomy.

Resolution errors abort a move before anything is mutated. PostFailedError
aborts it after the command message is gone but before the original is.
"""

from typing import Optional


class MoveError(Exception):
    """Base class for all move failures."""


class ResolutionError(MoveError):
    """Target channel or source message could not be resolved."""


class MalformedChannelTokenError(ResolutionError):
    def __init__(self, token: str):
        super().__init__(f"malformed channel token: {token!r}")
        self.token = token


class UnknownChannelError(ResolutionError):
    def __init__(self, channel_id: int):
        super().__init__(f"unknown channel {channel_id}")
        self.channel_id = channel_id


class MissingServerContextError(ResolutionError):
    def __init__(self, channel_id: int):
        super().__init__(f"channel {channel_id} has no server")
        self.channel_id = channel_id


class MessageNotFoundError(ResolutionError):
    def __init__(self, message_token: str, message_id: Optional[int] = None):
        super().__init__(f"message not found: {message_token!r}")
        self.message_token = message_token
        self.message_id = message_id


class PostFailedError(MoveError):
    def __init__(self, channel_id: int, cause: Exception):
        super().__init__(f"posting to channel {channel_id} failed: {cause}")
        self.channel_id = channel_id
        self.cause = cause
