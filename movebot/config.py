"""Configuration and shared constants."""

__version__ = "1.0.0"

import os
import sys
from dataclasses import dataclass, field
from typing import FrozenSet

from dotenv import load_dotenv

from movebot.domain.formatter import DEFAULT_MESSAGE_URI

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def parse_roles(raw: str) -> FrozenSet[str]:
    """Split a comma-separated role list, dropping blanks."""
    return frozenset(r.strip() for r in (raw or "").split(",") if r.strip())


DISCORD_TOKEN = (os.getenv("DISCORD_TOKEN") or "").strip()
MOVER_ROLES = parse_roles(os.getenv("MOVER_ROLES", ""))
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!").strip() or "!"
MESSAGE_URI = os.getenv("MESSAGE_URI", DEFAULT_MESSAGE_URI).strip() or DEFAULT_MESSAGE_URI
NOTIFY_DENIED = _env_flag("MOVEBOT_NOTIFY_DENIED")
TIMEZONE = os.getenv("MOVEBOT_TIMEZONE", "").strip()

if not MOVER_ROLES:
    _stderr_print("MOVER_ROLES is empty; only server owners can move messages")


@dataclass
class AppConfig:
    """Typed configuration for the launcher and bot."""

    discord_token: str = ""
    mover_roles: FrozenSet[str] = field(default_factory=frozenset)
    command_prefix: str = "!"
    message_uri: str = DEFAULT_MESSAGE_URI
    notify_denied: bool = False
    timezone: str = ""

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            discord_token=DISCORD_TOKEN,
            mover_roles=MOVER_ROLES,
            command_prefix=COMMAND_PREFIX,
            message_uri=MESSAGE_URI,
            notify_denied=NOTIFY_DENIED,
            timezone=TIMEZONE,
        )
