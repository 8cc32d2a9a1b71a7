"""Tests for MoveBot command handlers (!move, !version, !help)."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from movebot.adapters.discord.bot import MoveBot
from movebot.config import __version__
from movebot.domain.formatter import DENIED, NO_MESSAGE_FOUND
from movebot.domain.models import Denied, MessageNotFound
from movebot.domain.orchestrator import MoveOrchestrator
from movebot.ports.inbound import Invocation


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

GUILD_ID = 1
OWNER_ID = 1000
SOURCE_ID = 10
TARGET_ID = 42
BOT_USER_ID = 999


def _make_bot(orchestrator=None, notify_denied=False) -> MoveBot:
    """Create a MoveBot with a fake self.user."""
    bot = MoveBot(orchestrator or MoveOrchestrator(["Moderator"]), notify_denied=notify_denied)
    # Fake self.user: discord.Client exposes user via _connection.user
    fake_user = MagicMock()
    fake_user.id = BOT_USER_ID
    bot._connection = MagicMock()
    bot._connection.user = fake_user
    return bot


def _role(name):
    role = MagicMock()
    role.name = name
    return role


def _guild():
    guild = MagicMock()
    guild.id = GUILD_ID
    guild.owner_id = OWNER_ID
    guild.channels = []
    return guild


def _channel(channel_id, guild):
    channel = MagicMock(spec=discord.TextChannel)
    channel.id = channel_id
    channel.guild = guild
    channel.send = AsyncMock()
    channel.fetch_message = AsyncMock()
    partial = MagicMock()
    partial.delete = AsyncMock()
    channel.get_partial_message = MagicMock(return_value=partial)
    return channel


def _make_message(content: str, *, author_id=OWNER_ID, roles=(), is_bot=False, guild=None) -> MagicMock:
    """Create a fake discord.Message in the source channel."""
    guild = guild or _guild()
    msg = MagicMock()
    msg.id = 99
    msg.content = content
    msg.guild = guild
    msg.channel = _channel(SOURCE_ID, guild)
    msg.reply = AsyncMock()
    msg.author = MagicMock()
    msg.author.id = author_id
    msg.author.bot = is_bot
    msg.author.roles = [_role(r) for r in roles]
    return msg


def _mock_orchestrator(outcome):
    orchestrator = MagicMock()
    orchestrator.execute_move = AsyncMock(return_value=outcome)
    return orchestrator


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def test_requests_only_message_content_intent():
    bot = _make_bot()
    assert bot.intents.message_content is True
    assert bot.intents.members is False


@pytest.mark.asyncio
async def test_ignores_non_commands():
    orchestrator = _mock_orchestrator(None)
    bot = _make_bot(orchestrator)
    msg = _make_message("just chatting")
    await bot.on_message(msg)
    orchestrator.execute_move.assert_not_awaited()
    msg.channel.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_ignores_bots():
    orchestrator = _mock_orchestrator(None)
    bot = _make_bot(orchestrator)
    await bot.on_message(_make_message("!move 7 <#42>", is_bot=True))
    orchestrator.execute_move.assert_not_awaited()


@pytest.mark.asyncio
async def test_version():
    bot = _make_bot()
    msg = _make_message("!version")
    await bot.on_message(msg)
    msg.reply.assert_awaited_once_with(f"MoveBot running on Version {__version__}")


@pytest.mark.asyncio
async def test_help():
    bot = _make_bot()
    msg = _make_message("!help")
    await bot.on_message(msg)
    assert "!move" in msg.channel.send.call_args[0][0]


# ---------------------------------------------------------------------------
# !move
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_move_missing_arguments_shows_usage():
    orchestrator = _mock_orchestrator(None)
    bot = _make_bot(orchestrator)
    msg = _make_message("!move 7")
    await bot.on_message(msg)
    orchestrator.execute_move.assert_not_awaited()
    assert "Usage" in msg.channel.send.call_args[0][0]


@pytest.mark.asyncio
async def test_move_builds_invocation():
    orchestrator = _mock_orchestrator(MessageNotFound(message_token="7"))
    bot = _make_bot(orchestrator)
    msg = _make_message("!move 7 <#42> off topic")
    await bot.on_message(msg)

    invocation = orchestrator.execute_move.call_args[0][0]
    assert isinstance(invocation, Invocation)
    assert invocation.message_token == "7"
    assert invocation.channel_token == "<#42>"
    assert invocation.reason == ("off", "topic")
    msg.channel.send.assert_awaited_once_with(NO_MESSAGE_FOUND)


@pytest.mark.asyncio
async def test_denied_is_silent_by_default():
    bot = _make_bot(_mock_orchestrator(Denied(user_id=5)))
    msg = _make_message("!move 7 <#42>", author_id=5)
    await bot.on_message(msg)
    msg.channel.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_denied_notifies_when_configured():
    bot = _make_bot(_mock_orchestrator(Denied(user_id=5)), notify_denied=True)
    msg = _make_message("!move 7 <#42>", author_id=5)
    await bot.on_message(msg)
    msg.channel.send.assert_awaited_once_with(DENIED)


@pytest.mark.asyncio
async def test_unexpected_error_is_reported():
    orchestrator = MagicMock()
    orchestrator.execute_move = AsyncMock(side_effect=RuntimeError("gateway down"))
    bot = _make_bot(orchestrator)
    msg = _make_message("!move 7 <#42>")
    await bot.on_message(msg)
    assert "gateway down" in msg.channel.send.call_args[0][0]


@pytest.mark.asyncio
async def test_move_end_to_end():
    """Owner moves message 7 into channel 42 through the real orchestrator."""
    guild = _guild()
    target = _channel(TARGET_ID, guild)
    target.send.return_value = MagicMock(id=555)
    guild.channels = [target]

    msg = _make_message("!move 7 <#42>", guild=guild)
    original = MagicMock()
    original.id = 7
    original.content = "hello"
    original.author = MagicMock()
    original.author.id = 5
    original.author.roles = []
    original.guild = guild
    original.created_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    original.attachments = []
    msg.channel.fetch_message.return_value = original

    bot = _make_bot()
    await bot.on_message(msg)

    posted = target.send.call_args[0][0]
    assert "<@1000>" in posted
    assert "_<@5> wrote at 02.01.2024 um 03:04:05_" in posted
    assert "> hello" in posted
    assert msg.channel.get_partial_message.call_args_list[0][0][0] == 99
    assert msg.channel.get_partial_message.call_args_list[1][0][0] == 7
    confirmation = msg.channel.send.call_args[0][0]
    assert confirmation.endswith(f"https://discord.com/channels/{GUILD_ID}/{TARGET_ID}/555")


@pytest.mark.asyncio
async def test_move_unknown_channel_touches_nothing():
    guild = _guild()
    msg = _make_message("!move 7 <#999>", guild=guild)
    bot = _make_bot()
    await bot.on_message(msg)
    msg.channel.get_partial_message.assert_not_called()
    msg.channel.send.assert_awaited_once_with("Unknown channel 999")
