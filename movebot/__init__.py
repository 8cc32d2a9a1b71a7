"""MoveBot: move messages between Discord channels."""

from movebot.config import __version__

__all__ = ["__version__"]
