"""Builders for requests that assemble compound objects on the client."""

from qso.builders.chat import ChatProfileBuilder
from qso.builders.lobby import BotSlot, LobbyBuilder

__all__ = ["BotSlot", "ChatProfileBuilder", "LobbyBuilder"]
