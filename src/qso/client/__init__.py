"""Client module for the local League client API.

This module provides the synchronous LeagueClient, its async counterpart,
and the HTTP and WebSocket bridges they are built from.

Usage:
    from qso.client import LeagueClient

    with LeagueClient.connect() as client:
        build = client.get_build()
        lobby = client.get_my_lobby()
"""

from qso.client.async_client import AsyncEventHandler, AsyncLeagueClient
from qso.client.events import (
    EventDispatcher,
    EventHandler,
    EventStream,
    parse_event_frame,
)
from qso.client.http_client import LeagueHTTPClient
from qso.client.league_client import LeagueClient
from qso.client.request import RequestDescriptor, format_path

__all__ = [
    "LeagueClient",
    "AsyncLeagueClient",
    "LeagueHTTPClient",
    "RequestDescriptor",
    "format_path",
    "EventDispatcher",
    "EventStream",
    "EventHandler",
    "AsyncEventHandler",
    "parse_event_frame",
]
