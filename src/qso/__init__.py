"""qso: typed Python client for the local League client API.

Usage:
    from qso import LeagueClient, QueueType

    with LeagueClient.connect() as client:
        client.create_lobby(QueueType.ARAM)
        client.start_queue()
"""

from qso.client import AsyncLeagueClient, LeagueClient
from qso.config import QsoConfig
from qso.connection import Connection, locate_connection
from qso.exceptions import (
    ClientNotConnectedError,
    DeserializationError,
    DiscoveryError,
    EndpointError,
    QsoConnectionError,
    QsoError,
    QsoTransportError,
    UnboundModelError,
)
from qso.models import (
    BotDifficulty,
    ChampionID,
    EndpointEvent,
    EventTypes,
    GameType,
    MapID,
    Position,
    QueueType,
    SpectatorPolicy,
    TeamID,
)

__version__ = "0.1.0"

__all__ = [
    "LeagueClient",
    "AsyncLeagueClient",
    "QsoConfig",
    "Connection",
    "locate_connection",
    "EndpointEvent",
    # Errors
    "QsoError",
    "DiscoveryError",
    "QsoConnectionError",
    "QsoTransportError",
    "EndpointError",
    "DeserializationError",
    "ClientNotConnectedError",
    "UnboundModelError",
    # Constants
    "QueueType",
    "GameType",
    "MapID",
    "TeamID",
    "ChampionID",
    "SpectatorPolicy",
    "Position",
    "BotDifficulty",
    "EventTypes",
]
