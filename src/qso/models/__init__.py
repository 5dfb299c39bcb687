"""Pydantic models for the League client API.

This package mirrors the JSON schemas of the endpoints wrapped by qso, the
bodies sent to them, and the identifiers they use.

Usage:
    from qso.models import Lobby, Summoner, QueueType
    from qso.models import EndpointEvent
"""

from qso.models.base import BoundModel, QsoModel, RequestModel, bind_result
from qso.models.champ_select import (
    ChampSelectAction,
    ChampSelectBans,
    ChampSelectPlayerSelection,
    ChampSelectSession,
    ChampSelectTimer,
)
from qso.models.chat import ChatUser, MyChatUser
from qso.models.constants import (
    Availability,
    BotDifficulty,
    ChampionID,
    EventTypes,
    GameType,
    MapID,
    Position,
    QueueType,
    SpectatorPolicy,
    TeamID,
)
from qso.models.events import EndpointEvent
from qso.models.lobby import (
    Lobby,
    LobbyGameConfig,
    LobbyInvitation,
    LobbyParticipant,
    bot_id,
)
from qso.models.loot import (
    LootRecipe,
    LootRecipeOutput,
    LootRecipeSlot,
    PlayerLoot,
    PlayerLootDelta,
    PlayerLootUpdate,
)
from qso.models.perks import PerkPageResource
from qso.models.replay import ReplayMetadata
from qso.models.requests import (
    AddBotRequest,
    ChampSelectActionRequest,
    ChatProfileRequest,
    CustomGameConfiguration,
    CustomGameLobby,
    CustomGameMutators,
    CustomLobbyRequest,
    FriendRequest,
    LobbyInvitationRequest,
    PositionPreferencesRequest,
    QueueRequest,
)
from qso.models.summoner import MySummoner, Summoner
from qso.models.system import (
    BuildInfo,
    ContentFilters,
    Queue,
    ServiceStatusTickerMessage,
)

__all__ = [
    # Base
    "QsoModel",
    "BoundModel",
    "RequestModel",
    "bind_result",
    # Summoner / chat
    "Summoner",
    "MySummoner",
    "ChatUser",
    "MyChatUser",
    # Lobby
    "Lobby",
    "LobbyParticipant",
    "LobbyGameConfig",
    "LobbyInvitation",
    "bot_id",
    # Champion select
    "ChampSelectSession",
    "ChampSelectAction",
    "ChampSelectPlayerSelection",
    "ChampSelectBans",
    "ChampSelectTimer",
    # Loot
    "PlayerLoot",
    "LootRecipe",
    "LootRecipeSlot",
    "LootRecipeOutput",
    "PlayerLootUpdate",
    "PlayerLootDelta",
    # Misc
    "ReplayMetadata",
    "PerkPageResource",
    "BuildInfo",
    "ContentFilters",
    "Queue",
    "ServiceStatusTickerMessage",
    "EndpointEvent",
    # Requests
    "QueueRequest",
    "CustomGameMutators",
    "CustomGameConfiguration",
    "CustomGameLobby",
    "CustomLobbyRequest",
    "LobbyInvitationRequest",
    "AddBotRequest",
    "PositionPreferencesRequest",
    "FriendRequest",
    "ChatProfileRequest",
    "ChampSelectActionRequest",
    # Constants
    "QueueType",
    "GameType",
    "MapID",
    "TeamID",
    "ChampionID",
    "SpectatorPolicy",
    "Position",
    "BotDifficulty",
    "Availability",
    "EventTypes",
]
