"""Request body models.

Each model mirrors the JSON body of one League client endpoint. Bodies are
serialized by alias with unset (None) fields dropped, see
``qso.serialization.encode_body``.
"""

from pydantic import Field

from qso.models.base import RequestModel
from qso.models.constants import (
    BotDifficulty,
    GameType,
    MapID,
    Position,
    QueueType,
    SpectatorPolicy,
)

# =============================================================================
# Lobby
# =============================================================================


class QueueRequest(RequestModel):
    """Body for POST /lol-lobby/v2/lobby (matchmade lobby)."""

    queue_id: QueueType | int = Field(alias="queueId")


class CustomGameMutators(RequestModel):
    id: GameType | int


class CustomGameConfiguration(RequestModel):
    game_mode: str = Field(alias="gameMode")
    game_mutator: str = Field(default="", alias="gameMutator")
    game_server_region: str = Field(default="", alias="gameServerRegion")
    map_id: MapID | int = Field(alias="mapId")
    mutators: CustomGameMutators
    spectator_policy: SpectatorPolicy = Field(
        default=SpectatorPolicy.ALL_ALLOWED, alias="spectatorPolicy"
    )
    team_size: int = Field(alias="teamSize")


class CustomGameLobby(RequestModel):
    configuration: CustomGameConfiguration
    lobby_name: str = Field(alias="lobbyName")
    lobby_password: str = Field(default="", alias="lobbyPassword")


class CustomLobbyRequest(RequestModel):
    """Body for POST /lol-lobby/v2/lobby (custom game lobby)."""

    custom_game_lobby: CustomGameLobby = Field(alias="customGameLobby")
    is_custom: bool = Field(default=True, alias="isCustom")


class LobbyInvitationRequest(RequestModel):
    """One element of the array posted to /lol-lobby/v2/lobby/invitations."""

    to_summoner_id: int = Field(alias="toSummonerId")


class AddBotRequest(RequestModel):
    """Body for POST /lol-lobby/v1/lobby/custom/bots.

    The endpoint expects ``teamId`` as a string ("100"/"200").
    """

    champion_id: int = Field(alias="championId")
    team_id: str = Field(alias="teamId")
    bot_difficulty: BotDifficulty | str = Field(alias="botDifficulty")


class PositionPreferencesRequest(RequestModel):
    """Body for PUT /lol-lobby/v2/lobby/members/localMember/position-preferences."""

    first_preference: Position | str | None = Field(
        default=None, alias="firstPreference"
    )
    second_preference: Position | str | None = Field(
        default=None, alias="secondPreference"
    )


# =============================================================================
# Chat
# =============================================================================


class FriendRequest(RequestModel):
    """Body for POST /lol-chat/v1/friend-requests, by summoner id or by name."""

    id: int | None = None
    name: str | None = None


class ChatProfileRequest(RequestModel):
    """Body for PUT /lol-chat/v1/me."""

    availability: str | None = None
    status_message: str | None = Field(default=None, alias="statusMessage")
    icon: int | None = None
    lol: dict[str, str] | None = None


# =============================================================================
# Champion select
# =============================================================================


class ChampSelectActionRequest(RequestModel):
    """Body for PATCH /lol-champ-select/v1/session/actions/{id}."""

    champion_id: int = Field(alias="championId")
    completed: bool | None = None
