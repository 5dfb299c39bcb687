"""Lobby models (/lol-lobby).

Lobby is a snapshot of the current party. Its methods are thin proxies to the
lobby endpoints; they never update the instance. Call
``LeagueClient.get_my_lobby()`` again to observe the effect.
"""

from __future__ import annotations

from pydantic import Field

from qso.models.base import BoundModel, QsoModel
from qso.models.constants import BotDifficulty, ChampionID, Position, TeamID
from qso.models.requests import (
    AddBotRequest,
    LobbyInvitationRequest,
    PositionPreferencesRequest,
)
from qso.models.summoner import Summoner
from qso.serialization import encode_body


class LobbyParticipant(QsoModel):
    """A member of a lobby, human or bot."""

    summoner_id: int = Field(alias="summonerId")
    summoner_name: str | None = Field(default=None, alias="summonerName")
    puuid: str | None = None
    summoner_icon_id: int | None = Field(default=None, alias="summonerIconId")
    summoner_level: int | None = Field(default=None, alias="summonerLevel")
    is_leader: bool = Field(default=False, alias="isLeader")
    is_bot: bool = Field(default=False, alias="isBot")
    bot_id: str | None = Field(default=None, alias="botId")
    bot_champion_id: int | None = Field(default=None, alias="botChampionId")
    bot_difficulty: str | None = Field(default=None, alias="botDifficulty")
    team_id: int | None = Field(default=None, alias="teamId")
    ready: bool | None = None
    first_position_preference: str | None = Field(
        default=None, alias="firstPositionPreference"
    )
    second_position_preference: str | None = Field(
        default=None, alias="secondPositionPreference"
    )


class LobbyGameConfig(QsoModel):
    """Game settings of a lobby."""

    queue_id: int | None = Field(default=None, alias="queueId")
    game_mode: str | None = Field(default=None, alias="gameMode")
    map_id: int | None = Field(default=None, alias="mapId")
    is_custom: bool = Field(default=False, alias="isCustom")
    custom_lobby_name: str | None = Field(default=None, alias="customLobbyName")
    custom_spectator_policy: str | None = Field(
        default=None, alias="customSpectatorPolicy"
    )
    custom_team_100: list[LobbyParticipant] = Field(
        default_factory=list, alias="customTeam100"
    )
    custom_team_200: list[LobbyParticipant] = Field(
        default_factory=list, alias="customTeam200"
    )
    max_lobby_size: int | None = Field(default=None, alias="maxLobbySize")
    max_team_size: int | None = Field(default=None, alias="maxTeamSize")
    show_position_selector: bool = Field(default=False, alias="showPositionSelector")
    allowable_premade_sizes: list[int] = Field(
        default_factory=list, alias="allowablePremadeSizes"
    )


class LobbyInvitation(QsoModel):
    """An outstanding lobby invitation."""

    invitation_id: str | None = Field(default=None, alias="invitationId")
    to_summoner_id: int = Field(alias="toSummonerId")
    to_summoner_name: str | None = Field(default=None, alias="toSummonerName")
    state: str | None = None
    timestamp: str | None = None


def _summoner_id(member: Summoner | LobbyParticipant | int) -> int:
    if isinstance(member, int):
        return member
    return member.summoner_id


def bot_id(champion: ChampionID | str, team: TeamID | int) -> str:
    """Internal id of a custom game bot, e.g. ``bot_Annie_100``."""
    name = champion.name if isinstance(champion, ChampionID) else champion
    return f"bot_{name}_{int(team)}"


class Lobby(BoundModel):
    """The current lobby (/lol-lobby/v2/lobby)."""

    chat_room_id: str | None = Field(default=None, alias="chatRoomId")
    chat_room_key: str | None = Field(default=None, alias="chatRoomKey")
    party_id: str | None = Field(default=None, alias="partyId")
    party_type: str | None = Field(default=None, alias="partyType")
    local_member: LobbyParticipant | None = Field(default=None, alias="localMember")
    members: list[LobbyParticipant] = Field(default_factory=list)
    game_config: LobbyGameConfig | None = Field(default=None, alias="gameConfig")
    can_start_activity: bool | None = Field(default=None, alias="canStartActivity")

    def get_invitations(self) -> list[LobbyInvitation]:
        """List invitations sent from this lobby."""
        return self.client.get_dto(
            list[LobbyInvitation], "/lol-lobby/v2/lobby/invitations", "GET"
        )

    def invite(self, *summoner_ids: int) -> list[LobbyInvitation]:
        """Invite one or more summoners to the lobby."""
        body = encode_body(
            [LobbyInvitationRequest(to_summoner_id=i) for i in summoner_ids]
        )
        return self.client.get_dto(
            list[LobbyInvitation], "/lol-lobby/v2/lobby/invitations", "POST", body
        )

    def start_champ_select(self) -> None:
        """Start champion select in a custom lobby."""
        self.client.call("/lol-lobby/v1/lobby/custom/start-champ-select", "POST")

    def stop_champ_select(self) -> None:
        """Cancel champion select in a custom lobby."""
        self.client.call("/lol-lobby/v1/lobby/custom/cancel-champ-select", "POST")

    def kick(self, member: Summoner | LobbyParticipant | int) -> None:
        self.client.call(
            "/lol-lobby/v2/lobby/members/{0}/kick", "POST", None, _summoner_id(member)
        )

    def promote(self, member: Summoner | LobbyParticipant | int) -> None:
        self.client.call(
            "/lol-lobby/v2/lobby/members/{0}/promote",
            "POST",
            None,
            _summoner_id(member),
        )

    def add_bot(
        self,
        champion: ChampionID | int,
        team: TeamID | int,
        difficulty: BotDifficulty | str = BotDifficulty.MEDIUM,
    ) -> None:
        """Add a bot to a custom lobby."""
        body = AddBotRequest(
            champion_id=int(champion),
            team_id=str(int(team)),
            bot_difficulty=difficulty,
        )
        self.client.call("/lol-lobby/v1/lobby/custom/bots", "POST", encode_body(body))

    def remove_bot(self, champion: ChampionID | str, team: TeamID | int) -> None:
        """Remove a bot from a custom lobby."""
        self.client.call(
            "/lol-lobby/v1/lobby/custom/bots/{0}", "DELETE", None, bot_id(champion, team)
        )

    def set_position_preferences(
        self,
        primary: Position | str | None = None,
        secondary: Position | str | None = None,
    ) -> None:
        """Set the local member's position preferences.

        A position that is not given is reset to UNSELECTED.
        """
        body = PositionPreferencesRequest(
            first_preference=primary or Position.UNSELECTED,
            second_preference=secondary or Position.UNSELECTED,
        )
        self.client.call(
            "/lol-lobby/v2/lobby/members/localMember/position-preferences",
            "PUT",
            encode_body(body),
        )
