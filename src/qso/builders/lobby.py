"""Builder for custom game lobbies.

Building a custom lobby takes several requests: the lobby is created first,
then bots are added one by one, then invitations are sent. Steps run in that
order and the first failure aborts the rest. Nothing is rolled back, so a
failure after creation leaves a partially set up lobby behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from qso.models import (
    BotDifficulty,
    ChampionID,
    CustomGameConfiguration,
    CustomGameLobby,
    CustomGameMutators,
    CustomLobbyRequest,
    GameType,
    Lobby,
    MapID,
    SpectatorPolicy,
    TeamID,
)
from qso.serialization import encode_body

if TYPE_CHECKING:
    from qso.client.league_client import LeagueClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BotSlot:
    champion: ChampionID | int
    team: TeamID | int
    difficulty: BotDifficulty | str = BotDifficulty.MEDIUM


class LobbyBuilder:
    """Fluent builder for a custom game lobby.

    Example:
        lobby = (
            client.build_lobby("Practice", "CLASSIC", GameType.BLIND_PICK,
                               MapID.SUMMONERS_RIFT, 5)
            .with_password("hunter2")
            .add_bot(ChampionID.Annie, TeamID.CHAOS, BotDifficulty.EASY)
            .invite(123456)
            .build()
        )
    """

    def __init__(
        self,
        client: LeagueClient,
        lobby_name: str,
        game_mode: str = "CLASSIC",
        game_type: GameType | int = GameType.BLIND_PICK,
        map_id: MapID | int = MapID.SUMMONERS_RIFT,
        team_size: int = 5,
    ):
        if not 1 <= team_size <= 5:
            raise ValueError("team_size must be between 1 and 5")
        self.client = client
        self.lobby_name = lobby_name
        self.game_mode = game_mode
        self.game_type = game_type
        self.map_id = map_id
        self.team_size = team_size
        self.password = ""
        self.spectator_policy = SpectatorPolicy.ALL_ALLOWED
        self.bots: list[BotSlot] = []
        self.invitees: list[int] = []

    def with_password(self, password: str) -> LobbyBuilder:
        self.password = password
        return self

    def with_spectator_policy(self, policy: SpectatorPolicy) -> LobbyBuilder:
        self.spectator_policy = policy
        return self

    def add_bot(
        self,
        champion: ChampionID | int,
        team: TeamID | int,
        difficulty: BotDifficulty | str = BotDifficulty.MEDIUM,
    ) -> LobbyBuilder:
        self.bots.append(BotSlot(champion, team, difficulty))
        return self

    def invite(self, *summoner_ids: int) -> LobbyBuilder:
        self.invitees.extend(summoner_ids)
        return self

    def to_request(self) -> CustomLobbyRequest:
        """Body of the lobby creation request."""
        return CustomLobbyRequest(
            custom_game_lobby=CustomGameLobby(
                configuration=CustomGameConfiguration(
                    game_mode=self.game_mode,
                    map_id=self.map_id,
                    mutators=CustomGameMutators(id=self.game_type),
                    spectator_policy=self.spectator_policy,
                    team_size=self.team_size,
                ),
                lobby_name=self.lobby_name,
                lobby_password=self.password,
            ),
            is_custom=True,
        )

    def build(self) -> Lobby:
        """Create the lobby, add the bots, then send the invitations.

        Returns:
            The lobby as returned by the creation request.

        Raises:
            EndpointError: From the first step that failed; later steps are
                not attempted.
        """
        logger.info("Creating custom lobby %r", self.lobby_name)
        lobby = self.client.get_dto(
            Lobby, "/lol-lobby/v2/lobby", "POST", encode_body(self.to_request())
        )

        for bot in self.bots:
            logger.debug("Adding bot %s to team %s", bot.champion, bot.team)
            lobby.add_bot(bot.champion, bot.team, bot.difficulty)

        if self.invitees:
            logger.debug("Inviting %d summoner(s)", len(self.invitees))
            lobby.invite(*self.invitees)

        return lobby
