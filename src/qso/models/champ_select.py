"""Champion select models (/lol-champ-select)."""

from __future__ import annotations

from pydantic import Field

from qso.models.base import BoundModel, QsoModel
from qso.models.constants import ChampionID
from qso.models.requests import ChampSelectActionRequest
from qso.serialization import encode_body


class ChampSelectAction(QsoModel):
    """A pick or ban action."""

    id: int
    actor_cell_id: int = Field(alias="actorCellId")
    champion_id: int = Field(default=0, alias="championId")
    type: str
    completed: bool = False
    is_ally_action: bool = Field(default=False, alias="isAllyAction")
    is_in_progress: bool = Field(default=False, alias="isInProgress")


class ChampSelectPlayerSelection(QsoModel):
    """A player slot on one of the two teams."""

    cell_id: int = Field(alias="cellId")
    summoner_id: int | None = Field(default=None, alias="summonerId")
    champion_id: int = Field(default=0, alias="championId")
    champion_pick_intent: int = Field(default=0, alias="championPickIntent")
    assigned_position: str | None = Field(default=None, alias="assignedPosition")
    selected_skin_id: int | None = Field(default=None, alias="selectedSkinId")
    spell1_id: int | None = Field(default=None, alias="spell1Id")
    spell2_id: int | None = Field(default=None, alias="spell2Id")
    team: int | None = None


class ChampSelectBans(QsoModel):
    my_team_bans: list[int] = Field(default_factory=list, alias="myTeamBans")
    their_team_bans: list[int] = Field(default_factory=list, alias="theirTeamBans")
    num_bans: int = Field(default=0, alias="numBans")


class ChampSelectTimer(QsoModel):
    phase: str | None = None
    adjusted_time_left_in_phase: int | None = Field(
        default=None, alias="adjustedTimeLeftInPhase"
    )
    total_time_in_phase: int | None = Field(default=None, alias="totalTimeInPhase")
    is_infinite: bool = Field(default=False, alias="isInfinite")


class ChampSelectSession(BoundModel):
    """The current champion select session."""

    game_id: int | None = Field(default=None, alias="gameId")
    local_player_cell_id: int = Field(default=-1, alias="localPlayerCellId")
    actions: list[list[ChampSelectAction]] = Field(default_factory=list)
    my_team: list[ChampSelectPlayerSelection] = Field(
        default_factory=list, alias="myTeam"
    )
    their_team: list[ChampSelectPlayerSelection] = Field(
        default_factory=list, alias="theirTeam"
    )
    bans: ChampSelectBans | None = None
    timer: ChampSelectTimer | None = None
    allow_rerolling: bool = Field(default=False, alias="allowRerolling")
    is_spectating: bool = Field(default=False, alias="isSpectating")

    def local_actions(self) -> list[ChampSelectAction]:
        """Actions belonging to the local player's cell."""
        return [
            action
            for turn in self.actions
            for action in turn
            if action.actor_cell_id == self.local_player_cell_id
        ]

    def select_champion(
        self,
        action: ChampSelectAction | int,
        champion: ChampionID | int,
        complete: bool = True,
    ) -> None:
        """Hover a champion for a pick/ban action, locking it in if ``complete``."""
        action_id = action if isinstance(action, int) else action.id
        body = ChampSelectActionRequest(champion_id=int(champion), completed=complete)
        self.client.call(
            "/lol-champ-select/v1/session/actions/{0}",
            "PATCH",
            encode_body(body),
            action_id,
        )
