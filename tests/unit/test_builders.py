"""Unit tests for LobbyBuilder and ChatProfileBuilder."""

import json
from unittest.mock import MagicMock

import pytest

from qso.builders import BotSlot, ChatProfileBuilder, LobbyBuilder
from qso.exceptions import EndpointError
from qso.models import (
    Availability,
    BotDifficulty,
    ChampionID,
    GameType,
    Lobby,
    MapID,
    MyChatUser,
    SpectatorPolicy,
    TeamID,
)


@pytest.fixture
def client() -> MagicMock:
    """A LeagueClient stand-in that returns a lobby bound to itself."""
    client = MagicMock()
    lobby = Lobby.model_validate({"partyId": "custom"})
    lobby.bind(client)
    client.get_dto.return_value = lobby
    return client


class TestLobbyBuilder:
    """Tests for LobbyBuilder."""

    def test_request_body(self, client: MagicMock) -> None:
        """Test the creation body holds the custom game configuration."""
        builder = (
            LobbyBuilder(client, "Practice", "ARAM", GameType.ALL_RANDOM, MapID.HOWLING_ABYSS, 5)
            .with_password("hunter2")
            .with_spectator_policy(SpectatorPolicy.NOT_ALLOWED)
        )

        body = json.loads(builder.to_request().model_dump_json(by_alias=True, exclude_none=True))

        assert body == {
            "customGameLobby": {
                "configuration": {
                    "gameMode": "ARAM",
                    "gameMutator": "",
                    "gameServerRegion": "",
                    "mapId": 12,
                    "mutators": {"id": 4},
                    "spectatorPolicy": "NotAllowed",
                    "teamSize": 5,
                },
                "lobbyName": "Practice",
                "lobbyPassword": "hunter2",
            },
            "isCustom": True,
        }

    @pytest.mark.parametrize("team_size", [0, 6])
    def test_invalid_team_size(self, client: MagicMock, team_size: int) -> None:
        with pytest.raises(ValueError, match="team_size"):
            LobbyBuilder(client, "Practice", team_size=team_size)

    def test_build_runs_steps_in_order(self, client: MagicMock) -> None:
        """Test creation, then each bot, then the invitations."""
        lobby = (
            LobbyBuilder(client, "Practice")
            .add_bot(ChampionID.Annie, TeamID.CHAOS, BotDifficulty.EASY)
            .add_bot(ChampionID.Garen, TeamID.CHAOS)
            .invite(11, 22)
            .build()
        )

        assert lobby is client.get_dto.return_value
        create_path, create_method = client.get_dto.call_args_list[0].args[1:3]
        assert (create_path, create_method) == ("/lol-lobby/v2/lobby", "POST")

        bot_calls = [c.args for c in client.call.call_args_list]
        assert [c[0] for c in bot_calls] == ["/lol-lobby/v1/lobby/custom/bots"] * 2
        assert json.loads(bot_calls[0][2])["championId"] == int(ChampionID.Annie)
        assert json.loads(bot_calls[1][2])["botDifficulty"] == "MEDIUM"

        invite_call = client.get_dto.call_args_list[1]
        assert invite_call.args[1:3] == ("/lol-lobby/v2/lobby/invitations", "POST")
        assert json.loads(invite_call.args[3]) == [
            {"toSummonerId": 11},
            {"toSummonerId": 22},
        ]

    def test_build_without_bots_or_invites(self, client: MagicMock) -> None:
        """Test a bare lobby takes a single request."""
        LobbyBuilder(client, "Solo").build()
        client.get_dto.assert_called_once()
        client.call.assert_not_called()

    def test_failure_aborts_remaining_steps(self, client: MagicMock) -> None:
        """Test a failing bot stops the build without rollback."""
        client.call.side_effect = [None, EndpointError("bot slot taken", 400)]

        builder = (
            LobbyBuilder(client, "Practice")
            .add_bot(ChampionID.Annie, TeamID.CHAOS)
            .add_bot(ChampionID.Garen, TeamID.CHAOS)
            .add_bot(ChampionID.Ashe, TeamID.CHAOS)
            .invite(11)
        )
        with pytest.raises(EndpointError) as exc_info:
            builder.build()

        assert exc_info.value.status_code == 400
        # The third bot and the invitation are never attempted.
        assert client.call.call_count == 2
        assert client.get_dto.call_count == 1
        assert all(c.args[1] != "DELETE" for c in client.call.call_args_list)

    def test_creation_failure(self, client: MagicMock) -> None:
        client.get_dto.side_effect = EndpointError("not allowed", 403)
        with pytest.raises(EndpointError):
            LobbyBuilder(client, "Practice").add_bot(ChampionID.Annie, TeamID.ORDER).build()

        client.call.assert_not_called()

    def test_bot_slot_defaults(self) -> None:
        assert BotSlot(ChampionID.Annie, TeamID.ORDER).difficulty == BotDifficulty.MEDIUM


class TestChatProfileBuilder:
    """Tests for ChatProfileBuilder."""

    def test_only_set_fields_are_sent(self) -> None:
        client = MagicMock()
        ChatProfileBuilder(client).status_message("afk").availability(
            Availability.AWAY
        ).apply()

        target, path, method, body = client.get_dto.call_args.args
        assert target is MyChatUser
        assert (path, method) == ("/lol-chat/v1/me", "PUT")
        assert json.loads(body) == {"availability": "away", "statusMessage": "afk"}

    def test_ranked_and_icon(self) -> None:
        client = MagicMock()
        ChatProfileBuilder(client).icon(29).ranked("GOLD", "II").lol(
            "challengePoints", "100"
        ).apply()

        body = json.loads(client.get_dto.call_args.args[3])
        assert body == {
            "icon": 29,
            "lol": {
                "rankedLeagueTier": "GOLD",
                "rankedLeagueQueue": "RANKED_SOLO_5x5",
                "rankedLeagueDivision": "II",
                "challengePoints": "100",
            },
        }
