"""Shared fixtures for qso tests.

This module provides:
- Custom markers for test categorization
- A Connection and configuration that never touch the network
- Canned response bodies used across the unit tests
"""

import json

import pytest

from qso.config import QsoConfig
from qso.connection import Connection


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring a running League client",
    )


BUILD_BODY = json.dumps(
    {
        "branch": "LeagueClient_release_14.21",
        "version": "14.21.620.1234",
        "gameBranch": "Releases/14.21",
        "gameBranchFull": "Releases/14.21 (full)",
    }
)

SUMMONER_BODY = json.dumps(
    {
        "summonerId": 2468,
        "accountId": 1357,
        "puuid": "a1b2c3",
        "displayName": "Teemo Enjoyer",
        "gameName": "Teemo Enjoyer",
        "tagLine": "EUW",
        "summonerLevel": 87,
        "nameChangeFlag": False,
        "unnamed": False,
    }
)

LOBBY_BODY = json.dumps(
    {
        "partyId": "party-1",
        "partyType": "open",
        "canStartActivity": True,
        "localMember": {"summonerId": 2468, "isLeader": True},
        "members": [
            {"summonerId": 2468, "isLeader": True},
            {"summonerId": 1111, "summonerName": "Friend"},
        ],
        "gameConfig": {"queueId": 450, "gameMode": "ARAM", "mapId": 12},
    }
)


@pytest.fixture
def connection() -> Connection:
    """Explicit connection parameters for a fake local client."""
    return Connection(host="127.0.0.1", port=51234, password="s3cret")


@pytest.fixture
def offline_config() -> QsoConfig:
    """Configuration that does not open the WebSocket event stream."""
    return QsoConfig(subscribe_events=False, connect_timeout=1.0)


@pytest.fixture
def build_body() -> str:
    return BUILD_BODY


@pytest.fixture
def summoner_body() -> str:
    return SUMMONER_BODY


@pytest.fixture
def lobby_body() -> str:
    return LOBBY_BODY
