"""Base models shared by all League client DTOs.

DTOs are frozen snapshots of server state. Models that expose convenience
methods (Lobby, PlayerLoot, ...) derive from BoundModel: the client that
deserialized them binds itself so the methods can issue further requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, PrivateAttr

from qso.exceptions import UnboundModelError

if TYPE_CHECKING:
    from qso.client.league_client import LeagueClient


class QsoModel(BaseModel):
    """Base model for data returned by the League client."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RequestModel(BaseModel):
    """Base model for request bodies sent to the League client."""

    model_config = ConfigDict(populate_by_name=True)


class BoundModel(QsoModel):
    """A DTO whose methods call back into the client that produced it."""

    _client: Any = PrivateAttr(default=None)

    def bind(self, client: LeagueClient) -> None:
        """Attach the owning client. Used only during deserialization."""
        self._client = client

    @property
    def client(self) -> LeagueClient:
        if self._client is None:
            raise UnboundModelError(
                f"{type(self).__name__} is not bound to a LeagueClient"
            )
        return self._client


def bind_result(result: Any, client: LeagueClient) -> Any:
    """Bind ``client`` to a deserialized result (model or list of models)."""
    if isinstance(result, BoundModel):
        result.bind(client)
    elif isinstance(result, list):
        for item in result:
            if isinstance(item, BoundModel):
                item.bind(client)
    return result
