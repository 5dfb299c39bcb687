"""Builder for the local chat presence (PUT /lol-chat/v1/me)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qso.models import Availability, ChatProfileRequest, MyChatUser
from qso.serialization import encode_body

if TYPE_CHECKING:
    from qso.client.league_client import LeagueClient


class ChatProfileBuilder:
    """Collects presence changes and applies them in a single request.

    Only the fields that were set are sent.

    Example:
        client.build_chat_user().status_message("afk").availability(
            Availability.AWAY
        ).apply()
    """

    def __init__(self, client: LeagueClient):
        self.client = client
        self._availability: str | None = None
        self._status_message: str | None = None
        self._icon: int | None = None
        self._lol: dict[str, str] = {}

    def availability(self, availability: Availability | str) -> ChatProfileBuilder:
        self._availability = (
            availability.value if isinstance(availability, Availability) else availability
        )
        return self

    def status_message(self, message: str) -> ChatProfileBuilder:
        self._status_message = message
        return self

    def icon(self, icon_id: int) -> ChatProfileBuilder:
        self._icon = icon_id
        return self

    def ranked(
        self,
        tier: str,
        division: str | None = None,
        queue: str = "RANKED_SOLO_5x5",
    ) -> ChatProfileBuilder:
        """Set the ranked emblem shown to friends."""
        self._lol["rankedLeagueTier"] = tier
        self._lol["rankedLeagueQueue"] = queue
        if division is not None:
            self._lol["rankedLeagueDivision"] = division
        return self

    def lol(self, key: str, value: str) -> ChatProfileBuilder:
        """Set an arbitrary key of the ``lol`` presence map."""
        self._lol[key] = value
        return self

    def to_request(self) -> ChatProfileRequest:
        return ChatProfileRequest(
            availability=self._availability,
            status_message=self._status_message,
            icon=self._icon,
            lol=dict(self._lol) or None,
        )

    def apply(self) -> MyChatUser:
        """Send the changes and return the updated presence."""
        return self.client.get_dto(
            MyChatUser, "/lol-chat/v1/me", "PUT", encode_body(self.to_request())
        )
