"""WebSocket event envelope."""

from typing import Any

from pydantic import Field

from qso.models.base import QsoModel


class EndpointEvent(QsoModel):
    """One event pushed by the client, e.g. an update of /lol-lobby/v2/lobby.

    Attributes:
        uri: Endpoint whose state changed.
        event_type: "Create", "Update" or "Delete".
        data: New state of the endpoint, as raw JSON.
    """

    uri: str
    event_type: str = Field(alias="eventType")
    data: Any = None
