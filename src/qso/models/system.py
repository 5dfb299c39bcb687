"""Client-wide models: build info, queues and service status."""

from pydantic import Field

from qso.models.base import QsoModel


class BuildInfo(QsoModel):
    """Client build information (/system/v1/builds)."""

    branch: str | None = None
    version: str | None = None
    game_branch: str | None = Field(default=None, alias="gameBranch")
    game_branch_full: str | None = Field(default=None, alias="gameBranchFull")


class Queue(QsoModel):
    """A matchmaking queue (/lol-game-queues/v1/queues)."""

    id: int
    name: str | None = None
    short_name: str | None = Field(default=None, alias="shortName")
    description: str | None = None
    detailed_description: str | None = Field(default=None, alias="detailedDescription")
    game_mode: str | None = Field(default=None, alias="gameMode")
    map_id: int | None = Field(default=None, alias="mapId")
    type: str | None = None
    category: str | None = None
    is_ranked: bool = Field(default=False, alias="isRanked")
    queue_availability: str | None = Field(default=None, alias="queueAvailability")


class ServiceStatusTickerMessage(QsoModel):
    """A service status message shown in the client ticker."""

    heading: str | None = None
    message: str | None = None
    severity: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class ContentFilters(QsoModel):
    """Content targeting filters applied to the account."""

    filters: list[str] = Field(default_factory=list)
