"""Chat models (/lol-chat)."""

from pydantic import Field

from qso.models.base import QsoModel


class ChatUser(QsoModel):
    """A chat contact as returned by /lol-chat/v1/friends."""

    id: str
    pid: str | None = None
    puuid: str | None = None
    summoner_id: int | None = Field(default=None, alias="summonerId")
    name: str | None = None
    game_name: str | None = Field(default=None, alias="gameName")
    game_tag: str | None = Field(default=None, alias="gameTag")
    availability: str | None = None
    status_message: str | None = Field(default=None, alias="statusMessage")
    icon: int | None = None
    product_name: str | None = Field(default=None, alias="productName")
    group_id: int | None = Field(default=None, alias="groupId")
    group_name: str | None = Field(default=None, alias="groupName")
    note: str | None = None
    lol: dict[str, str] = Field(default_factory=dict)


class MyChatUser(ChatUser):
    """The logged-in user's chat presence (/lol-chat/v1/me)."""

    platform_id: str | None = Field(default=None, alias="platformId")
