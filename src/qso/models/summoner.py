"""Summoner models (/lol-summoner)."""

from pydantic import Field

from qso.models.base import QsoModel


class Summoner(QsoModel):
    """A summoner as returned by /lol-summoner/v1/summoners/{id}."""

    summoner_id: int = Field(alias="summonerId")
    account_id: int | None = Field(default=None, alias="accountId")
    puuid: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    game_name: str | None = Field(default=None, alias="gameName")
    tag_line: str | None = Field(default=None, alias="tagLine")
    internal_name: str | None = Field(default=None, alias="internalName")
    profile_icon_id: int | None = Field(default=None, alias="profileIconId")
    summoner_level: int | None = Field(default=None, alias="summonerLevel")
    percent_complete_for_next_level: int | None = Field(
        default=None, alias="percentCompleteForNextLevel"
    )
    xp_since_last_level: int | None = Field(default=None, alias="xpSinceLastLevel")
    xp_until_next_level: int | None = Field(default=None, alias="xpUntilNextLevel")
    privacy: str | None = None

    @property
    def riot_id(self) -> str | None:
        """``gameName#tagLine`` if both parts are known."""
        if self.game_name and self.tag_line:
            return f"{self.game_name}#{self.tag_line}"
        return None


class MySummoner(Summoner):
    """The logged-in summoner (/lol-summoner/v1/current-summoner)."""

    name_change_flag: bool | None = Field(default=None, alias="nameChangeFlag")
    unnamed: bool | None = None
