"""Replay models (/lol-replays)."""

from pydantic import Field

from qso.models.base import BoundModel


class ReplayMetadata(BoundModel):
    """Download state of a game's replay file."""

    game_id: int = Field(alias="gameId")
    state: str | None = None
    download_progress: int = Field(default=0, alias="downloadProgress")

    def download(self) -> None:
        """Ask the client to download this replay."""
        self.client.download_replay(self.game_id)
