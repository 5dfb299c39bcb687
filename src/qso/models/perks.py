"""Rune page models (/lol-perks)."""

from pydantic import Field

from qso.models.base import BoundModel


class PerkPageResource(BoundModel):
    """A rune page."""

    id: int
    name: str
    current: bool = False
    is_active: bool = Field(default=False, alias="isActive")
    is_deletable: bool = Field(default=False, alias="isDeletable")
    is_editable: bool = Field(default=False, alias="isEditable")
    is_valid: bool = Field(default=False, alias="isValid")
    order: int | None = None
    primary_style_id: int | None = Field(default=None, alias="primaryStyleId")
    sub_style_id: int | None = Field(default=None, alias="subStyleId")
    selected_perk_ids: list[int] = Field(default_factory=list, alias="selectedPerkIds")
    last_modified: int | None = Field(default=None, alias="lastModified")

    def make_current(self) -> None:
        """Select this page as the current rune page."""
        self.client.call("/lol-perks/v1/currentpage", "PUT", str(self.id))

    def delete(self) -> None:
        self.client.call("/lol-perks/v1/pages/{0}", "DELETE", None, self.id)
