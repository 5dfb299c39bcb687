"""Loot (Hextech crafting) models (/lol-loot)."""

from __future__ import annotations

from pydantic import Field

from qso.models.base import BoundModel, QsoModel


class LootRecipeSlot(QsoModel):
    slot_number: int | None = Field(default=None, alias="slotNumber")
    loot_ids: list[str] = Field(default_factory=list, alias="lootIds")
    quantity: int | None = None


class LootRecipeOutput(QsoModel):
    loot_name: str | None = Field(default=None, alias="lootName")
    quantity: int | None = None


class LootRecipe(QsoModel):
    """A crafting recipe that can consume a loot item."""

    recipe_name: str = Field(alias="recipeName")
    type: str | None = None
    description: str | None = None
    context_menu_text: str | None = Field(default=None, alias="contextMenuText")
    crafter_name: str | None = Field(default=None, alias="crafterName")
    slots: list[LootRecipeSlot] = Field(default_factory=list)
    outputs: list[LootRecipeOutput] = Field(default_factory=list)


class PlayerLoot(BoundModel):
    """An item in the player's loot inventory."""

    loot_id: str = Field(alias="lootId")
    loot_name: str | None = Field(default=None, alias="lootName")
    localized_name: str | None = Field(default=None, alias="localizedName")
    item_desc: str | None = Field(default=None, alias="itemDesc")
    type: str | None = None
    display_categories: str | None = Field(default=None, alias="displayCategories")
    rarity: str | None = None
    count: int = 0
    disenchant_value: int | None = Field(default=None, alias="disenchantValue")
    upgrade_loot_name: str | None = Field(default=None, alias="upgradeLootName")
    store_item_id: int | None = Field(default=None, alias="storeItemId")
    is_rental: bool = Field(default=False, alias="isRental")
    expiry_time: int | None = Field(default=None, alias="expiryTime")

    def get_recipes(self) -> list[LootRecipe]:
        """Recipes that take this item as their first ingredient."""
        return self.client.get_dto(
            list[LootRecipe],
            "/lol-loot/v1/recipes/initial-item/{0}",
            "GET",
            None,
            self.loot_id,
        )

    def craft(self, recipe: LootRecipe | str, repeat: int = 0) -> PlayerLootUpdate:
        """Craft ``recipe`` using this item."""
        return self.client.craft_recipe(self, recipe, repeat)


class PlayerLootDelta(QsoModel):
    delta_count: int = Field(default=0, alias="deltaCount")
    player_loot: dict | None = Field(default=None, alias="playerLoot")


class PlayerLootUpdate(QsoModel):
    """Result of a craft: items added, redeemed and removed."""

    added: list[PlayerLootDelta] = Field(default_factory=list)
    redeemed: list[PlayerLootDelta] = Field(default_factory=list)
    removed: list[PlayerLootDelta] = Field(default_factory=list)
