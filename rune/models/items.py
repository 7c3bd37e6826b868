from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BaseItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1)
    description: str = ""
    quantity: int = Field(1, ge=0)


class Equipment(BaseItem):
    type: Literal["equipment"] = "equipment"
    equipped: bool = False


class Weapon(BaseItem):
    type: Literal["weapon"] = "weapon"
    equipped: bool = False
    weapon_type: Literal["melee", "ranged", "magic"] = "melee"
    # weapons carry no damage dice; damage comes from the attack roll
    damage_note: str = "Damage = Attack Roll - Target Armor"


class Armor(BaseItem):
    type: Literal["armor"] = "armor"
    equipped: bool = False
    armor_value: int = Field(1, ge=0, le=3)
    magic_resist_value: int = Field(0, ge=0, le=3)
    armor_type: Literal["light", "medium", "heavy", "shield"] = "light"


class Spell(BaseItem):
    type: Literal["spell"] = "spell"
    spell_school: str = ""
    casting_time: str = "1 action"
    range: str = "Touch"
    duration: str = "Instantaneous"


class Trait(BaseItem):
    type: Literal["trait"] = "trait"
    trait_type: Literal["advantage", "background", "feature", "flaw"] = "feature"
    grants_advantage: bool = False
    advantage_conditions: str = ""


Item = Annotated[
    Union[Equipment, Weapon, Armor, Spell, Trait],
    Field(discriminator="type"),
]

_ITEM_ADAPTER = TypeAdapter(Item)

# sheet tab -> item type
ITEM_GROUPS: Dict[str, str] = {
    "equipment": "equipment",
    "weapons": "weapon",
    "armor": "armor",
    "spells": "spell",
    "traits": "trait",
}


def parse_item(data: dict) -> Item:
    return _ITEM_ADAPTER.validate_python(data)


def toggle_equipped(item: Item) -> Item:
    """Return a copy with ``equipped`` flipped; items without it are unchanged."""
    if not hasattr(item, "equipped"):
        return item
    return item.model_copy(update={"equipped": not item.equipped})


def grants_advantage(item: Item) -> bool:
    return item.type == "trait" and item.grants_advantage


def group_items(items: List[Item]) -> Dict[str, List[Item]]:
    groups: Dict[str, List[Item]] = {name: [] for name in ITEM_GROUPS}
    by_type = {t: name for name, t in ITEM_GROUPS.items()}
    for it in items:
        groups[by_type[it.type]].append(it)
    return groups
