from .actors import (
    APPROACHES,
    Actor,
    Approaches,
    Character,
    Creature,
    Npc,
    Stamina,
    parse_actor,
    rederive,
)
from .items import (
    Armor,
    Equipment,
    Item,
    Spell,
    Trait,
    Weapon,
    grants_advantage,
    group_items,
    parse_item,
    toggle_equipped,
)

__all__ = [
    "APPROACHES",
    "Actor",
    "Approaches",
    "Character",
    "Creature",
    "Npc",
    "Stamina",
    "parse_actor",
    "rederive",
    "Item",
    "Armor",
    "Equipment",
    "Spell",
    "Trait",
    "Weapon",
    "grants_advantage",
    "group_items",
    "parse_item",
    "toggle_equipped",
]
