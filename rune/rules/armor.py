"""Armor and magic resistance derived from equipped armor items."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

# Player characters cannot exceed this from equipment.
PC_RESISTANCE_CAP = 3

CAPPED_ACTOR_TYPES = frozenset({"character"})


@dataclass(frozen=True)
class Resistances:
    armor: int
    magic_resist: int
    raw_armor: int
    raw_magic_resist: int

    @property
    def armor_over_cap(self) -> bool:
        return self.raw_armor > self.armor

    @property
    def magic_resist_over_cap(self) -> bool:
        return self.raw_magic_resist > self.magic_resist

    @property
    def over_cap(self) -> bool:
        return self.armor_over_cap or self.magic_resist_over_cap


def _field(item: object, key: str, default: object = None) -> object:
    if isinstance(item, dict):
        return item.get(key, default)
    return getattr(item, key, default)


def aggregate_resistances(items: Iterable[object], actor_type: str) -> Resistances:
    """Sum armor values over equipped ``armor`` items.

    Items may be models or plain mappings. Characters are clamped to
    ``PC_RESISTANCE_CAP``; NPCs and creatures are not.
    """
    armor = magic = 0
    for item in items:
        if _field(item, "type") != "armor" or not _field(item, "equipped", False):
            continue
        armor += _field(item, "armor_value", 0) or 0
        magic += _field(item, "magic_resist_value", 0) or 0
    if actor_type in CAPPED_ACTOR_TYPES:
        return Resistances(
            armor=min(armor, PC_RESISTANCE_CAP),
            magic_resist=min(magic, PC_RESISTANCE_CAP),
            raw_armor=armor,
            raw_magic_resist=magic,
        )
    return Resistances(armor=armor, magic_resist=magic, raw_armor=armor, raw_magic_resist=magic)


def innate_resistances(armor: int, magic_resist: int, actor_type: str) -> Resistances:
    """Stored values for actors wearing no armor items, capped the same way."""
    if actor_type in CAPPED_ACTOR_TYPES:
        return Resistances(
            armor=min(armor, PC_RESISTANCE_CAP),
            magic_resist=min(magic_resist, PC_RESISTANCE_CAP),
            raw_armor=armor,
            raw_magic_resist=magic_resist,
        )
    return Resistances(armor, magic_resist, armor, magic_resist)


def resistance_for(actor: object, magic: bool = False) -> int:
    """Resistance an attack must beat: magic resist for spells, armor otherwise."""
    return actor.magic_resist if magic else actor.armor
