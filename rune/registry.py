"""Type registry: subtype name -> schema model, built once at start-up."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Tuple, Type

from pydantic import BaseModel

from .models.actors import Character, Creature, Npc
from .models.items import Armor, Equipment, Spell, Trait, Weapon


class UnknownTypeError(KeyError):
    pass


@dataclass(frozen=True)
class TrackableAttributes:
    bar: Tuple[str, ...]
    value: Tuple[str, ...]


_COMMON_VALUES = (
    "approaches.might",
    "approaches.guile",
    "approaches.vision",
    "armor",
    "magic_resist",
)


@dataclass(frozen=True)
class Registry:
    actor_types: Mapping[str, Type[BaseModel]]
    item_types: Mapping[str, Type[BaseModel]]
    trackable: Mapping[str, TrackableAttributes]

    def actor_model(self, name: str) -> Type[BaseModel]:
        try:
            return self.actor_types[name]
        except KeyError:
            raise UnknownTypeError(f"Unknown actor type: {name}") from None

    def item_model(self, name: str) -> Type[BaseModel]:
        try:
            return self.item_types[name]
        except KeyError:
            raise UnknownTypeError(f"Unknown item type: {name}") from None

    def trackable_for(self, actor_type: str) -> TrackableAttributes:
        try:
            return self.trackable[actor_type]
        except KeyError:
            raise UnknownTypeError(f"Unknown actor type: {actor_type}") from None


def build_registry() -> Registry:
    actors = {"character": Character, "npc": Npc, "creature": Creature}
    items = {
        "equipment": Equipment,
        "weapon": Weapon,
        "armor": Armor,
        "spell": Spell,
        "trait": Trait,
    }
    trackable = {
        "character": TrackableAttributes(
            bar=("stamina",), value=_COMMON_VALUES + ("level", "experience")
        ),
        "npc": TrackableAttributes(bar=("stamina",), value=_COMMON_VALUES),
        "creature": TrackableAttributes(bar=("stamina",), value=_COMMON_VALUES),
    }
    return Registry(
        actor_types=MappingProxyType(actors),
        item_types=MappingProxyType(items),
        trackable=MappingProxyType(trackable),
    )


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    return build_registry()
