from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter, field_serializer

from rune.rules.armor import Resistances, aggregate_resistances, innate_resistances
from rune.rules.stamina import clamp_stamina

from .items import Item, group_items

APPROACHES = ("might", "guile", "vision")


class Approaches(BaseModel):
    model_config = ConfigDict(extra="forbid")

    might: int = Field(0, ge=0, le=10)
    guile: int = Field(0, ge=0, le=10)
    vision: int = Field(0, ge=0, le=10)

    def get(self, name: str) -> int:
        key = name.lower()
        if key not in APPROACHES:
            raise ValueError(f"Unknown approach: {name}")
        return getattr(self, key)

    @property
    def total(self) -> int:
        return self.might + self.guile + self.vision


class Stamina(BaseModel):
    model_config = ConfigDict(extra="forbid")

    value: int = 10
    max: int = 10


class BaseActor(BaseModel):
    # Unknown keys fail loudly; saving would otherwise drop them.
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1)
    approaches: Approaches = Field(default_factory=Approaches)
    stamina: Stamina = Field(default_factory=Stamina)
    armor: int = Field(0, ge=0)
    magic_resist: int = Field(0, ge=0)
    biography: str = ""
    spells_inventions: str = ""
    currency: int = Field(1000, ge=0)
    pronouns: str = ""
    origin: str = ""
    class_: str = Field("", alias="class")
    items: List[Item] = Field(default_factory=list)

    _resistances: Optional[Resistances] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        value = clamp_stamina(self.stamina.value, self.stamina.max)
        if value != self.stamina.value:
            # The passed-in Stamina may belong to the caller.
            self.stamina = self.stamina.model_copy(update={"value": value})
        res = self._derive_resistances()
        self._resistances = res
        self.armor = res.armor
        self.magic_resist = res.magic_resist

    def _derive_resistances(self) -> Resistances:
        if any(it.type == "armor" for it in self.items):
            return aggregate_resistances(self.items, self.type)
        return innate_resistances(self.armor, self.magic_resist, self.type)

    def resistances(self) -> Resistances:
        """Derived armor and magic resist.

        Actors wearing no armor items use their stored values (innate armor).
        Characters are capped either way; ``raw_*`` keeps the uncapped sums.
        """
        if self._resistances is None:
            self._resistances = self._derive_resistances()
        return self._resistances

    # Files keep the stored value so a capped character is not rewritten.
    @field_serializer("armor")
    def _dump_armor(self, value: int) -> int:
        return self.resistances().raw_armor

    @field_serializer("magic_resist")
    def _dump_magic_resist(self, value: int) -> int:
        return self.resistances().raw_magic_resist

    # --- Derived ---
    @property
    def total_approaches(self) -> int:
        return self.approaches.total

    @property
    def armor_over_max(self) -> bool:
        return False

    @property
    def magic_resist_over_max(self) -> bool:
        return False

    def approach(self, name: str) -> int:
        return self.approaches.get(name)

    def grouped_items(self):
        return group_items(self.items)


class Character(BaseActor):
    type: Literal["character"] = "character"
    level: int = Field(1, ge=1)
    experience: int = Field(0, ge=0)

    @property
    def armor_over_max(self) -> bool:
        return self.resistances().armor_over_cap

    @property
    def magic_resist_over_max(self) -> bool:
        return self.resistances().magic_resist_over_cap


class Npc(BaseActor):
    type: Literal["npc"] = "npc"
    disposition: Literal["friendly", "neutral", "hostile"] = "neutral"


class Creature(BaseActor):
    type: Literal["creature"] = "creature"
    creature_type: Literal["common", "elite", "boss", "legendary"] = "common"
    special_abilities: str = ""

    @property
    def ignores_armor_limit(self) -> bool:
        return self.creature_type in ("boss", "legendary")


Actor = Annotated[
    Union[Character, Npc, Creature],
    Field(discriminator="type"),
]

_ACTOR_ADAPTER = TypeAdapter(Actor)


def parse_actor(data: dict) -> Actor:
    return _ACTOR_ADAPTER.validate_python(data)


def rederive(actor: Actor) -> Actor:
    """Re-run validation so derived armor and stamina reflect current items."""
    return parse_actor(actor.model_dump(by_alias=True))
