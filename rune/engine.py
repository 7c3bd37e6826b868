"""RulesEngine: the rules bound to one die source.

The pure functions in :mod:`rune.rules` take the roller explicitly; the
engine binds it once and adds actor-level helpers that return updated actor
copies instead of mutating them.
"""
from __future__ import annotations

from typing import Optional, Tuple

from .logging import get_logger
from .models.actors import Actor
from .rng import RNG, DieRoller
from .rules.armor import resistance_for
from .rules.checks import AttackResult, CheckResult, resolve_attack, resolve_check
from .rules.stamina import DamageResult, HealResult, apply_damage, heal_stamina
from .settings import Settings, load_settings

log = get_logger(__name__)


class RulesEngine:
    def __init__(self, roller: Optional[DieRoller] = None, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self.roller: DieRoller = roller or RNG(self.settings.seed)

    # --- Pure rules ---------------------------------------------------------

    def resolve_check(self, base_value: int, advantage: int = 0) -> CheckResult:
        result = resolve_check(base_value, advantage, self.roller)
        log.debug(
            "check base=%s adv=%s rolled=%s kept=%s total=%s -> %s",
            base_value, advantage, result.rolled, result.selected, result.total, result.outcome.value,
        )
        return result

    def resolve_attack(
        self, base_value: int, advantage: int = 0, resistance: Optional[int] = None
    ) -> AttackResult:
        result = resolve_attack(base_value, advantage, resistance, self.roller)
        log.debug(
            "attack base=%s adv=%s vs=%s total=%s damage=%s -> %s",
            base_value, advantage, resistance, result.total, result.damage,
            result.outcome.value if result.outcome else None,
        )
        return result

    def apply_damage(self, current: int, amount: int) -> DamageResult:
        return apply_damage(current, amount)

    def heal_stamina(self, current: int, maximum: int, amount: int) -> HealResult:
        return heal_stamina(current, maximum, amount)

    # --- Actor helpers ------------------------------------------------------

    def roll_check(self, actor: Actor, approach: str, advantage: int = 0) -> CheckResult:
        return self.resolve_check(actor.approach(approach), advantage)

    def roll_attack(
        self,
        actor: Actor,
        approach: str,
        target: Optional[Actor] = None,
        magic: bool = False,
        advantage: int = 0,
    ) -> AttackResult:
        resistance = resistance_for(target, magic) if target is not None else None
        return self.resolve_attack(actor.approach(approach), advantage, resistance)

    def damage_actor(self, actor: Actor, amount: int) -> Tuple[Actor, DamageResult]:
        result = apply_damage(actor.stamina.value, amount)
        if result.lethal:
            log.info("%s stamina depleted", actor.name)
        return _with_stamina(actor, result.after), result

    def heal_actor(self, actor: Actor, amount: int) -> Tuple[Actor, HealResult]:
        result = heal_stamina(actor.stamina.value, actor.stamina.max, amount)
        if not result.changed:
            return actor, result
        return _with_stamina(actor, result.after), result


def _with_stamina(actor: Actor, value: int) -> Actor:
    stamina = actor.stamina.model_copy(update={"value": value})
    return actor.model_copy(update={"stamina": stamina})
