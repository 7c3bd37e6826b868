from .advantage import ADVANTAGE_CHOICES, MAX_ADVANTAGE, advantage_label, trait_advantage
from .armor import (
    PC_RESISTANCE_CAP,
    Resistances,
    aggregate_resistances,
    innate_resistances,
    resistance_for,
)
from .checks import (
    AttackResult,
    CheckResult,
    classify_attack,
    classify_check,
    pool_size,
    resolve_attack,
    resolve_check,
    roll_pool,
    select_dice,
)
from .config import public_rolls_enabled
from .outcomes import AttackOutcome, CheckOutcome
from .stamina import DamageResult, HealResult, apply_damage, clamp_stamina, heal_stamina

__all__ = [
    # Checks
    "pool_size",
    "roll_pool",
    "select_dice",
    "classify_check",
    "classify_attack",
    "resolve_check",
    "resolve_attack",
    "CheckResult",
    "AttackResult",
    "CheckOutcome",
    "AttackOutcome",
    # Advantage
    "ADVANTAGE_CHOICES",
    "MAX_ADVANTAGE",
    "advantage_label",
    "trait_advantage",
    # Stamina & armor
    "apply_damage",
    "heal_stamina",
    "clamp_stamina",
    "DamageResult",
    "HealResult",
    "PC_RESISTANCE_CAP",
    "Resistances",
    "aggregate_resistances",
    "innate_resistances",
    "resistance_for",
    # Config
    "public_rolls_enabled",
]
