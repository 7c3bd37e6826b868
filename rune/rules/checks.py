"""2d6 + approach resolution with advantage pools.

A roll uses ``2 + |advantage|`` six-sided dice and always keeps exactly two:
the highest pair with advantage, the lowest pair with disadvantage. The kept
pair plus the approach score is the total.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..rng import DieRoller
from .outcomes import AttackOutcome, CheckOutcome

Pair = Tuple[int, int]

KEPT_DICE = 2
SUCCESS_AT = 10
COMPLICATION_AT = 6


@dataclass(frozen=True)
class CheckResult:
    rolled: Tuple[int, ...]        # full pool, highest first
    selected: Pair                 # kept pair, highest first
    dice_sum: int
    modifier: int
    total: int
    advantage: int
    outcome: CheckOutcome


@dataclass(frozen=True)
class AttackResult:
    rolled: Tuple[int, ...]
    selected: Pair
    dice_sum: int
    modifier: int
    total: int
    advantage: int
    resistance: Optional[int] = None
    damage: Optional[int] = None
    outcome: Optional[AttackOutcome] = None

    @property
    def has_target(self) -> bool:
        return self.resistance is not None


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def pool_size(advantage: int) -> int:
    return KEPT_DICE + abs(advantage)


def roll_pool(advantage: int, roller: DieRoller) -> Tuple[int, ...]:
    """Roll the advantage pool and return it sorted highest first."""
    faces = [roller() for _ in range(pool_size(advantage))]
    return tuple(sorted(faces, reverse=True))


def select_dice(pool: Sequence[int], advantage: int) -> Pair:
    """Keep two dice from a descending ``pool``.

    Advantage keeps the first two, disadvantage the last two. With no
    advantage the pool holds exactly two dice, so both are kept.
    """
    if advantage < 0:
        kept = pool[-KEPT_DICE:]
    else:
        kept = pool[:KEPT_DICE]
    return (kept[0], kept[1])


def is_glory(selected: Pair) -> bool:
    return selected[0] == 6 and selected[1] == 6


def is_ruin(selected: Pair) -> bool:
    return selected[0] == 1 and selected[1] == 1


def classify_check(selected: Pair, total: int) -> CheckOutcome:
    if is_glory(selected):
        return CheckOutcome.GLORY
    if is_ruin(selected):
        return CheckOutcome.RUIN
    if total >= SUCCESS_AT:
        return CheckOutcome.SUCCESS
    if total >= COMPLICATION_AT:
        return CheckOutcome.COMPLICATION
    return CheckOutcome.FAILURE


def classify_attack(selected: Pair, total: int, resistance: int) -> AttackOutcome:
    if is_glory(selected):
        return AttackOutcome.GLORY
    if is_ruin(selected):
        return AttackOutcome.RUIN
    if total > resistance:
        return AttackOutcome.HIT
    if total == resistance:
        return AttackOutcome.BLOCKED
    return AttackOutcome.MISS


def _roll(base_value: int, advantage: int, roller: DieRoller):
    _require_int("base_value", base_value)
    _require_int("advantage", advantage)
    pool = roll_pool(advantage, roller)
    selected = select_dice(pool, advantage)
    dice_sum = selected[0] + selected[1]
    return pool, selected, dice_sum, dice_sum + base_value


def resolve_check(base_value: int, advantage: int, roller: DieRoller) -> CheckResult:
    """Roll a check of ``base_value`` (an approach score) at ``advantage``."""
    pool, selected, dice_sum, total = _roll(base_value, advantage, roller)
    return CheckResult(
        rolled=pool,
        selected=selected,
        dice_sum=dice_sum,
        modifier=base_value,
        total=total,
        advantage=advantage,
        outcome=classify_check(selected, total),
    )


def resolve_attack(
    base_value: int,
    advantage: int,
    resistance: Optional[int],
    roller: DieRoller,
) -> AttackResult:
    """Roll an attack; ``resistance`` is the target's armor or magic resist.

    Without a target (``resistance=None``) only the roll and total are
    reported. Glory and Ruin do not change the damage formula.
    """
    if resistance is not None:
        _require_int("resistance", resistance)
    pool, selected, dice_sum, total = _roll(base_value, advantage, roller)
    if resistance is None:
        return AttackResult(
            rolled=pool,
            selected=selected,
            dice_sum=dice_sum,
            modifier=base_value,
            total=total,
            advantage=advantage,
        )
    return AttackResult(
        rolled=pool,
        selected=selected,
        dice_sum=dice_sum,
        modifier=base_value,
        total=total,
        advantage=advantage,
        resistance=resistance,
        damage=max(0, total - resistance),
        outcome=classify_attack(selected, total, resistance),
    )
