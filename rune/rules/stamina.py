from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DamageResult:
    before: int
    after: int
    amount: int

    @property
    def lethal(self) -> bool:
        """Stamina is depleted; the next hit is lethal."""
        return self.after == 0


@dataclass(frozen=True)
class HealResult:
    before: int
    after: int

    @property
    def healed(self) -> int:
        return self.after - self.before

    @property
    def changed(self) -> bool:
        return self.healed > 0


def clamp_stamina(value: int, maximum: int) -> int:
    return max(0, min(value, maximum))


def apply_damage(current: int, amount: int) -> DamageResult:
    """Subtract ``amount`` from stamina, never going below zero."""
    if amount < 0:
        raise ValueError(f"damage must be non-negative, got {amount}")
    return DamageResult(before=current, after=max(0, current - amount), amount=amount)


def heal_stamina(current: int, maximum: int, amount: int) -> HealResult:
    """Restore up to ``amount`` stamina, capped at ``maximum``.

    ``HealResult.changed`` is False when nothing was restored; callers skip
    the notification in that case.
    """
    if amount < 0:
        raise ValueError(f"healing must be non-negative, got {amount}")
    return HealResult(before=current, after=min(maximum, current + amount))
