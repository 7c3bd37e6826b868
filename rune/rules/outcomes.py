"""Outcome tiers for checks and attacks."""
from __future__ import annotations

from enum import Enum


class CheckOutcome(str, Enum):
    GLORY = "glory"
    RUIN = "ruin"
    SUCCESS = "success"
    COMPLICATION = "complication"
    FAILURE = "failure"

    @property
    def label(self) -> str:
        return _CHECK_LABELS[self]

    @property
    def style(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _CHECK_DESCRIPTIONS[self]


class AttackOutcome(str, Enum):
    GLORY = "glory"
    RUIN = "ruin"
    HIT = "hit"
    BLOCKED = "blocked"
    MISS = "miss"

    @property
    def label(self) -> str:
        return _ATTACK_LABELS[self]

    @property
    def style(self) -> str:
        # attack cards reuse the check colour classes
        return _ATTACK_STYLES[self]


_CHECK_LABELS = {
    CheckOutcome.GLORY: "GLORY! (6-6)",
    CheckOutcome.RUIN: "RUIN! (1-1)",
    CheckOutcome.SUCCESS: "SUCCESS!",
    CheckOutcome.COMPLICATION: "COMPLICATION",
    CheckOutcome.FAILURE: "FAILURE",
}

_CHECK_DESCRIPTIONS = {
    CheckOutcome.GLORY: "The character must be rewarded appropriately!",
    CheckOutcome.RUIN: "Suffer all consequences and a major disaster!",
    CheckOutcome.SUCCESS: "The action succeeds without problem.",
    CheckOutcome.COMPLICATION: "Partially successful. Something goes wrong.",
    CheckOutcome.FAILURE: "Suffer all of the action's consequences.",
}

_ATTACK_LABELS = {
    AttackOutcome.GLORY: "GLORY!",
    AttackOutcome.RUIN: "RUIN!",
    AttackOutcome.HIT: "HIT!",
    AttackOutcome.BLOCKED: "BLOCKED",
    AttackOutcome.MISS: "MISS",
}

_ATTACK_STYLES = {
    AttackOutcome.GLORY: "glory",
    AttackOutcome.RUIN: "ruin",
    AttackOutcome.HIT: "success",
    AttackOutcome.BLOCKED: "complication",
    AttackOutcome.MISS: "failure",
}
