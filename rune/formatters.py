"""Plain-text narrative cards for roll results.

These mirror the chat cards a table sees: a flavor line, the dice, the
arithmetic, then the outcome.
"""
from __future__ import annotations

from typing import List, Optional

from .models.items import Spell
from .rules.advantage import advantage_label
from .rules.checks import AttackResult, CheckResult
from .rules.stamina import DamageResult, HealResult

LETHAL_WARNING = "STAMINA DEPLETED! Next hit is lethal!"


def capitalize(text: str) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def _flavor(approach: str, kind: str, advantage: int, magic: bool = False) -> str:
    out = f"{approach.upper()} {kind}"
    if magic:
        out += " (Magic)"
    label = advantage_label(advantage)
    if label:
        out += f" ({label})"
    return out


def _dice_lines(result: CheckResult | AttackResult, approach: str) -> List[str]:
    used = " + ".join(str(d) for d in result.selected)
    lines = [f"Rolled: {', '.join(str(d) for d in result.rolled)}"]
    if result.advantage != 0:
        lines.append(f"Used: {used}")
    lines.append(f"{used} + {result.modifier} ({approach}) = {result.total}")
    return lines


def check_message(result: CheckResult, approach: str) -> str:
    lines = [_flavor(approach, "Check", result.advantage), result.outcome.label]
    lines += _dice_lines(result, approach)
    lines.append(result.outcome.description)
    return "\n".join(lines)


def attack_message(
    result: AttackResult,
    approach: str,
    target_name: Optional[str] = None,
    magic: bool = False,
) -> str:
    lines = [_flavor(approach, "Attack", result.advantage, magic), "Attack Roll"]
    lines += _dice_lines(result, approach)
    if result.has_target:
        kind = "Magic Resistance" if magic else "Armor"
        lines.append(f"Target: {target_name or 'target'}")
        lines.append(f"{kind}: {result.resistance}")
        lines.append(result.outcome.label)
        if result.damage:
            lines.append(f"Damage: {result.damage}")
    return "\n".join(lines)


def damage_message(name: str, result: DamageResult) -> str:
    lines = [
        f"{name} takes {result.amount} damage!",
        f"Stamina: {result.before} → {result.after}",
    ]
    if result.lethal:
        lines.append(f"⚠️ {LETHAL_WARNING}")
    return "\n".join(lines)


def heal_message(name: str, result: HealResult) -> Optional[str]:
    if not result.changed:
        return None
    return f"{name} recovers {result.healed} stamina!\nStamina: {result.before} → {result.after}"


def spell_message(spell: Spell) -> str:
    lines = [spell.name]
    for label, value in (
        ("School", spell.spell_school),
        ("Casting Time", spell.casting_time),
        ("Range", spell.range),
        ("Duration", spell.duration),
    ):
        if value:
            lines.append(f"{label}: {value}")
    lines.append(spell.description or "No description")
    return "\n".join(lines)
