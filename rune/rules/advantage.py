from __future__ import annotations

from typing import Dict, Iterable

# Levels offered by the roll dialog.
ADVANTAGE_CHOICES: Dict[int, str] = {
    0: "Normal",
    1: "Advantage (+1d6)",
    2: "Advantage x2 (+2d6)",
    -1: "Disadvantage (-1d6)",
    -2: "Disadvantage x2 (-2d6)",
}

MAX_ADVANTAGE = 2


def advantage_label(level: int) -> str:
    """Flavor suffix such as ``"1 Advantage"``; empty for a normal roll."""
    if level == 0:
        return ""
    kind = "Advantage" if level > 0 else "Disadvantage"
    return f"{abs(level)} {kind}"


def trait_advantage(items: Iterable[object]) -> int:
    """Count traits that grant advantage on checks."""
    from rune.models.items import grants_advantage

    return sum(1 for item in items if grants_advantage(item))
