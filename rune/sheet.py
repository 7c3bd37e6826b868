from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rune.formatters import capitalize
from rune.models.actors import APPROACHES, Actor
from rune.rules.advantage import trait_advantage
from rune.rules.armor import PC_RESISTANCE_CAP

# approach -> sheet colour
APPROACH_COLORS = {
    "might": "#c41e3a",
    "guile": "#2c5aa0",
    "vision": "#8b4789",
}

GROUP_TITLES = {
    "equipment": "Equipment",
    "weapons": "Weapons",
    "armor": "Armor",
    "spells": "Spells",
    "traits": "Traits",
}


def approach_block(actor: Actor) -> Table:
    t = Table(box=None, show_header=False, expand=False)
    for a in APPROACHES:
        color = APPROACH_COLORS.get(a, "white")
        t.add_row(f"[bold {color}]{capitalize(a)}[/]", str(actor.approach(a)))
    t.add_row("Total", str(actor.total_approaches))
    bonus = trait_advantage(actor.items)
    if bonus:
        t.add_row("Advantage traits", str(bonus))
    return t


def stamina_bar(value: int, maximum: int, width: int = 10) -> str:
    if maximum <= 0:
        return "—"
    filled = round(width * value / maximum)
    return "█" * filled + "░" * (width - filled) + f" {value}/{maximum}"


def defense_block(actor: Actor) -> Table:
    t = Table(box=None, show_header=False, expand=False)
    t.add_row("Stamina", stamina_bar(actor.stamina.value, actor.stamina.max))
    armor = str(actor.armor)
    if actor.armor_over_max:
        armor += f" (over max {PC_RESISTANCE_CAP})"
    magic = str(actor.magic_resist)
    if actor.magic_resist_over_max:
        magic += f" (over max {PC_RESISTANCE_CAP})"
    t.add_row("Armor", armor)
    t.add_row("Magic Resist", magic)
    if getattr(actor, "ignores_armor_limit", False):
        t.add_row("", "[dim]can exceed armor limits[/dim]")
    return t


def _item_props(item) -> str:
    if item.type == "armor":
        return f"armor {item.armor_value}, magic {item.magic_resist_value}, {item.armor_type}"
    if item.type == "weapon":
        return item.weapon_type
    if item.type == "spell":
        return ", ".join(p for p in (item.spell_school, item.range, item.duration) if p)
    if item.type == "trait":
        return item.trait_type + (" (advantage)" if item.grants_advantage else "")
    return ""


def items_block(items) -> Table:
    t = Table(box=None, show_header=True, expand=False)
    t.add_column("Item")
    t.add_column("Qty")
    t.add_column("Eq.")
    t.add_column("Props")
    if not items:
        t.add_row("—", "—", "", "")
        return t
    for it in items:
        equipped = getattr(it, "equipped", None)
        mark = "" if equipped is None else ("✓" if equipped else "·")
        t.add_row(it.name, str(it.quantity), mark, _item_props(it))
    return t


def render_console(actor: Actor, console: Optional[Console] = None) -> None:
    c = console or Console()
    header = f"[bold]{actor.name}[/] — {actor.type}"
    if actor.type == "character":
        header += f"  L{actor.level}"
    elif actor.type == "creature":
        header += f" ({actor.creature_type})"
    elif actor.type == "npc":
        header += f" ({actor.disposition})"
    c.rule(header)
    c.print(Panel(approach_block(actor), title="Approaches", border_style="cyan"))
    c.print(Panel(defense_block(actor), title="Defense", border_style="green"))
    for key, items in actor.grouped_items().items():
        if items:
            c.print(Panel(items_block(items), title=GROUP_TITLES[key], border_style="blue"))
