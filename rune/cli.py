from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from rune.config_env import load_env
from rune.engine import RulesEngine
from rune.formatters import attack_message, check_message, damage_message, heal_message, spell_message
from rune.logging import configure_logging
from rune.logging_utils import NDJSONWriter
from rune.models.actors import APPROACHES, Actor, rederive
from rune.models.items import toggle_equipped
from rune.rng import RNG, parse_faces, scripted
from rune.rules.advantage import ADVANTAGE_CHOICES, MAX_ADVANTAGE
from rune.rules.config import public_rolls_enabled
from rune.settings import load_settings
from rune.sheet import render_console
from rune.validation import PrettyError, load_actor, save_actor

app = typer.Typer(no_args_is_help=True, help="RUNE - 2d6 + approach rules engine.")

GM_ONLY = "(GM only)"
ADVANTAGE_HELP = "; ".join(f"{k}: {v}" for k, v in sorted(ADVANTAGE_CHOICES.items()))


def _fail(msg: str) -> None:
    typer.secho(f"ERR: {msg}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _load(path: Path) -> Actor:
    try:
        return load_actor(path)
    except PrettyError as e:
        _fail(f"{path}\n{e}")


def _engine(seed: Optional[int], dice: Optional[str], private: bool) -> RulesEngine:
    try:
        settings = load_settings(public_rolls=False if private else None, seed=seed)
        roller = scripted(parse_faces(dice)) if dice else RNG(settings.seed)
    except ValueError as e:
        _fail(str(e))
    return RulesEngine(roller=roller, settings=settings)


def _check_dice_spent(engine: RulesEngine) -> None:
    leftover = getattr(engine.roller, "leftover", None)
    if leftover:
        _fail(f"unused dice: {','.join(str(f) for f in leftover)}")


def _emit(engine: RulesEngine, text: str) -> None:
    if not public_rolls_enabled(engine.settings):
        text = f"{GM_ONLY} {text}"
    typer.echo(text)


def _check_approach(approach: str) -> str:
    key = approach.lower()
    if key not in APPROACHES:
        raise typer.BadParameter(f"choose one of: {', '.join(APPROACHES)}", param_hint="--approach")
    return key


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (overrides RUNE_LOG_LEVEL)"),
) -> None:
    """RUNE - 2d6 + approach rules engine."""
    load_env()
    try:
        configure_logging("DEBUG" if verbose else None)
    except ValueError as e:
        _fail(str(e))


@app.command()
def check(
    approach: str = typer.Option("might", help="might | guile | vision"),
    actor: Optional[Path] = typer.Option(None, exists=True, help="Actor file (json/yaml)"),
    value: int = typer.Option(0, help="Approach score when no actor is given"),
    advantage: int = typer.Option(0, min=-MAX_ADVANTAGE, max=MAX_ADVANTAGE, help=ADVANTAGE_HELP),
    seed: Optional[int] = typer.Option(None, help="Deterministic RNG seed"),
    dice: Optional[str] = typer.Option(None, help="Scripted faces, e.g. '6,6,3'"),
    private: bool = typer.Option(False, help="GM-only roll"),
    log: Optional[Path] = typer.Option(None, help="Append the result to an NDJSON history"),
) -> None:
    """Roll a 2d6 + approach check."""
    approach = _check_approach(approach)
    engine = _engine(seed, dice, private)
    try:
        if actor is not None:
            result = engine.roll_check(_load(actor), approach, advantage)
        else:
            result = engine.resolve_check(value, advantage)
    except ValueError as e:
        _fail(str(e))
    _check_dice_spent(engine)
    _emit(engine, check_message(result, approach))
    if log:
        with NDJSONWriter(log) as w:
            w.write({"kind": "check", "approach": approach, **vars(result)})


@app.command()
def attack(
    actor: Path = typer.Option(..., exists=True, help="Attacker file"),
    approach: str = typer.Option("might", help="might | guile | vision"),
    target: Optional[Path] = typer.Option(None, exists=True, help="Target file"),
    magic: bool = typer.Option(False, help="Roll against magic resistance"),
    advantage: int = typer.Option(0, min=-MAX_ADVANTAGE, max=MAX_ADVANTAGE, help=ADVANTAGE_HELP),
    seed: Optional[int] = typer.Option(None),
    dice: Optional[str] = typer.Option(None, help="Scripted faces, e.g. '3,2'"),
    private: bool = typer.Option(False, help="GM-only roll"),
    apply: bool = typer.Option(False, help="Write the damage to the target file"),
    log: Optional[Path] = typer.Option(None),
) -> None:
    """Roll an attack, optionally against a target."""
    approach = _check_approach(approach)
    engine = _engine(seed, dice, private)
    attacker = _load(actor)
    defender = _load(target) if target else None
    try:
        result = engine.roll_attack(attacker, approach, defender, magic=magic, advantage=advantage)
    except ValueError as e:
        _fail(str(e))
    _check_dice_spent(engine)
    _emit(engine, attack_message(result, approach, defender.name if defender else None, magic))
    if apply and defender is not None and result.damage:
        updated, dmg = engine.damage_actor(defender, result.damage)
        save_actor(updated, target)
        typer.echo(damage_message(updated.name, dmg))
    if log:
        with NDJSONWriter(log) as w:
            w.write({"kind": "attack", "approach": approach, "magic": magic, **vars(result)})


@app.command()
def damage(
    file: Path = typer.Argument(..., exists=True),
    amount: int = typer.Argument(..., min=0),
) -> None:
    """Apply damage to an actor's stamina."""
    actor = _load(file)
    updated, result = _engine(None, None, False).damage_actor(actor, amount)
    save_actor(updated, file)
    typer.echo(damage_message(updated.name, result))


@app.command()
def heal(
    file: Path = typer.Argument(..., exists=True),
    amount: int = typer.Argument(..., min=0),
) -> None:
    """Restore stamina up to the actor's maximum."""
    actor = _load(file)
    updated, result = _engine(None, None, False).heal_actor(actor, amount)
    msg = heal_message(updated.name, result)
    if msg is None:
        return
    save_actor(updated, file)
    typer.echo(msg)


@app.command()
def equip(
    file: Path = typer.Argument(..., exists=True),
    item: str = typer.Argument(..., help="Item name"),
) -> None:
    """Toggle an item's equipped flag and recompute armor."""
    actor = _load(file)
    matches = [i for i, it in enumerate(actor.items) if it.name.lower() == item.lower()]
    if not matches:
        _fail(f"No item named '{item}' on {actor.name}")
    items = list(actor.items)
    idx = matches[0]
    items[idx] = toggle_equipped(items[idx])
    updated = rederive(actor.model_copy(update={"items": items}))
    save_actor(updated, file)
    state = "equipped" if getattr(items[idx], "equipped", False) else "unequipped"
    typer.echo(f"{items[idx].name} {state}. Armor {updated.armor}, Magic Resist {updated.magic_resist}")


@app.command()
def cast(
    file: Path = typer.Argument(..., exists=True),
    spell: str = typer.Argument(..., help="Spell name"),
) -> None:
    """Announce a spell from the actor's list."""
    actor = _load(file)
    for it in actor.items:
        if it.type == "spell" and it.name.lower() == spell.lower():
            typer.echo(spell_message(it))
            return
    _fail(f"No spell named '{spell}' on {actor.name}")


@app.command()
def sheet(file: Path = typer.Argument(..., exists=True)) -> None:
    """Print an actor sheet."""
    render_console(_load(file), Console())


@app.command()
def validate(file: Path = typer.Argument(..., exists=True)) -> None:
    """Validate an actor json/yaml file."""
    try:
        _ = load_actor(file)
        typer.secho(f"OK: {file}", fg=typer.colors.GREEN)
    except PrettyError as e:
        typer.secho(f"ERR: {file}\n{e}", fg=typer.colors.RED)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
