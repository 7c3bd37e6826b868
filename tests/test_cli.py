import json

import pytest
from typer.testing import CliRunner

from rune.cli import app

runner = CliRunner()


@pytest.fixture
def hero_file(tmp_path, hero_data):
    p = tmp_path / "hero.json"
    p.write_text(json.dumps(hero_data), encoding="utf-8")
    return p


@pytest.fixture
def goblin_file(tmp_path, goblin_data):
    p = tmp_path / "goblin.json"
    p.write_text(json.dumps(goblin_data), encoding="utf-8")
    return p


def _stamina(path):
    return json.loads(path.read_text(encoding="utf-8"))["stamina"]["value"]


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"], prog_name="rune")
    assert result.exit_code == 0
    for name in ("check", "attack", "damage", "heal", "sheet", "validate"):
        assert name in result.output


def test_check_with_scripted_dice():
    result = runner.invoke(app, ["check", "--value", "3", "--dice", "4,2"])
    assert result.exit_code == 0, result.output
    assert "MIGHT Check" in result.output
    assert "COMPLICATION" in result.output


def test_check_from_actor_file(hero_file):
    result = runner.invoke(
        app, ["check", "--actor", str(hero_file), "--approach", "guile", "--advantage", "-1", "--dice", "1,5,1"]
    )
    assert result.exit_code == 0, result.output
    assert "GUILE Check (1 Disadvantage)" in result.output
    assert "RUIN! (1-1)" in result.output


def test_private_roll_prefix():
    result = runner.invoke(app, ["check", "--value", "1", "--dice", "6,6", "--private"])
    assert result.exit_code == 0
    assert result.output.startswith("(GM only)")


def test_env_disables_public_rolls(monkeypatch):
    monkeypatch.setenv("RUNE_PUBLIC_ROLLS", "off")
    result = runner.invoke(app, ["check", "--value", "1", "--dice", "3,3"])
    assert result.output.startswith("(GM only)")


def test_check_rejects_bad_approach_and_advantage():
    assert runner.invoke(app, ["check", "--approach", "charm"]).exit_code != 0
    assert runner.invoke(app, ["check", "--advantage", "3"]).exit_code != 0


def test_exhausted_dice_is_an_error():
    result = runner.invoke(app, ["check", "--value", "1", "--advantage", "1", "--dice", "6,6"])
    assert result.exit_code == 1
    assert "exhausted" in result.output


def test_unused_dice_is_an_error():
    result = runner.invoke(app, ["check", "--value", "1", "--dice", "6,6,3"])
    assert result.exit_code == 1
    assert "unused dice: 3" in result.output


def test_attack_applies_damage(hero_file, goblin_file):
    result = runner.invoke(
        app,
        ["attack", "--actor", str(hero_file), "--target", str(goblin_file), "--dice", "3,2", "--apply"],
    )
    assert result.exit_code == 0, result.output
    assert "HIT!" in result.output
    assert "Damage: 6" in result.output
    assert "STAMINA DEPLETED" in result.output
    assert _stamina(goblin_file) == 0


def test_attack_without_target(hero_file):
    result = runner.invoke(app, ["attack", "--actor", str(hero_file), "--dice", "2,2"])
    assert result.exit_code == 0
    assert "Attack Roll" in result.output
    assert "Target" not in result.output


def test_damage_and_heal(goblin_file):
    result = runner.invoke(app, ["damage", str(goblin_file), "2"])
    assert result.exit_code == 0
    assert "Goblin takes 2 damage!" in result.output
    assert _stamina(goblin_file) == 3

    result = runner.invoke(app, ["heal", str(goblin_file), "10"])
    assert "recovers 2 stamina" in result.output
    assert _stamina(goblin_file) == 5

    result = runner.invoke(app, ["heal", str(goblin_file), "1"])
    assert result.exit_code == 0
    assert result.output == ""


@pytest.mark.parametrize("command", ["damage", "heal"])
def test_bad_seed_reported(monkeypatch, goblin_file, command):
    monkeypatch.setenv("RUNE_SEED", "abc")
    result = runner.invoke(app, [command, str(goblin_file), "1"])
    assert result.exit_code == 1
    assert "ERR: Invalid seed" in result.output
    assert _stamina(goblin_file) == 5


def test_unknown_keys_stop_damage(tmp_path, goblin_data):
    p = tmp_path / "goblin.json"
    p.write_text(json.dumps({**goblin_data, "notes": "keep me"}), encoding="utf-8")
    result = runner.invoke(app, ["damage", str(p), "1"])
    assert result.exit_code == 1
    assert "notes" in result.output
    assert json.loads(p.read_text(encoding="utf-8"))["notes"] == "keep me"


def test_equip_toggles_and_recomputes(hero_file):
    result = runner.invoke(app, ["equip", str(hero_file), "rune ward"])
    assert result.exit_code == 0, result.output
    assert "unequipped" in result.output
    data = json.loads(hero_file.read_text(encoding="utf-8"))
    assert data["magic_resist"] == 0
    assert data["armor"] == 1

    missing = runner.invoke(app, ["equip", str(hero_file), "cloak"])
    assert missing.exit_code == 1


def test_cast_spell(hero_file):
    result = runner.invoke(app, ["cast", str(hero_file), "spark"])
    assert result.exit_code == 0
    assert "School: Evocation" in result.output
    assert runner.invoke(app, ["cast", str(hero_file), "fireball"]).exit_code == 1


def test_validate(tmp_path, hero_file):
    ok = runner.invoke(app, ["validate", str(hero_file)])
    assert ok.exit_code == 0
    assert "OK:" in ok.output
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"name": "X", "type": "vehicle"}), encoding="utf-8")
    res = runner.invoke(app, ["validate", str(bad)])
    assert res.exit_code == 1
    assert "ERR:" in res.output


def test_sheet(hero_file):
    result = runner.invoke(app, ["sheet", str(hero_file)])
    assert result.exit_code == 0, result.output
    assert "Kaela" in result.output
    assert "Approaches" in result.output
    assert "Rune Ward" in result.output


def test_log_history(tmp_path):
    log = tmp_path / "rolls.ndjson"
    for faces in ("6,6", "1,2"):
        runner.invoke(app, ["check", "--value", "2", "--dice", faces, "--log", str(log)])
    rows = [json.loads(line) for line in log.read_text(encoding="utf-8").splitlines()]
    assert [r["outcome"] for r in rows] == ["glory", "failure"]
    assert rows[0]["selected"] == [6, 6]
    assert rows[0]["ts"].endswith("Z")
