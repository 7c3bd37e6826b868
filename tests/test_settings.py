import json

import pytest

from rune.rules import public_rolls_enabled
from rune.settings import Settings, load_settings, save_config


def test_defaults():
    s = load_settings()
    assert s == Settings(public_rolls=True, seed=None)


def test_config_file(isolated_config):
    save_config({"public_rolls": False, "seed": 9})
    assert json.loads((isolated_config / "config.json").read_text()) == {"public_rolls": False, "seed": 9}
    s = load_settings()
    assert s.public_rolls is False
    assert s.seed == 9


def test_env_beats_config(monkeypatch):
    save_config({"public_rolls": False})
    monkeypatch.setenv("RUNE_PUBLIC_ROLLS", "yes")
    monkeypatch.setenv("RUNE_SEED", "12")
    s = load_settings()
    assert s.public_rolls is True
    assert s.seed == 12


def test_override_beats_env(monkeypatch):
    monkeypatch.setenv("RUNE_PUBLIC_ROLLS", "1")
    assert load_settings(public_rolls=False).public_rolls is False
    assert public_rolls_enabled(Settings(public_rolls=False)) is False


def test_bad_seed(monkeypatch):
    monkeypatch.setenv("RUNE_SEED", "abc")
    with pytest.raises(ValueError):
        load_settings()


def test_unreadable_config_ignored(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text("{oops", encoding="utf-8")
    assert load_settings().public_rolls is True
