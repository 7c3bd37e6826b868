# tests/conftest.py
import pathlib
import sys

import pytest

from rune.rng import scripted

# Make sure tests can import the local package without installing it
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config and RUNE_* variables out of the tests."""
    monkeypatch.setenv("RUNE_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("RUNE_PUBLIC_ROLLS", raising=False)
    monkeypatch.delenv("RUNE_SEED", raising=False)
    monkeypatch.delenv("RUNE_LOG_LEVEL", raising=False)
    return tmp_path / "config"


@pytest.fixture
def dice():
    """``dice(6, 6, 3)`` -> a roller that returns those faces in order."""
    return lambda *faces: scripted(faces)


@pytest.fixture
def hero_data():
    return {
        "name": "Kaela",
        "type": "character",
        "class": "Duelist",
        "approaches": {"might": 3, "guile": 2, "vision": 1},
        "stamina": {"value": 8, "max": 10},
        "items": [
            {"name": "Leather Coat", "type": "armor", "equipped": True, "armor_value": 1},
            {"name": "Rune Ward", "type": "armor", "equipped": True, "armor_value": 1, "magic_resist_value": 2},
            {"name": "Sabre", "type": "weapon", "equipped": True},
            {"name": "Spark", "type": "spell", "spell_school": "Evocation", "description": "A crackle of light."},
            {"name": "Quick Hands", "type": "trait", "grants_advantage": True},
        ],
    }


@pytest.fixture
def goblin_data():
    return {
        "name": "Goblin",
        "type": "creature",
        "approaches": {"might": 1, "guile": 2, "vision": 0},
        "stamina": {"value": 5, "max": 5},
        "armor": 2,
        "magic_resist": 0,
    }
