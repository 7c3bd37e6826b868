# rune/__init__.py
from .engine import RulesEngine
from .rules.checks import resolve_attack, resolve_check
from .rules.outcomes import AttackOutcome, CheckOutcome
from .rules.stamina import apply_damage, heal_stamina

__all__ = [
    "__version__",
    "RulesEngine",
    "resolve_check",
    "resolve_attack",
    "apply_damage",
    "heal_stamina",
    "CheckOutcome",
    "AttackOutcome",
]

__version__ = "0.1.0"
