"""World settings.

Precedence for every setting: explicit override > environment > the local
config file (``~/.rune/config.json`` or ``$RUNE_CONFIG_DIR/config.json``) >
default.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .logging import get_logger

log = get_logger(__name__)

TRUTHY = ("1", "true", "yes", "on")


def config_dir() -> Path:
    return Path(os.getenv("RUNE_CONFIG_DIR") or Path.home() / ".rune")


def config_path() -> Path:
    return config_dir() / "config.json"


def load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("ignoring unreadable config %s: %s", path, exc)
        return {}


def save_config(cfg: Dict[str, Any]) -> None:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2), encoding="utf-8")


def _as_bool(val: Any) -> bool:
    return str(val).strip().lower() in TRUTHY


@dataclass(frozen=True)
class Settings:
    public_rolls: bool = True
    seed: Optional[int] = None


def load_settings(
    public_rolls: Optional[bool] = None,
    seed: Optional[int] = None,
) -> Settings:
    cfg = load_config()

    if public_rolls is None:
        val = os.getenv("RUNE_PUBLIC_ROLLS")
        if val is None:
            val = cfg.get("public_rolls", True)
        public_rolls = _as_bool(val)

    if seed is None:
        raw = os.getenv("RUNE_SEED")
        if raw is None:
            raw = cfg.get("seed")
        if raw is not None:
            try:
                seed = int(raw)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid seed: {raw!r}") from None

    return Settings(public_rolls=public_rolls, seed=seed)
