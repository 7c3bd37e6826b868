from __future__ import annotations

from typing import Optional

from ..settings import Settings, load_settings


def public_rolls_enabled(settings: Optional[Settings] = None) -> bool:
    """Return True if rolls are shown to everyone rather than the GM only."""
    return (settings or load_settings()).public_rolls
