"""Die sources for the resolver.

Anything that can be called with no arguments and returns a face in 1..6 is a
die roller. ``RNG`` wraps a seeded :class:`random.Random`; ``scripted`` replays
fixed faces for tests and for the CLI ``--dice`` option.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

DieRoller = Callable[[], int]

D6_FACES = 6


@dataclass
class RNG:
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._r = random.Random(self.seed)

    def roll_int(self, lo: int, hi: int) -> int:
        return self._r.randint(lo, hi)

    def d6(self) -> int:
        return self.roll_int(1, D6_FACES)

    def __call__(self) -> int:
        return self.d6()


class ScriptedDice:
    """Roller yielding fixed faces in order.

    Raises ``ValueError`` when a face is outside 1..6 or the script runs out.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces: List[int] = list(faces)
        self._pos = 0

    def __call__(self) -> int:
        if self._pos >= len(self._faces):
            raise ValueError("scripted dice exhausted")
        face = self._faces[self._pos]
        self._pos += 1
        if not 1 <= face <= D6_FACES:
            raise ValueError(f"die face out of range: {face}")
        return face

    @property
    def leftover(self) -> List[int]:
        return self._faces[self._pos:]


def scripted(faces: Iterable[int]) -> ScriptedDice:
    return ScriptedDice(faces)


def parse_faces(text: str) -> list[int]:
    """Parse a comma separated face list such as ``"6,6,3"``."""
    try:
        return [int(part) for part in text.replace(" ", "").split(",") if part]
    except ValueError:
        raise ValueError(f"Invalid dice list: {text}") from None
