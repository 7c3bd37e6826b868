from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path


def _plain(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class NDJSONWriter:
    """Append roll records to a newline-delimited JSON history file."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._fp = path.open("a", encoding="utf-8")

    def write(self, obj: dict | object) -> None:
        if is_dataclass(obj):
            obj = asdict(obj)
        ts = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        obj = {"ts": ts, **_plain(obj)}
        self._fp.write(json.dumps(obj, ensure_ascii=False) + "\n")
        self._fp.flush()

    def close(self) -> None:
        self._fp.close()

    def __enter__(self) -> "NDJSONWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
