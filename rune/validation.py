from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator
from pydantic import ValidationError

from rune.models.actors import Actor
from rune.registry import Registry, UnknownTypeError, default_registry


SCHEMA_DIR = Path(__file__).resolve().parent / "schema"

YAML_SUFFIXES = {".yaml", ".yml"}


class PrettyError(Exception):
    pass


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


_def_schemas = {
    "actor": SCHEMA_DIR / "actor.schema.json",
}


def _validate_jsonschema(obj: Any, schema_path: Path) -> None:
    schema = _read_json(schema_path)
    v = Draft202012Validator(schema)
    errors = sorted(v.iter_errors(obj), key=lambda e: list(e.path))
    if errors:
        lines = []
        for e in errors[:5]:
            ptr = "/" + "/".join([str(p) for p in e.path])
            lines.append(f"- {ptr}: {e.message}")
        more = "" if len(errors) <= 5 else f" (+{len(errors)-5} more)"
        raise PrettyError("JSON Schema validation failed:\n" + "\n".join(lines) + more)


def _format_pydantic(e: ValidationError) -> str:
    lines = []
    for err in e.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        lines.append(f"- {loc}: {err['msg']}")
    return "Model validation failed:\n" + "\n".join(lines)


def _read_payload(path: Path) -> Any:
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return _read_yaml(path)
        return _read_json(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise PrettyError(f"Could not parse {path.name}: {e}")


def _actor_model(data: Any, registry: Registry):
    kind = data.get("type") if isinstance(data, dict) else None
    if not isinstance(kind, str):
        return None  # left to the schema
    try:
        return registry.actor_model(kind)
    except UnknownTypeError as e:
        raise PrettyError(e.args[0]) from None


# Public API


def validate_actor(data: Any, registry: Optional[Registry] = None) -> Actor:
    """Check ``data`` against the registry, the JSON Schema and the models."""
    model = _actor_model(data, registry or default_registry())
    _validate_jsonschema(data, _def_schemas["actor"])
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PrettyError(_format_pydantic(e))


def load_actor(path: Path) -> Actor:
    return validate_actor(_read_payload(path))


def save_actor(actor: Actor, path: Path) -> None:
    data = actor.model_dump(by_alias=True, mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in YAML_SUFFIXES:
        path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


__all__ = ["load_actor", "save_actor", "validate_actor", "PrettyError"]
