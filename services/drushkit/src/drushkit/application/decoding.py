from __future__ import annotations

import json
from pathlib import Path

import jsonschema

from drushkit.adapters.errors import DecodeError
from drushkit.domain.json_types import JsonDict, as_json_dict
from drushkit.domain.settings import Settings
from drushkit.domain.site_info import Database, Status

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"


def schema_path(name: str) -> Path:
    return SCHEMA_DIR / f"{name}.schema.json"


def load_schema(name: str) -> JsonDict:
    return as_json_dict(json.loads(schema_path(name).read_text(encoding="utf-8")))


def _loads(text: str, what: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"Could not decode {what}: {e}",
            details={"output": text[:200]},
            cause=e,
        )


def _validate(raw: object, schema_name: str, what: str) -> None:
    try:
        jsonschema.validate(raw, load_schema(schema_name))
    except jsonschema.ValidationError as e:
        raise DecodeError(
            f"Unexpected {what}: {e.message}",
            details={"schema": schema_name, "path": "/".join(str(p) for p in e.path)},
            cause=e,
        )


def decode_status(text: str) -> Status:
    raw = _loads(text, "drush status output")
    _validate(raw, "status", "drush status output")
    return Status.from_json_dict(as_json_dict(raw))


def decode_database(text: str) -> Database:
    raw = _loads(text, "drupal database")
    _validate(raw, "database", "drupal database")
    return Database.from_json_dict(as_json_dict(raw))


def decode_settings(text: str) -> Settings:
    raw = _loads(text, "drupal settings")
    if raw == [] or raw is None:
        # json_encode() of an empty or unset PHP array
        return Settings()
    if not isinstance(raw, dict):
        raise DecodeError(
            f"Unexpected drupal settings: expected an object, got {type(raw).__name__}"
        )
    return Settings(raw)
