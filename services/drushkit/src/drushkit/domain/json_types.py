from __future__ import annotations

from typing import TypeAlias, TypeGuard

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | dict[str, "JsonValue"] | list["JsonValue"]
JsonDict: TypeAlias = dict[str, JsonValue]
JsonList: TypeAlias = list[JsonValue]


def is_json_dict(value: object) -> TypeGuard[dict[object, object]]:
    return isinstance(value, dict)


def is_json_list(value: object) -> TypeGuard[list[object]]:
    return isinstance(value, list)


def coerce_json_value(value: object) -> JsonValue:
    if is_json_dict(value):
        return {str(k): coerce_json_value(v) for k, v in value.items()}
    if is_json_list(value):
        return [coerce_json_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def as_json_dict(value: object) -> JsonDict:
    if not is_json_dict(value):
        return {}
    return {str(k): coerce_json_value(v) for k, v in value.items()}


def as_json_list(value: object) -> JsonList:
    if not is_json_list(value):
        return []
    return [coerce_json_value(item) for item in value]


def as_text(value: JsonValue) -> str:
    """Render a scalar JSON value the way drush prints it; containers become ""."""
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def as_text_list(value: JsonValue) -> list[str]:
    if isinstance(value, str):
        return [value] if value else []
    # drush 9+ prints path lists as {"/path": "/path"}
    if isinstance(value, dict):
        return [item for item in value.values() if isinstance(item, str)]
    return [item for item in as_json_list(value) if isinstance(item, str)]
