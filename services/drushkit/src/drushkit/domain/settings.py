from __future__ import annotations

from collections.abc import Iterator, Mapping

from drushkit.domain.json_types import JsonDict, JsonValue, as_json_dict


class Settings(Mapping[str, JsonValue]):
    """The ``$settings`` array of a site's settings.php.

    Values keep whatever JSON type PHP encoded them as. The typed getters
    never raise: a missing key or a value of another type gives the zero
    value for the requested type. Use ``has_value`` to tell a missing key
    from a stored zero value.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: JsonDict = as_json_dict(dict(values or {}))

    def __getitem__(self, key: str) -> JsonValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Settings({self._values!r})"

    def to_dict(self) -> JsonDict:
        return as_json_dict(self._values)

    def has_value(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str) -> str:
        value = self._values.get(key)
        return value if isinstance(value, str) else ""

    def get_int(self, key: str) -> int:
        value = self._values.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return 0
        return value

    def get_bool(self, key: str) -> bool:
        value = self._values.get(key)
        return value if isinstance(value, bool) else False

    def get_float(self, key: str) -> float:
        value = self._values.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.0
        return float(value)

    def get_assoc_array(self, key: str) -> Settings:
        value = self._values.get(key)
        if isinstance(value, dict):
            return Settings(value)
        # PHP encodes an empty associative array as []
        return Settings()

    def get_array(self, key: str) -> list[str]:
        """Return the string items of a list value; other items are skipped."""
        value = self._values.get(key)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]
