"""Drush 9+ site alias files (``<group>.site.yml``)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from drushkit.adapters.errors import DecodeError
from drushkit.domain.json_types import as_json_dict, as_text

ALIAS_SUFFIX = ".site.yml"


@dataclass(frozen=True)
class SiteAlias:
    name: str
    root: str = ""
    uri: str = ""
    host: str = ""
    user: str = ""

    @property
    def is_remote(self) -> bool:
        return bool(self.host)


def alias_group(path: Path) -> str:
    name = path.name
    if name.endswith(ALIAS_SUFFIX):
        return name[: -len(ALIAS_SUFFIX)]
    return path.stem


def load_alias_file(path: Path) -> dict[str, SiteAlias]:
    try:
        raw: object = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise DecodeError(
            f"Could not read alias file {path}", details={"path": str(path)}, cause=e
        )
    if not isinstance(raw, dict):
        raise DecodeError(
            f"Alias file {path} is not a mapping", details={"path": str(path)}
        )
    group = alias_group(path)
    aliases: dict[str, SiteAlias] = {}
    for env, body in as_json_dict(raw).items():
        if not isinstance(body, dict):
            continue
        name = f"@{group}.{env}"
        aliases[name] = SiteAlias(
            name=name,
            root=as_text(body.get("root")),
            uri=as_text(body.get("uri")),
            host=as_text(body.get("host")),
            user=as_text(body.get("user")),
        )
    return aliases


def load_alias_files(paths: list[str]) -> dict[str, SiteAlias]:
    """Merge every YAML alias file in ``paths``; legacy .php files are skipped."""
    aliases: dict[str, SiteAlias] = {}
    for raw_path in paths:
        path = Path(raw_path)
        if not path.name.endswith((".yml", ".yaml")):
            continue
        aliases.update(load_alias_file(path))
    return aliases
