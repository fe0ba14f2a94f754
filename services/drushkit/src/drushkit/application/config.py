from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from drushkit.adapters.errors import ConfigError
from drushkit.domain.error_policy import DEFAULT_ERROR_POLICY, ErrorPolicy
from drushkit.domain.json_types import JsonDict, as_json_dict

CONFIG_FILENAME = ".drushkit.toml"
CONFIG_ENV = "DRUSHKIT_CONFIG"


@dataclass(frozen=True)
class DrushkitConfig:
    drush: str = "drush"
    php: str = "php"
    timeout: float | None = None
    columns: int = 10000
    error_policy: ErrorPolicy = DEFAULT_ERROR_POLICY


def find_config(start: Path | None = None) -> Path | None:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    cwd = (start or Path.cwd()).resolve()
    for parent in (cwd, *cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _parse_policy(value: object, path: Path) -> ErrorPolicy:
    try:
        return ErrorPolicy(str(value))
    except ValueError as e:
        choices = ", ".join(p.value for p in ErrorPolicy)
        raise ConfigError(
            f"Invalid error_policy {value!r} in {path}",
            hint=f"Use one of: {choices}",
            cause=e,
        )


def _parse_timeout(value: object, path: Path) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"Invalid timeout {value!r} in {path}", hint="Use seconds > 0")
    return float(value)


def config_from_settings(settings: JsonDict, path: Path) -> DrushkitConfig:
    defaults = DrushkitConfig()
    columns = settings.get("columns", defaults.columns)
    if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
        raise ConfigError(f"Invalid columns {columns!r} in {path}")
    return DrushkitConfig(
        drush=str(settings.get("drush") or defaults.drush),
        php=str(settings.get("php") or defaults.php),
        timeout=_parse_timeout(settings.get("timeout"), path),
        columns=columns,
        error_policy=_parse_policy(
            settings.get("error_policy", defaults.error_policy.value), path
        ),
    )


def read_config(path: Path | None) -> DrushkitConfig:
    if path is None:
        return DrushkitConfig()
    try:
        raw = as_json_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}", cause=e)
    return config_from_settings(as_json_dict(raw.get("settings")), path)


def load_config(start: Path | None = None) -> DrushkitConfig:
    return read_config(find_config(start))


def effective_error_policy(
    cli_policy: ErrorPolicy | None, config: DrushkitConfig | None
) -> ErrorPolicy:
    if cli_policy is not None:
        return cli_policy
    if config is None:
        return DEFAULT_ERROR_POLICY
    return config.error_policy


def effective_timeout(
    cli_timeout: float | None, config: DrushkitConfig | None
) -> float | None:
    if cli_timeout is not None:
        return cli_timeout
    if config is None:
        return None
    return config.timeout
