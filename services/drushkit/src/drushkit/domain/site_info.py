from __future__ import annotations

from dataclasses import dataclass, field

from drushkit.domain.json_types import JsonDict, as_text, as_text_list


def _new_paths() -> list[str]:
    return []


@dataclass(frozen=True)
class Status:
    """Fields reported by ``drush status --format=json``."""

    root: str = ""
    site: str = ""
    uri: str = ""
    php_bin: str = ""
    php_os: str = ""
    php_conf: list[str] = field(default_factory=_new_paths)
    drupal_version: str = ""
    drupal_settings_file: str = ""
    drush_script: str = ""
    drush_version: str = ""
    drush_temp: str = ""
    drush_conf: list[str] = field(default_factory=_new_paths)
    drush_alias_files: list[str] = field(default_factory=_new_paths)
    db_driver: str = ""
    db_hostname: str = ""
    db_username: str = ""
    db_name: str = ""
    db_port: str = ""
    modules: str = ""
    themes: str = ""
    config_sync: str = ""

    @classmethod
    def from_json_dict(cls, raw: JsonDict) -> Status:
        return cls(
            root=as_text(raw.get("root")),
            site=as_text(raw.get("site")),
            uri=as_text(raw.get("uri")),
            php_bin=as_text(raw.get("php-bin")),
            php_os=as_text(raw.get("php-os")),
            php_conf=as_text_list(raw.get("php-conf")),
            drupal_version=as_text(raw.get("drupal-version")),
            drupal_settings_file=as_text(raw.get("drupal-settings-file")),
            drush_script=as_text(raw.get("drush-script")),
            drush_version=as_text(raw.get("drush-version")),
            drush_temp=as_text(raw.get("drush-temp")),
            drush_conf=as_text_list(raw.get("drush-conf")),
            drush_alias_files=as_text_list(raw.get("drush-alias-files")),
            db_driver=as_text(raw.get("db-driver")),
            db_hostname=as_text(raw.get("db-hostname")),
            db_username=as_text(raw.get("db-username")),
            db_name=as_text(raw.get("db-name")),
            db_port=as_text(raw.get("db-port")),
            modules=as_text(raw.get("modules")),
            themes=as_text(raw.get("themes")),
            config_sync=as_text(raw.get("config-sync")),
        )

    @property
    def settings_dir(self) -> str:
        return f"{self.root}/{self.site}"


@dataclass(frozen=True)
class Database:
    """Connection details of ``$databases['default']['default']``."""

    database: str = ""
    username: str = ""
    password: str = ""
    prefix: str = ""
    host: str = ""
    port: str = ""
    namespace: str = ""
    driver: str = ""

    @classmethod
    def from_json_dict(cls, raw: JsonDict) -> Database:
        return cls(
            database=as_text(raw.get("database")),
            username=as_text(raw.get("username")),
            password=as_text(raw.get("password")),
            prefix=as_text(raw.get("prefix")),
            host=as_text(raw.get("host")),
            port=as_text(raw.get("port")),
            namespace=as_text(raw.get("namespace")),
            driver=as_text(raw.get("driver")),
        )

    def dsn(self) -> str:
        connection = self.username
        if self.password:
            connection += ":" + self.password
        connection += "@" + self.host
        if self.port:
            connection += ":" + self.port
        return connection + "/" + self.database
