import json

import pytest

from drushkit.adapters.errors import DecodeError
from drushkit.application.decoding import (
    decode_database,
    decode_settings,
    decode_status,
    schema_path,
)


def test_schemas_ship_with_the_package():
    assert schema_path("status").is_file()
    assert schema_path("database").is_file()


def test_decode_status():
    status = decode_status(
        json.dumps({"root": "/r", "site": "sites/default", "drupal-version": "8.3.5"})
    )
    assert status.root == "/r"
    assert status.drupal_version == "8.3.5"


def test_decode_status_rejects_garbage():
    with pytest.raises(DecodeError):
        decode_status("Drush command terminated abnormally")


def test_decode_status_rejects_wrong_types():
    with pytest.raises(DecodeError) as excinfo:
        decode_status(json.dumps({"root": ["not", "a", "string"]}))
    assert excinfo.value.details["schema"] == "status"


def test_decode_status_rejects_non_object():
    with pytest.raises(DecodeError):
        decode_status("[]")


def test_decode_database():
    db = decode_database(
        json.dumps(
            {
                "database": "drupal",
                "username": "root",
                "password": "",
                "prefix": "",
                "host": "mysql",
                "port": "3306",
                "namespace": "Drupal\\Core\\Database\\Driver\\mysql",
                "driver": "mysql",
            }
        )
    )
    assert db.database == "drupal"
    assert db.port == "3306"
    assert db.namespace.endswith("mysql")


def test_decode_database_requires_driver():
    with pytest.raises(DecodeError):
        decode_database(json.dumps({"database": "drupal"}))


def test_decode_settings_round_trip():
    settings = decode_settings('{"hash_salt": "X", "list": ["a","b"]}')
    assert settings.get_string("hash_salt") == "X"
    assert settings.get_array("list") == ["a", "b"]
    assert settings.get_string("missing") == ""


def test_decode_settings_accepts_empty_php_array():
    assert len(decode_settings("[]")) == 0
    assert len(decode_settings("null")) == 0


def test_decode_settings_rejects_scalars():
    with pytest.raises(DecodeError):
        decode_settings('"nope"')
    with pytest.raises(DecodeError):
        decode_settings("not json")
