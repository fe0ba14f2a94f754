from drushkit.domain.settings import Settings


def _settings() -> Settings:
    return Settings(
        {
            "hash_salt": "X",
            "list": ["a", "b"],
            "mixed": ["a", 1, None, "b"],
            "count": 3,
            "ratio": 0.5,
            "enabled": True,
            "nested": {"inner": "value"},
            "empty_assoc": [],
        }
    )


def test_string_and_array_round_trip():
    settings = _settings()
    assert settings.get_string("hash_salt") == "X"
    assert settings.get_array("list") == ["a", "b"]
    assert settings.get_string("missing") == ""


def test_getters_return_zero_values_on_type_mismatch():
    settings = _settings()
    assert settings.get_int("hash_salt") == 0
    assert settings.get_bool("hash_salt") is False
    assert settings.get_float("hash_salt") == 0.0
    assert settings.get_array("hash_salt") == []
    assert settings.get_string("count") == ""
    assert len(settings.get_assoc_array("hash_salt")) == 0


def test_getters_return_zero_values_when_missing():
    settings = _settings()
    assert settings.get_int("missing") == 0
    assert settings.get_bool("missing") is False
    assert settings.get_float("missing") == 0.0
    assert settings.get_array("missing") == []
    assert len(settings.get_assoc_array("missing")) == 0


def test_numeric_getters():
    settings = _settings()
    assert settings.get_int("count") == 3
    assert settings.get_float("ratio") == 0.5
    assert settings.get_float("count") == 3.0
    assert settings.get_int("enabled") == 0
    assert settings.get_bool("enabled") is True


def test_array_skips_non_string_items():
    assert _settings().get_array("mixed") == ["a", "b"]


def test_nested_mapping_is_settings():
    nested = _settings().get_assoc_array("nested")
    assert isinstance(nested, Settings)
    assert nested.get_string("inner") == "value"
    assert len(_settings().get_assoc_array("empty_assoc")) == 0


def test_has_value_distinguishes_missing_from_false():
    settings = Settings({"off": False})
    assert settings.has_value("off")
    assert not settings.has_value("missing")
    assert settings.get_bool("off") is False


def test_settings_is_a_mapping():
    settings = _settings()
    assert "hash_salt" in settings
    assert settings["count"] == 3
    assert settings.to_dict()["list"] == ["a", "b"]
