import pytest

from drushkit.adapters.aliases import alias_group, load_alias_file, load_alias_files
from drushkit.adapters.errors import DecodeError


def test_load_alias_file(tmp_path):
    path = tmp_path / "example.site.yml"
    path.write_text(
        "dev:\n  root: /var/www/example\n  uri: http://example.test\n"
        "prod:\n  host: example.com\n  user: deploy\n  root: /srv/example\n"
    )
    aliases = load_alias_file(path)
    assert set(aliases) == {"@example.dev", "@example.prod"}
    assert aliases["@example.dev"].root == "/var/www/example"
    assert not aliases["@example.dev"].is_remote
    assert aliases["@example.prod"].is_remote
    assert aliases["@example.prod"].user == "deploy"


def test_alias_group_strips_site_suffix(tmp_path):
    assert alias_group(tmp_path / "self.site.yml") == "self"
    assert alias_group(tmp_path / "other.yml") == "other"


def test_legacy_php_alias_files_are_skipped(tmp_path):
    legacy = tmp_path / "old.aliases.drushrc.php"
    legacy.write_text("<?php $aliases = [];")
    assert load_alias_files([str(legacy)]) == {}


def test_malformed_alias_file_raises(tmp_path):
    path = tmp_path / "broken.site.yml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(DecodeError):
        load_alias_file(path)


def test_missing_alias_file_raises(tmp_path):
    with pytest.raises(DecodeError):
        load_alias_file(tmp_path / "gone.site.yml")
