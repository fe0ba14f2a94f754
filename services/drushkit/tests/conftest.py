import os
import stat
import sys
from pathlib import Path

import pytest


@pytest.fixture
def fake_bin(tmp_path, monkeypatch):
    """Write executable shell scripts into a directory placed first on PATH."""
    if sys.platform == "win32":
        pytest.skip("fake executables are POSIX shell scripts")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def write(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return write


@pytest.fixture
def site_dir(tmp_path):
    root = tmp_path / "drupal"
    (root / "sites" / "default").mkdir(parents=True)
    return root
