import pytest

from drushkit.adapters.errors import CommandFailed, CommandNotFound
from drushkit.adapters.php.interpreter import SubprocessPhpInterpreter


def test_run_code_passes_code_with_r_flag(fake_bin, tmp_path):
    fake_bin("php", 'printf "%s|%s" "$1" "$2"')
    out = SubprocessPhpInterpreter().run_code("print 1;", cwd=tmp_path)
    assert out == "-r|print 1;"


def test_non_zero_exit_raises_command_failed(fake_bin, tmp_path):
    fake_bin("php", "echo 'PHP Parse error' >&2\nexit 255")
    with pytest.raises(CommandFailed) as excinfo:
        SubprocessPhpInterpreter().run_code("oops", cwd=tmp_path)
    assert excinfo.value.details["exit_code"] == 255
    assert "PHP Parse error" in excinfo.value.details["stderr"]


def test_missing_php_raises_not_found(tmp_path):
    with pytest.raises(CommandNotFound):
        SubprocessPhpInterpreter(executable="php-does-not-exist").run_code("", cwd=tmp_path)
