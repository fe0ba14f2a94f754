from drushkit.domain.command_result import CommandResult
from drushkit.domain.error_policy import ErrorPolicy, is_failure
from drushkit.domain.messages import MessageSet


def test_empty_result_is_ok():
    result = CommandResult(stdout="out")
    assert result.ok
    assert not result.failed
    assert result.errors is None


def test_any_message_policy_surfaces_warnings():
    messages = MessageSet.from_lines(["Careful [warning]"])
    result = CommandResult(messages=messages)
    assert result.failed
    assert result.errors == messages
    assert not result.errors.has_errors()


def test_errors_only_policy_ignores_warnings():
    messages = MessageSet.from_lines(["Careful [warning]", "FYI [notice]", "noise"])
    result = CommandResult(messages=messages, error_policy=ErrorPolicy.ERRORS_ONLY)
    assert result.ok
    assert result.errors is None
    assert result.messages.has_warnings()


def test_errors_only_policy_surfaces_errors():
    messages = MessageSet.from_lines(["Broken [error]"])
    result = CommandResult(messages=messages, error_policy=ErrorPolicy.ERRORS_ONLY)
    assert result.failed


def test_non_zero_exit_always_fails():
    messages = MessageSet.from_lines(["exit status 3"])
    for policy in ErrorPolicy:
        assert is_failure(messages, 3, policy)
        assert is_failure(MessageSet(), 3, policy)


def test_with_policy_switches_interpretation():
    result = CommandResult(messages=MessageSet.from_lines(["Careful [warning]"]))
    relaxed = result.with_policy(ErrorPolicy.ERRORS_ONLY)
    assert result.failed
    assert relaxed.ok
    assert relaxed.messages == result.messages
