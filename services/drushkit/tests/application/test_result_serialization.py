from drushkit.application.result_serialization import serialize_command_result
from drushkit.domain.command_result import CommandResult
from drushkit.domain.messages import MessageSet


def test_result_serializes_with_schema_version():
    result = CommandResult(
        stdout="out",
        ok_messages=MessageSet.from_lines(["Done [ok]"]),
        messages=MessageSet.from_lines(["FYI [notice]"]),
    )
    data = serialize_command_result(result, command="cr", args=["--foo"])
    assert data["result_schema_version"] == 1
    assert data["command"] == "cr"
    assert data["args"] == ["--foo"]
    assert data["failed"] is True
    assert data["error_policy"] == "any-message"
    assert data["ok_messages"] == [{"severity": "ok", "marker": "[ok]", "text": "Done"}]
    assert data["messages"][0] == {"severity": "warning", "marker": "[notice]", "text": "FYI"}
