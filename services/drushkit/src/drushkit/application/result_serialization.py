from __future__ import annotations

from datetime import datetime, timezone

from drushkit.domain.command_result import CommandResult
from drushkit.domain.json_types import JsonDict, as_json_dict
from drushkit.domain.messages import DrushMessage, MessageSet


def serialize_message(message: DrushMessage) -> JsonDict:
    return as_json_dict(
        {
            "severity": message.severity.value,
            "marker": message.marker,
            "text": message.text,
        }
    )


def _serialize_set(messages: MessageSet) -> list[JsonDict]:
    return [serialize_message(m) for m in messages]


def serialize_command_result(
    result: CommandResult,
    command: str,
    args: list[str],
) -> JsonDict:
    return as_json_dict(
        {
            "result_schema_version": 1,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "command": command,
            "args": args,
            "exit_code": result.exit_code,
            "failed": result.failed,
            "error_policy": result.error_policy.value,
            "stdout": result.stdout,
            "ok_messages": _serialize_set(result.ok_messages),
            "messages": _serialize_set(result.messages),
        }
    )
