from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from drushkit.domain.command_result import CommandResult


def _new_arguments() -> list[str]:
    return []


@dataclass(frozen=True)
class DrushCommand:
    directory: Path
    command: str
    arguments: list[str] = field(default_factory=_new_arguments)


class CommandRunnerPort(Protocol):
    def run(self, cmd: DrushCommand) -> CommandResult: ...
