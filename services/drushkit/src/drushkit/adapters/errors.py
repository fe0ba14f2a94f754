from dataclasses import dataclass

from drushkit.domain.command_result import CommandResult
from drushkit.domain.json_types import JsonDict
from drushkit.domain.messages import MessageSet


@dataclass
class AdapterError(Exception):
    message: str
    details: JsonDict | None = None
    hint: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


class SiteError(AdapterError):
    pass


class ConfigError(AdapterError):
    pass


class DecodeError(AdapterError):
    pass


class CommandNotFound(AdapterError):
    pass


class CommandStartError(AdapterError):
    pass


class CommandFailed(AdapterError):
    pass


class CommandTimeout(AdapterError):
    pass


class DrushCommandError(CommandFailed):
    """A drush command ran and reported problems on stderr.

    ``messages`` is the classified stderr of the run, so callers can decide
    whether the failure is fatal (``messages.has_errors()``) or advisory.
    """

    def __init__(self, result: CommandResult, command: str = "") -> None:
        super().__init__(
            str(result.messages).strip() or f"drush {command} failed",
            details={"command": command, "exit_code": result.exit_code},
        )
        self.result = result

    @property
    def messages(self) -> MessageSet:
        return self.result.messages
