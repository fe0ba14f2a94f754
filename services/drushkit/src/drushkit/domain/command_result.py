from __future__ import annotations

from dataclasses import dataclass, field, replace

from drushkit.domain.error_policy import DEFAULT_ERROR_POLICY, ErrorPolicy, is_failure
from drushkit.domain.messages import MessageSet


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one drush invocation that actually ran.

    ``ok_messages`` carries the [ok]/[success] lines from stderr.
    ``messages`` carries every other stderr line in arrival order, followed
    by the process-level exit message when the exit status was non-zero.
    """

    stdout: str = ""
    ok_messages: MessageSet = field(default_factory=MessageSet)
    messages: MessageSet = field(default_factory=MessageSet)
    exit_code: int = 0
    error_policy: ErrorPolicy = DEFAULT_ERROR_POLICY

    @property
    def failed(self) -> bool:
        return is_failure(self.messages, self.exit_code, self.error_policy)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def errors(self) -> MessageSet | None:
        if self.failed:
            return self.messages
        return None

    def with_policy(self, policy: ErrorPolicy) -> CommandResult:
        return replace(self, error_policy=policy)
