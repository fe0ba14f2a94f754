from __future__ import annotations

from enum import Enum

from drushkit.domain.messages import MessageSet


class ErrorPolicy(str, Enum):
    """When a set of stderr messages counts as a failed drush command.

    ANY_MESSAGE treats every non-empty set as a failure, warnings and
    unmarked output included. ERRORS_ONLY needs at least one [error]
    line or a non-zero exit status.
    """

    ANY_MESSAGE = "any-message"
    ERRORS_ONLY = "errors-only"


DEFAULT_ERROR_POLICY = ErrorPolicy.ANY_MESSAGE


def is_failure(messages: MessageSet, exit_code: int, policy: ErrorPolicy) -> bool:
    if exit_code != 0:
        return True
    if not messages:
        return False
    if policy is ErrorPolicy.ERRORS_ONLY:
        return messages.has_errors()
    return True
