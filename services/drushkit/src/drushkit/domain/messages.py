from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import overload


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    OK = "ok"
    UNKNOWN = "unknown"


ERROR_MARKER = "[error]"
WARNING_MARKER = "[warning]"
NOTICE_MARKER = "[notice]"
OK_MARKER = "[ok]"
SUCCESS_MARKER = "[success]"
UNKNOWN_MARKER = "[unknown]"

# Checked in order; the first suffix that matches wins.
# Notices share WARNING severity with warnings, the marker keeps them apart.
MARKERS: tuple[tuple[str, Severity], ...] = (
    (ERROR_MARKER, Severity.ERROR),
    (WARNING_MARKER, Severity.WARNING),
    (NOTICE_MARKER, Severity.WARNING),
    (OK_MARKER, Severity.OK),
    (SUCCESS_MARKER, Severity.OK),
)


@dataclass(frozen=True)
class DrushMessage:
    text: str
    severity: Severity
    marker: str = UNKNOWN_MARKER

    def __str__(self) -> str:
        return f"{self.marker}: {self.text}"

    @property
    def is_notice(self) -> bool:
        return self.marker == NOTICE_MARKER or self.severity == Severity.NOTICE


def classify_line(line: str) -> DrushMessage:
    """Turn one raw stderr line from drush into a DrushMessage.

    The line is trimmed, then its tail is compared against the known
    severity markers. The matched marker and the whitespace around it are
    dropped from the stored text. Lines without a marker are UNKNOWN and
    keep their trimmed text.
    """
    stripped = line.strip()
    for marker, severity in MARKERS:
        if stripped.endswith(marker):
            text = stripped[: -len(marker)].strip()
            return DrushMessage(text=text, severity=severity, marker=marker)
    return DrushMessage(text=stripped, severity=Severity.UNKNOWN)


class MessageSet(Sequence[DrushMessage]):
    """Ordered, read-only collection of classified drush messages."""

    __slots__ = ("_messages",)

    def __init__(self, messages: Iterable[DrushMessage] = ()) -> None:
        self._messages: tuple[DrushMessage, ...] = tuple(messages)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> MessageSet:
        return cls(classify_line(line) for line in lines)

    @overload
    def __getitem__(self, index: int) -> DrushMessage: ...

    @overload
    def __getitem__(self, index: slice) -> MessageSet: ...

    def __getitem__(self, index: int | slice) -> DrushMessage | MessageSet:
        if isinstance(index, slice):
            return MessageSet(self._messages[index])
        return self._messages[index]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[DrushMessage]:
        return iter(self._messages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MessageSet):
            return self._messages == other._messages
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._messages)

    def __repr__(self) -> str:
        return f"MessageSet({list(self._messages)!r})"

    def __str__(self) -> str:
        return "".join(f"{message} " for message in self._messages)

    def __add__(self, other: Iterable[DrushMessage]) -> MessageSet:
        return MessageSet((*self._messages, *other))

    def of_severity(self, severity: Severity) -> MessageSet:
        return MessageSet(m for m in self._messages if m.severity == severity)

    def has_errors(self) -> bool:
        return any(m.severity == Severity.ERROR for m in self._messages)

    def has_warnings(self) -> bool:
        """True for [warning] and [notice] lines alike."""
        return any(m.severity == Severity.WARNING for m in self._messages)

    def has_notices(self) -> bool:
        return any(m.is_notice for m in self._messages)

    def has_unknowns(self) -> bool:
        return any(m.severity == Severity.UNKNOWN for m in self._messages)
