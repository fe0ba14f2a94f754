from __future__ import annotations

import io
import logging
import os
import signal
import subprocess
import threading
import time
from typing import IO

from drushkit.adapters.errors import CommandNotFound, CommandStartError, CommandTimeout
from drushkit.domain.command_result import CommandResult
from drushkit.domain.error_policy import DEFAULT_ERROR_POLICY, ErrorPolicy
from drushkit.domain.messages import DrushMessage, MessageSet, Severity, classify_line
from drushkit.ports.command_runner import DrushCommand

logger = logging.getLogger(__name__)

GLOBAL_FLAGS = ("--yes", "--nocolor")
DEFAULT_COLUMNS = 10000
# Bound on waiting for the drain threads once a timed-out process group is killed.
DRAIN_GRACE = 2.0


def build_argv(executable: str, cmd: DrushCommand) -> list[str]:
    return [executable, cmd.command, *GLOBAL_FLAGS, *cmd.arguments]


def build_env(columns: int = DEFAULT_COLUMNS) -> dict[str, str]:
    # Wide columns keep drush from wrapping a message away from its marker.
    env = os.environ.copy()
    env["DRUSH_COLUMNS"] = str(columns)
    env["COLUMNS"] = str(columns)
    return env


def exit_text(exit_code: int) -> str:
    """Describe how the process ended, e.g. ``exit status 1`` or ``signal: killed``."""
    if exit_code >= 0:
        return f"exit status {exit_code}"
    signum = -exit_code
    name = signal.strsignal(signum)
    if not name:
        try:
            name = signal.Signals(signum).name
        except ValueError:
            name = f"signal {signum}"
    return f"signal: {name.lower()}"


class _StdoutDrain(threading.Thread):
    def __init__(self, stream: IO[bytes]) -> None:
        super().__init__(name="drush-stdout", daemon=True)
        self._stream = stream
        self.buffer = io.BytesIO()

    def run(self) -> None:
        with self._stream:
            for chunk in iter(lambda: self._stream.read(8192), b""):
                self.buffer.write(chunk)

    def text(self) -> str:
        # Undecodable bytes survive as surrogates and can be re-encoded unchanged.
        return self.buffer.getvalue().decode("utf-8", errors="surrogateescape")


class _StderrDrain(threading.Thread):
    def __init__(self, stream: IO[bytes]) -> None:
        super().__init__(name="drush-stderr", daemon=True)
        self._stream = io.TextIOWrapper(stream, encoding="utf-8", errors="replace")
        self.ok_messages: list[DrushMessage] = []
        self.messages: list[DrushMessage] = []

    def run(self) -> None:
        with self._stream:
            for line in self._stream:
                # Blank lines are drush's spacing, not messages; they are not
                # recorded as [unknown].
                if not line.strip():
                    continue
                message = classify_line(line)
                if message.severity == Severity.OK:
                    self.ok_messages.append(message)
                else:
                    self.messages.append(message)


def _kill_group(proc: subprocess.Popen) -> None:
    # drush wrappers fork php or mysql; those hold the pipes too.
    if hasattr(os, "killpg"):
        try:
            os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
    else:
        proc.kill()
    proc.wait()


class SubprocessDrushRunner:
    """Runs drush in a child process and classifies what it writes to stderr.

    stdout and stderr are each drained on their own thread while the
    calling thread waits for the process. Both threads are joined before
    the result is built, so no late line is lost. stdout is read as bytes
    and decoded once, with no newline translation.

    Spawn failures raise an AdapterError and never produce a result. A
    non-zero exit is reported as one more message after the stderr lines.
    On timeout the whole process group is killed.
    """

    def __init__(
        self,
        executable: str = "drush",
        timeout: float | None = None,
        columns: int = DEFAULT_COLUMNS,
        error_policy: ErrorPolicy = DEFAULT_ERROR_POLICY,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self.columns = columns
        self.error_policy = error_policy

    def run(self, cmd: DrushCommand) -> CommandResult:
        argv = build_argv(self.executable, cmd)
        display = " ".join(argv[1:])
        if not cmd.directory.is_dir():
            raise CommandStartError(
                f"Working directory does not exist: {cmd.directory}",
                details={"command": display},
            )

        t0 = time.monotonic()
        try:
            proc = subprocess.Popen(
                argv,
                cwd=cmd.directory,
                env=build_env(self.columns),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                start_new_session=True,
            )
        except FileNotFoundError as e:
            raise CommandNotFound(
                f"{self.executable} executable not found",
                details={"command": display},
                hint="Install drush or point the drush setting at it",
                cause=e,
            )
        except OSError as e:
            raise CommandStartError(
                f"Could not start {self.executable}: {e}",
                details={"command": display},
                cause=e,
            )
        if proc.stdout is None or proc.stderr is None:
            _kill_group(proc)
            raise CommandStartError(
                "Could not open pipes to drush", details={"command": display}
            )

        out_drain = _StdoutDrain(proc.stdout)
        err_drain = _StderrDrain(proc.stderr)
        out_drain.start()
        err_drain.start()

        try:
            exit_code = proc.wait(timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            _kill_group(proc)
            out_drain.join(DRAIN_GRACE)
            err_drain.join(DRAIN_GRACE)
            elapsed = time.monotonic() - t0
            logger.error("drush %s timeout after %.1fs", display, elapsed)
            raise CommandTimeout(
                f"drush {cmd.command} timed out after {elapsed:.1f}s",
                details={"command": display, "timeout": self.timeout},
                cause=e,
            )
        out_drain.join()
        err_drain.join()

        elapsed = time.monotonic() - t0
        messages = list(err_drain.messages)
        if exit_code != 0:
            messages.append(classify_line(exit_text(exit_code)))
            logger.warning(
                "drush %s exit=%s (%.1fs)\nSTDERR: %s",
                display,
                exit_code,
                elapsed,
                " ".join(str(m) for m in err_drain.messages),
            )
        else:
            logger.debug("drush %s exit=0 (%.1fs)", display, elapsed)

        return CommandResult(
            stdout=out_drain.text(),
            ok_messages=MessageSet(err_drain.ok_messages),
            messages=MessageSet(messages),
            exit_code=exit_code,
            error_policy=self.error_policy,
        )
