from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from drushkit.adapters.errors import CommandFailed, CommandNotFound, CommandTimeout

logger = logging.getLogger(__name__)


class SubprocessPhpInterpreter:
    """Runs literal PHP code with ``php -r`` and returns what it printed."""

    def __init__(self, executable: str = "php", timeout: float | None = None) -> None:
        self.executable = executable
        self.timeout = timeout

    def run_code(self, code: str, cwd: Path) -> str:
        try:
            proc = subprocess.run(
                [self.executable, "-r", code],
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandNotFound(
                f"{self.executable} executable not found", cause=e
            )
        except subprocess.TimeoutExpired as e:
            raise CommandTimeout(
                f"{self.executable} -r timed out after {self.timeout}s", cause=e
            )
        if proc.returncode != 0:
            logger.warning(
                "%s -r exit=%s\nSTDERR: %s",
                self.executable,
                proc.returncode,
                (proc.stderr or "").strip(),
            )
            raise CommandFailed(
                f"{self.executable} -r exited with status {proc.returncode}",
                details={
                    "exit_code": proc.returncode,
                    "stderr": (proc.stderr or "").strip(),
                },
            )
        logger.debug("%s -r exit=0 (%d bytes)", self.executable, len(proc.stdout or ""))
        return proc.stdout or ""
