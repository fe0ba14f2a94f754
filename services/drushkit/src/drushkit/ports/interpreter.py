from pathlib import Path
from typing import Protocol


class InterpreterPort(Protocol):
    def run_code(self, code: str, cwd: Path) -> str: ...
