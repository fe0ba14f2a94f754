from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from drushkit.adapters.aliases import SiteAlias, load_alias_files
from drushkit.adapters.drush.runner import SubprocessDrushRunner
from drushkit.adapters.errors import DrushCommandError, SiteError
from drushkit.adapters.php.interpreter import SubprocessPhpInterpreter
from drushkit.application.config import DrushkitConfig
from drushkit.application.decoding import decode_database, decode_settings, decode_status
from drushkit.application.php_snippets import database_snippet, settings_snippet
from drushkit.domain.command_result import CommandResult
from drushkit.domain.settings import Settings
from drushkit.domain.site_info import Database, Status
from drushkit.ports.command_runner import CommandRunnerPort, DrushCommand
from drushkit.ports.interpreter import InterpreterPort

logger = logging.getLogger(__name__)


def ensure_success(result: CommandResult, command: str = "") -> CommandResult:
    """Raise DrushCommandError when ``result`` counts as failed."""
    if result.failed:
        raise DrushCommandError(result, command=command)
    return result


def resolve_site_root(root: Path | str, php: str = "php") -> Path:
    path = Path(root).expanduser()
    try:
        path = path.resolve()
    except OSError as e:
        raise SiteError(f"Drupal site error. Could not resolve {root}", cause=e)
    if not path.exists():
        raise SiteError(f"Drupal site error. {path} does not exist")
    if not path.is_dir():
        raise SiteError(f"Drupal site error. {path} is not a directory")
    if shutil.which(php) is None:
        raise SiteError(
            f"Drupal site error. {php} executable not found",
            hint="Install PHP or set the php setting in .drushkit.toml",
        )
    return path


@dataclass(frozen=True)
class Site:
    """A Drupal site, identified by its directory on disk.

    Example::

        site = Site.open("/var/www/drupal")
        result = site.drush("cr")
        if result.failed and result.messages.has_errors():
            raise DrushCommandError(result, command="cr")
        for message in result.ok_messages:
            print(message)
        print(result.stdout)
    """

    root: Path
    runner: CommandRunnerPort = field(compare=False, repr=False)
    interpreter: InterpreterPort = field(compare=False, repr=False)

    @classmethod
    def open(
        cls,
        root: Path | str,
        config: DrushkitConfig | None = None,
        runner: CommandRunnerPort | None = None,
        interpreter: InterpreterPort | None = None,
    ) -> Site:
        cfg = config or DrushkitConfig()
        path = resolve_site_root(root, php=cfg.php)
        if runner is None:
            runner = SubprocessDrushRunner(
                executable=cfg.drush,
                timeout=cfg.timeout,
                columns=cfg.columns,
                error_policy=cfg.error_policy,
            )
        if interpreter is None:
            interpreter = SubprocessPhpInterpreter(executable=cfg.php, timeout=cfg.timeout)
        logger.debug("Opened site %s", path)
        return cls(root=path, runner=runner, interpreter=interpreter)

    def __str__(self) -> str:
        return str(self.root)

    def drush(self, command: str, *arguments: str) -> CommandResult:
        return self.runner.run(
            DrushCommand(directory=self.root, command=command, arguments=list(arguments))
        )

    def get_status(self) -> Status:
        result = ensure_success(self.drush("status", "--format=json"), "status")
        return decode_status(result.stdout)

    def get_settings(self) -> Settings:
        status = self.get_status()
        out = self.interpreter.run_code(settings_snippet(status), cwd=self.root)
        return decode_settings(out)

    def get_default_database(self) -> Database:
        status = self.get_status()
        out = self.interpreter.run_code(database_snippet(status), cwd=self.root)
        return decode_database(out)

    def get_aliases(self) -> dict[str, SiteAlias]:
        return load_alias_files(self.get_status().drush_alias_files)
