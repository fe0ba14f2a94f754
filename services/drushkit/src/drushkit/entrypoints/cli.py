from dataclasses import asdict, replace
from pathlib import Path
import json

import typer

from drushkit.adapters.errors import AdapterError, DrushCommandError
from drushkit.application.config import (
    DrushkitConfig,
    effective_error_policy,
    effective_timeout,
    load_config,
)
from drushkit.application.result_serialization import (
    serialize_command_result,
    serialize_message,
)
from drushkit.application.site import Site
from drushkit.domain.error_policy import ErrorPolicy
from drushkit.domain.messages import MessageSet, classify_line
from drushkit.entrypoints.logging_setup import setup_logging

EXIT_COMMAND_FAILED = 1
EXIT_SETUP_FAILED = 2

app = typer.Typer(add_completion=False, help="Inspect and administer a Drupal site through drush.")

SiteOption = typer.Option(Path("."), "--site", "-s", help="Drupal site directory")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    setup_logging(verbose)


def _config_for(site: Path) -> DrushkitConfig:
    return load_config(site if site.is_dir() else None)


def _echo_messages(messages: MessageSet) -> None:
    for message in messages:
        typer.echo(str(message), err=True)


def _fail(err: AdapterError) -> typer.Exit:
    if isinstance(err, DrushCommandError):
        _echo_messages(err.messages)
        return typer.Exit(EXIT_COMMAND_FAILED)
    typer.echo(f"Error: {err}", err=True)
    if err.hint:
        typer.echo(f"Hint: {err.hint}", err=True)
    return typer.Exit(EXIT_SETUP_FAILED)


def _open(site: Path, config: DrushkitConfig | None = None) -> Site:
    return Site.open(site, config=config or _config_for(site))


@app.command()
def status(site: Path = SiteOption, json_output: bool = typer.Option(False, "--json")):
    try:
        info = _open(site).get_status()
    except AdapterError as e:
        raise _fail(e)
    if json_output:
        typer.echo(json.dumps(asdict(info), indent=2))
        return
    typer.echo(f"Drupal version : {info.drupal_version}")
    typer.echo(f"Site root      : {info.root}")
    typer.echo(f"Site path      : {info.site}")
    typer.echo(f"Database       : {info.db_driver}://{info.db_hostname}/{info.db_name}")
    typer.echo(f"Drush version  : {info.drush_version}")


@app.command()
def settings(key: str | None = typer.Argument(None), site: Path = SiteOption):
    try:
        values = _open(site).get_settings()
    except AdapterError as e:
        raise _fail(e)
    if key is None:
        typer.echo(json.dumps(values.to_dict(), indent=2, sort_keys=True))
        return
    if not values.has_value(key):
        typer.echo(f"Error: setting {key!r} is not defined", err=True)
        raise typer.Exit(EXIT_COMMAND_FAILED)
    value = values[key]
    typer.echo(value if isinstance(value, str) else json.dumps(value))


@app.command()
def database(site: Path = SiteOption, dsn: bool = typer.Option(False, "--dsn")):
    try:
        db = _open(site).get_default_database()
    except AdapterError as e:
        raise _fail(e)
    if dsn:
        typer.echo(db.dsn())
        return
    typer.echo(json.dumps(asdict(db), indent=2))


@app.command()
def aliases(site: Path = SiteOption):
    try:
        found = _open(site).get_aliases()
    except AdapterError as e:
        raise _fail(e)
    for name in sorted(found):
        alias = found[name]
        target = f"{alias.user}@{alias.host}:{alias.root}" if alias.is_remote else alias.root
        typer.echo(f"{name}\t{target}")


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def drush(
    ctx: typer.Context,
    command: str = typer.Argument(...),
    site: Path = SiteOption,
    json_output: bool = typer.Option(False, "--json"),
    error_policy: ErrorPolicy | None = typer.Option(None, "--error-policy"),
    timeout: float | None = typer.Option(None, "--timeout"),
):
    args = [str(a) for a in ctx.args]
    try:
        config = _config_for(site)
        config = replace(
            config,
            error_policy=effective_error_policy(error_policy, config),
            timeout=effective_timeout(timeout, config),
        )
        result = _open(site, config).drush(command, *args)
    except AdapterError as e:
        raise _fail(e)

    if json_output:
        typer.echo(json.dumps(serialize_command_result(result, command=command, args=args)))
    else:
        if result.stdout:
            raw = result.stdout.encode("utf-8", errors="surrogateescape")
            typer.echo(raw, nl=not raw.endswith(b"\n"))
        for message in result.ok_messages:
            typer.echo(str(message), err=True)
        _echo_messages(result.messages)
    if result.failed:
        raise typer.Exit(EXIT_COMMAND_FAILED)


@app.command()
def classify(line: str):
    """Show how a drush stderr line is classified."""
    typer.echo(json.dumps(serialize_message(classify_line(line))))
