"""monolog-factory CLI entry point.

Inspect configuration discovery and the loggers it produces.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..builder import LoggerBuilder
from ..config.resolver import ConfigResolver
from ..config.settings import MonologSettings, runtime_options
from ..constants import CONFIG_SETTING_KEY, DEFAULT_LOGGER_NAME
from ..exceptions import ConfigNotFoundError, MonologError
from ..levels import SEVERITY_TABLE

console = Console()


def setup_logging(verbose: int = 0) -> None:
    """Set up logging for the CLI's own diagnostics."""
    logging.basicConfig(
        level=logging.DEBUG if verbose > 1 else logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _make_resolver(ctx: click.Context) -> ConfigResolver:
    options = dict(runtime_options)
    if ctx.obj.get("setting"):
        options[CONFIG_SETTING_KEY] = ctx.obj["setting"]
    return ConfigResolver(include_path=list(ctx.obj["include_path"]) or None, options=options)


def _print_error(error: MonologError) -> None:
    console.print(f"[red]{escape(error.message)}[/red]")
    if error.help_text:
        console.print(f"[dim]{escape(error.help_text)}[/dim]")


@click.group()
@click.version_option(version=__version__, prog_name="monolog-factory")
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.option(
    "--include-path", "-I",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory searched for configuration files (repeatable)"
)
@click.option(
    "--option", "-o",
    "setting",
    type=str,
    help=f"Value for the '{CONFIG_SETTING_KEY}' process option"
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, include_path, setting: Optional[str]) -> None:
    """Build loggers from JSON handler configuration.

    \b
    Examples:
        monolog-factory resolve
        monolog-factory resolve ./logging.json
        monolog-factory check --name app -I /etc/myapp
        monolog-factory levels
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["include_path"] = include_path
    ctx.obj["setting"] = setting


@cli.command()
@click.argument("filename", required=False)
@click.pass_context
def resolve(ctx: click.Context, filename: Optional[str]) -> None:
    """Show which configuration file resolves and its handlers."""
    resolver = _make_resolver(ctx)
    settings = MonologSettings()

    candidates = Table(title="Configuration candidates")
    candidates.add_column("Priority", justify="right")
    candidates.add_column("Source")
    candidates.add_column("Value")
    candidates.add_column("Located")
    include_dirs = resolver.include_dirs(settings)
    for index, candidate in enumerate(resolver.candidates(filename, settings), start=1):
        located = resolver.locate(candidate, include_dirs)
        candidates.add_row(
            str(index),
            candidate.source.value,
            escape(candidate.value),
            escape(str(located)) if located else "[dim]-[/dim]",
        )
    console.print(candidates)

    try:
        document = resolver.resolve(filename)
    except ConfigNotFoundError as e:
        _print_error(e)
        sys.exit(1)

    console.print(f"[green]Resolved[/green] {escape(str(document.source))}")
    handlers = Table(title="Handlers")
    handlers.add_column("#", justify="right")
    handlers.add_column("Class")
    handlers.add_column("Parameters")
    handlers.add_column("Formatter")
    for index, spec in enumerate(document.handlers, start=1):
        handlers.add_row(
            str(index),
            spec.class_name,
            escape(", ".join(f"{k}={v!r}" for k, v in (spec.parameters or {}).items())) or "-",
            spec.formatter or "-",
        )
    console.print(handlers)


@cli.command()
@click.argument("filename", required=False)
@click.option("--name", "-n", default=DEFAULT_LOGGER_NAME, show_default=True, help="Logger name")
@click.pass_context
def check(ctx: click.Context, filename: Optional[str], name: str) -> None:
    """Resolve the configuration and build the logger it describes."""
    resolver = _make_resolver(ctx)
    try:
        document = resolver.resolve(filename)
        built = LoggerBuilder().build(name, document)
    except MonologError as e:
        _print_error(e)
        sys.exit(1)

    table = Table(title=f"Logger '{built.name}'")
    table.add_column("#", justify="right")
    table.add_column("Handler")
    table.add_column("Level")
    for index, handler in enumerate(built.handlers, start=1):
        table.add_row(str(index), type(handler).__name__, logging.getLevelName(handler.level))
    console.print(table)
    if built.filters:
        console.print("Processors: " + ", ".join(type(f).__name__ for f in built.filters))

    for handler in built.handlers:
        handler.close()


@cli.command()
def levels() -> None:
    """List the known severity levels."""
    table = Table(title="Severity levels")
    table.add_column("Rank", justify="right")
    table.add_column("Name")
    for rank, level_name in SEVERITY_TABLE.items():
        table.add_row(str(rank), level_name)
    console.print(table)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
