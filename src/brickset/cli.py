"""Command line interface for brickset."""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from .application.queries import (
    CountByThemeQuery,
    DistinctThemesQuery,
    FirstNumbersQuery,
    HasThemeQuery,
    LowerCaseThemesQuery,
    MaxPiecesQuery,
    MinPiecesQuery,
    NameInitialsQuery,
    Query,
    QueryBus,
    QueryResult,
    SumPiecesWithEmptyThemeQuery,
    SumPiecesWithThemeQuery,
    create_query_bus,
)
from .domain.result import partition
from .domain.services import LegoSetQueryService, MissingThemePolicy
from .exceptions import BricksetError
from .infrastructure.repositories import LegoSetRepository
from .logging_setup import setup_logging
from .models.config import Config, load_config
from .presentation import render_result, set_details_table
from .schema import validate_set_file

console = Console()

POLICY_CHOICE = click.Choice([p.value for p in MissingThemePolicy])


class AppContext:
    """Objects shared by every command of one invocation."""

    def __init__(self, config: Config):
        self.config = config
        self._bus: Optional[QueryBus] = None

    @property
    def bus(self) -> QueryBus:
        if self._bus is None:
            repository = LegoSetRepository(self.config.data_file)
            self._bus = create_query_bus(LegoSetQueryService(repository))
        return self._bus

    def run(self, query: Query, title: Optional[str] = None) -> QueryResult:
        result = self.bus.dispatch(query)
        render_result(console, result, title, self.config.null_placeholder)
        return result


def _run_or_exit(app: AppContext, query: Query) -> None:
    try:
        result = app.run(query)
    except BricksetError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    if not result.success:
        sys.exit(1)


@click.group()
@click.version_option(package_name="brickset")
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--data',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Set data file (JSON array); defaults to the bundled brickset.json'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], data: Optional[Path], verbose: bool):
    """Report on a fixed collection of LEGO sets."""
    try:
        if config:
            cfg = load_config(config, data_file=data)
        else:
            cfg = Config(data_file=data) if data else Config.default()
    except BricksetError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    setup_logging("INFO" if verbose else cfg.log_level)
    ctx.obj = AppContext(cfg)


@cli.command()
@click.pass_obj
def themes(app: AppContext):
    """List themes without repetition, alphabetically, absent theme first."""
    _run_or_exit(app, DistinctThemesQuery())


@cli.command('sum-pieces')
@click.argument('theme', required=False)
@click.option('--empty', is_flag=True, help='Sum sets whose theme is empty instead')
@click.option('--policy', type=POLICY_CHOICE, default=None,
              help='How to treat sets without a theme')
@click.pass_obj
def sum_pieces(app: AppContext, theme: Optional[str], empty: bool, policy: Optional[str]):
    """Sum the pieces of sets with THEME."""
    if empty == (theme is not None):
        raise click.UsageError("Give either THEME or --empty")

    if empty:
        query = SumPiecesWithEmptyThemeQuery(
            policy=MissingThemePolicy(policy or MissingThemePolicy.FAIL.value)
        )
    else:
        query = SumPiecesWithThemeQuery(
            theme=theme,
            policy=MissingThemePolicy(policy or MissingThemePolicy.EXCLUDE.value)
        )
    _run_or_exit(app, query)


@cli.command('max-pieces')
@click.option('--details', is_flag=True, help='Show every field of the set')
@click.pass_obj
def max_pieces(app: AppContext, details: bool):
    """Show the set with the most pieces."""
    if not details:
        _run_or_exit(app, MaxPiecesQuery())
        return

    try:
        result = app.bus.dispatch(MaxPiecesQuery())
    except BricksetError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    if not result.success:
        render_result(console, result)
        sys.exit(1)
    console.print(set_details_table(result.data, app.config.null_placeholder))


@cli.command()
@click.option('--limit', type=click.IntRange(min=0), default=None,
              help='How many numbers to show (default from configuration)')
@click.pass_obj
def numbers(app: AppContext, limit: Optional[int]):
    """List the first set numbers in alphabetical order."""
    _run_or_exit(app, FirstNumbersQuery(limit=app.config.demo_limit if limit is None else limit))


@cli.command('lower-themes')
@click.option('--policy', type=POLICY_CHOICE, default=MissingThemePolicy.FAIL.value,
              show_default=True, help='How to treat sets without a theme')
@click.pass_obj
def lower_themes(app: AppContext, policy: str):
    """List every theme in lower case, in collection order."""
    _run_or_exit(app, LowerCaseThemesQuery(policy=MissingThemePolicy(policy)))


@cli.command('has-theme')
@click.argument('theme')
@click.option('--policy', type=POLICY_CHOICE, default=MissingThemePolicy.FAIL.value,
              show_default=True, help='How to treat sets without a theme')
@click.pass_obj
def has_theme(app: AppContext, theme: str, policy: str):
    """Tell whether any set has THEME."""
    _run_or_exit(app, HasThemeQuery(theme=theme, policy=MissingThemePolicy(policy)))


@cli.command()
@click.pass_obj
def initials(app: AppContext):
    """List the first character of every set name."""
    _run_or_exit(app, NameInitialsQuery())


@cli.command('min-pieces')
@click.pass_obj
def min_pieces(app: AppContext):
    """Show the smallest piece count."""
    _run_or_exit(app, MinPiecesQuery())


@cli.command('count-by-theme')
@click.pass_obj
def count_by_theme(app: AppContext):
    """Count sets per theme."""
    _run_or_exit(app, CountByThemeQuery())


@cli.command()
@click.pass_obj
def validate(app: AppContext):
    """Check the data file against the set schema without loading it."""
    errors = validate_set_file(app.config.data_file)
    if errors:
        console.print(f"[red]{escape(str(app.config.data_file))} is invalid:[/red]")
        for error in errors:
            console.print(f"  • {error}", markup=False)
        sys.exit(1)
    console.print(f"[green]{escape(str(app.config.data_file))} is valid[/green]")


def demo_queries(config: Config) -> List[Tuple[str, Query]]:
    """The fixed report sequence run by the demo command."""
    return [
        ("Themes", DistinctThemesQuery()),
        (f"Pieces in {config.demo_theme} sets", SumPiecesWithThemeQuery(theme=config.demo_theme)),
        ("Pieces in sets with an empty theme", SumPiecesWithEmptyThemeQuery()),
        ("Set with the most pieces", MaxPiecesQuery()),
        (f"First {config.demo_limit} set numbers", FirstNumbersQuery(limit=config.demo_limit)),
        ("Themes in lower case", LowerCaseThemesQuery()),
    ]


@cli.command()
@click.pass_obj
def demo(app: AppContext):
    """Run every report once with the configured example arguments.

    Each report runs independently; a failing report is shown and the rest
    still run.
    """
    try:
        outcomes = [app.run(query, title).outcome for title, query in demo_queries(app.config)]
    except BricksetError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    _, errors = partition(outcomes)
    if errors:
        console.print(f"\n[yellow]{len(errors)} of {len(outcomes)} reports failed[/yellow]")
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
