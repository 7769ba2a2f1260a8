"""Console rendering of query results.

Queries return values; this module is the only place that turns them into
output lines.
"""

from typing import Any, Dict, Iterable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .application.queries import QueryResult
from .domain.entities import LegoSet


def format_value(value: Any, null_placeholder: str = "null") -> str:
    """Render a single value, with the placeholder standing in for None."""
    if value is None:
        return null_placeholder
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, LegoSet):
        return value.name if value.name is not None else null_placeholder
    return str(value)


def format_lines(values: Iterable[Any], null_placeholder: str = "null") -> List[str]:
    """Render a sequence of values one per line."""
    return [format_value(v, null_placeholder) for v in values]


def render_result(
    console: Console,
    result: QueryResult,
    title: Optional[str] = None,
    null_placeholder: str = "null",
) -> bool:
    """Print a query result; return whether it succeeded."""
    if title:
        console.print(f"[bold cyan]{escape(title)}[/bold cyan]")

    if not result.success:
        for error in result.errors:
            console.print(f"[red]Error ({result.error_type or 'QueryError'}): {escape(error)}[/red]")
        return False

    data = result.data
    if isinstance(data, dict):
        console.print(theme_count_table(data, null_placeholder))
    elif isinstance(data, (list, tuple)):
        for line in format_lines(data, null_placeholder):
            console.print(line, markup=False, highlight=False)
    else:
        console.print(format_value(data, null_placeholder), markup=False, highlight=False)
    return True


def theme_count_table(counts: Dict[Optional[str], int], null_placeholder: str = "null") -> Table:
    table = Table(title="Sets per theme")
    table.add_column("Theme", style="cyan")
    table.add_column("Sets", justify="right")
    for theme, count in counts.items():
        table.add_row(format_value(theme, null_placeholder), str(count))
    return table


def set_details_table(lego_set: LegoSet, null_placeholder: str = "null") -> Table:
    table = Table(title=format_value(lego_set, null_placeholder), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in lego_set.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value) or None
        elif isinstance(value, dict):
            value = " x ".join(str(v) for v in value.values())
        table.add_row(key, format_value(value, null_placeholder))
    return table
