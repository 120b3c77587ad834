"""Range command for listing leap years between two years."""

import sys
import tomllib

from rich.console import Console
from rich.table import Table

from leapcheck.config import get_default_range
from leapcheck.dates import describe_leap_year, leap_years_between
from leapcheck.domain.models import Year

console = Console()

# Widest range the table will render
MAX_RANGE_SPAN = 100_000


def resolve_range(start: int | None, end: int | None) -> tuple[Year, Year]:
    """Fill in missing bounds from the config file.

    Raises:
        ValueError: If the config holds a malformed range.
    """
    if start is not None and end is not None:
        return Year(start), Year(end)

    default_start, default_end = get_default_range()
    return (
        Year(start) if start is not None else default_start,
        Year(end) if end is not None else default_end,
    )


def range_command(start: int | None = None, end: int | None = None) -> None:
    """List the leap years between start and end inclusive."""
    try:
        first, last = resolve_range(start, end)
    except (ValueError, OSError, tomllib.TOMLDecodeError) as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(1)

    if first > last:
        console.print(f"[red]Start year {first} is after end year {last}.[/red]", style="bold")
        sys.exit(1)

    if last - first >= MAX_RANGE_SPAN:
        console.print(
            f"[red]Range {first}-{last} spans more than {MAX_RANGE_SPAN:,} years.[/red]", style="bold"
        )
        sys.exit(1)

    leap_years = leap_years_between(first, last)

    table = Table(title=f"Leap years {first}-{last}")
    table.add_column("Year", justify="right", style="cyan")
    table.add_column("Rule", style="dim")

    for year in leap_years:
        table.add_row(str(year), describe_leap_year(year))

    console.print(table)
    console.print(f"\n[cyan]{len(leap_years)}[/cyan] leap years")
