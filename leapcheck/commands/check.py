"""Check command for testing individual years."""

import sys

from rich.console import Console

from leapcheck.dates import describe_leap_year, is_leap_year
from leapcheck.domain.models import Year

console = Console()


def format_verdict(year: Year, explain: bool) -> str:
    """Format the result line for a single year.

    Args:
        year: Year that was checked.
        explain: Whether to append the deciding rule.

    Returns:
        Rich markup string.
    """
    if is_leap_year(year):
        line = f"[green]{year} is a leap year[/green]"
    else:
        line = f"[red]{year} is not a leap year[/red]"

    if explain:
        line += f" [dim]({describe_leap_year(year)})[/dim]"
    return line


def check_command(years: list[int], explain: bool = False) -> None:
    """Print whether each year is a leap year.

    Exits with status 1 unless every year is a leap year.
    """
    all_leap = True
    for value in years:
        year = Year(value)
        console.print(format_verdict(year, explain))
        if not is_leap_year(year):
            all_leap = False

    if not all_leap:
        sys.exit(1)
