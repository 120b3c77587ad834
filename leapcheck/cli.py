"""CLI entry point for leapcheck."""

import typer

from leapcheck.commands.admin import init_command
from leapcheck.commands.check import check_command
from leapcheck.commands.range import range_command

app = typer.Typer(
    name="leapcheck",
    help="Gregorian leap-year checker",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Gregorian leap-year checker."""
    pass


@app.command()
def check(
    years: list[int] = typer.Argument(..., help="Years to check (pass negative years after --)"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show which rule decided each year"),
) -> None:
    """Check whether years are leap years."""
    check_command(years, explain)


@app.command(name="range")
def range_(
    start: int = typer.Option(None, "--start", help="First year (default from config)"),
    end: int = typer.Option(None, "--end", help="Last year (default from config)"),
) -> None:
    """List the leap years in a range of years."""
    range_command(start, end)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize leapcheck configuration."""
    init_command(force)


if __name__ == "__main__":
    app()
