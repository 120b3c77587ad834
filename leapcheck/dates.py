"""Date utilities for leapcheck.

Pure functions for Gregorian leap-year determination.
"""

from leapcheck.domain.models import Year


def is_leap_year(year: Year) -> bool:
    """Check whether a year is a Gregorian leap year.

    Args:
        year: Any integer year, including zero and negative years.

    Returns:
        True if the year has 366 days, False otherwise.
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def describe_leap_year(year: Year) -> str:
    """Name the rule that decides whether a year is a leap year."""
    if is_leap_year(year):
        return "divisible by 400" if year % 100 == 0 else "divisible by 4 but not by 100"
    return "divisible by 100 but not by 400" if year % 100 == 0 else "not divisible by 4"


def leap_years_between(start: Year, end: Year) -> list[Year]:
    """List leap years in an inclusive range.

    Args:
        start: First year of the range.
        end: Last year of the range.

    Returns:
        Leap years in ascending order. Empty if start is after end.
    """
    return [Year(year) for year in range(start, end + 1) if is_leap_year(Year(year))]


def count_leap_years(start: Year, end: Year) -> int:
    """Count leap years in an inclusive range."""
    return len(leap_years_between(start, end))
