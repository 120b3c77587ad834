"""Gregorian leap-year checks."""

from leapcheck.dates import is_leap_year

__all__ = ["is_leap_year"]
