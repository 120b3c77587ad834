"""Domain type definitions for leapcheck.

- Year: Signed Gregorian calendar year (zero and negatives are proleptic years)
"""

from typing import NewType

Year = NewType("Year", int)
