"""Domain types for leapcheck."""

from leapcheck.domain.models import Year

__all__ = ["Year"]
