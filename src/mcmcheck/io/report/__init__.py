"""Functions for writing conflict reports."""

from . import write

__all__ = ["write"]
