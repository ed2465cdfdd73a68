"""Functions for reading species database files."""

from . import read

__all__ = ["read"]
