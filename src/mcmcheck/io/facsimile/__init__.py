"""Functions for reading FACSIMILE-formatted files."""

from . import read

__all__ = ["read"]
