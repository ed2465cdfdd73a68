"""Functions for reading KPP-formatted files."""

from . import read

__all__ = ["read"]
