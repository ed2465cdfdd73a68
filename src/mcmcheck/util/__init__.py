"""Utility functions."""

from . import df_, io_

__all__ = ["df_", "io_"]
