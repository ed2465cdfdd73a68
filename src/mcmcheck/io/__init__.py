"""Reading and writing of mechanism and report files in different formats."""

from . import db, facsimile, kpp, report

__all__ = ["db", "facsimile", "kpp", "report"]
