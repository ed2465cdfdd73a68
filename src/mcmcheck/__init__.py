"""Cross-checking of species and RO2 lists in MCM mechanism files."""

from . import config, io, reconcile, run, schema, translate, util
from .config import (
    ExtractionMode,
    Markers,
    MatchPolicy,
    Settings,
    VersionConfig,
    default_settings,
)
from .error import FormatError
from .reconcile import compare, conflicts
from .schema import Column, Conflicts, FacsimileCheck, VersionResult
from .translate import is_ro2, ro2_species, translate_all

__all__ = [
    # types
    "Column",
    "Conflicts",
    "FacsimileCheck",
    "VersionResult",
    "FormatError",
    # configuration
    "ExtractionMode",
    "Markers",
    "MatchPolicy",
    "Settings",
    "VersionConfig",
    "default_settings",
    # translation
    "translate_all",
    "is_ro2",
    "ro2_species",
    # comparison
    "conflicts",
    "compare",
    # modules
    "config",
    "io",
    "reconcile",
    "run",
    "schema",
    "translate",
    "util",
]
