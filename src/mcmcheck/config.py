"""Run configuration: file locations, markers, and match policy per mechanism version.

Each mechanism version gets its own `VersionConfig`. The historic analysis covered
MCM v3.3.1, v3.2 and v3.1, which differ only in the files they read and in how
duplicate names in the species database are resolved (see `MatchPolicy`).

Example:
    >>> settings = Settings.from_yaml("mcmcheck.yaml")
    >>> [v.version for v in settings.versions]
"""

import enum
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schema import Column

logger = logging.getLogger(__name__)

DEFAULT_DB_FILE = "MCMspecies.db"
DEFAULT_VERSIONS = ("v3.3.1", "v3.2", "v3.1")


class MatchPolicy(str, enum.Enum):
    """How to resolve a name that appears in more than one database row.

    Newer versions are listed first in the species database and legacy aliases are
    appended later, so the newest version takes the first match and older versions
    take the last.
    """

    FIRST = "first-match"
    LAST = "last-match"


class ExtractionMode(str, enum.Enum):
    """How species declarations are located in a KPP file."""

    # Every line between '#DEFVAR' and the last 'IGNORE' line
    BOUNDED = "bounded"
    # Every line anywhere in the file that contains 'IGNORE'
    SCAN = "scan"


class Markers(BaseModel):
    """Sentinel tokens for the text formats."""

    model_config = ConfigDict(frozen=True)

    # species database
    separator: str = "&"
    # KPP
    defvar: str = "#DEFVAR"
    ignore: str = "IGNORE"
    concentration: str = "C("
    concentration_prefix: str = "C(ind_"
    continuation: str = "&"
    # FACSIMILE
    variable: str = "VARIABLE"
    terminator: str = ";"
    ro2_assignment: str = r"^\s*RO2\s*="


class VersionConfig(BaseModel):
    """Configuration for checking a single mechanism version."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Version label, e.g. 'v3.3.1'")
    db_file: Path = Field(..., description="Species database ('&'-delimited table)")
    kpp_file: Path = Field(..., description="KPP mechanism definition file")
    fac_file: Path | None = Field(
        default=None, description="FACSIMILE mechanism file; skipped if not given"
    )
    match_policy: MatchPolicy = MatchPolicy.LAST
    extraction: ExtractionMode = ExtractionMode.BOUNDED
    markers: Markers = Markers()
    mcm_column: str = Column.MCM
    gecko_column: str = Column.GECKO

    @field_validator("version")
    @classmethod
    def version_is_not_blank(cls, value: str) -> str:
        """Make sure the version label can be used in file names."""
        value = value.strip()
        if not value or any(c in value for c in "/\\"):
            raise ValueError(f"Bad version label: {value!r}")
        return value

    def resolved(self, base: Path) -> "VersionConfig":
        """Resolve relative file paths against a base folder.

        :param base: The base folder
        :return: A copy of the configuration with absolute paths
        """

        def _resolve(path: Path | None) -> Path | None:
            if path is None or path.is_absolute():
                return path
            return (base / path).resolve()

        return self.model_copy(
            update={
                "db_file": _resolve(self.db_file),
                "kpp_file": _resolve(self.kpp_file),
                "fac_file": _resolve(self.fac_file),
            }
        )


class Settings(BaseModel):
    """A complete run: the versions to check and where reports go."""

    versions: list[VersionConfig] = Field(default_factory=list)
    report_folder: Path = Path("report")
    summary_file: str | None = "summary.txt"
    jobs: int = Field(default=1, ge=1)
    compare_versions: bool = Field(
        default=False,
        description="Also compare every version against the first one",
    )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Settings":
        """Load and validate settings from a YAML file.

        All relative paths are resolved relative to the directory containing the
        YAML file.

        :param yaml_path: Path to the YAML file
        :return: The settings
        :raises FileNotFoundError: If the file doesn't exist
        :raises pydantic.ValidationError: If the settings are invalid
        """
        yaml_path = Path(yaml_path).resolve()
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        logger.info(f"Reading configuration from: {yaml_path}")
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls.model_validate(data)
        base = yaml_path.parent
        report_folder = settings.report_folder
        if not report_folder.is_absolute():
            report_folder = (base / report_folder).resolve()
        return settings.model_copy(
            update={
                "versions": [v.resolved(base) for v in settings.versions],
                "report_folder": report_folder,
            }
        )

    def select(self, versions: list[str]) -> "Settings":
        """Restrict the settings to a subset of versions, in the requested order.

        :param versions: Version labels
        :return: The restricted settings
        """
        cfg_dct = {v.version: v for v in self.versions}
        missing = [v for v in versions if v not in cfg_dct]
        if missing:
            raise ValueError(f"Unknown version(s) {missing}; have {list(cfg_dct)}")
        return self.model_copy(update={"versions": [cfg_dct[v] for v in versions]})


def match_policy(version: str) -> MatchPolicy:
    """Get the default match policy for a mechanism version.

    :param version: Version label
    :return: The match policy
    """
    return MatchPolicy.FIRST if version == DEFAULT_VERSIONS[0] else MatchPolicy.LAST


def default_settings(
    db_folder: str | Path = "DB",
    kpp_folder: str | Path = "KPPfiles",
    fac_folder: str | Path | None = "FACSIMILEfiles",
    report_folder: str | Path = "report",
    versions: tuple[str, ...] = DEFAULT_VERSIONS,
) -> Settings:
    """Build settings for the standard file layout.

    All versions share one species database; each version has its own
    'MCM<version>.kpp' and, if a FACSIMILE folder is given, 'MCM<version>.fac'.

    :param db_folder: Folder with the species database
    :param kpp_folder: Folder with the KPP files
    :param fac_folder: Folder with the FACSIMILE files, or `None` to skip them
    :param report_folder: Folder for the report files
    :param versions: Version labels
    :return: The settings
    """
    db_file = Path(db_folder) / DEFAULT_DB_FILE
    cfgs = [
        VersionConfig(
            version=v,
            db_file=db_file,
            kpp_file=Path(kpp_folder) / f"MCM{v}.kpp",
            fac_file=None if fac_folder is None else Path(fac_folder) / f"MCM{v}.fac",
            match_policy=match_policy(v),
        )
        for v in versions
    ]
    return Settings(versions=cfgs, report_folder=Path(report_folder))
