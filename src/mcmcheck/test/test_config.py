"""Test mcmcheck.config functions."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mcmcheck.config import (
    ExtractionMode,
    MatchPolicy,
    Settings,
    VersionConfig,
    default_settings,
)

YAML_STR = """
report_folder: out
jobs: 2
versions:
  - version: v3.3.1
    db_file: DB/MCMspecies.db
    kpp_file: KPPfiles/MCMv3.3.1.kpp
    fac_file: /abs/MCMv3.3.1.fac
    match_policy: first-match
  - version: v3.2
    db_file: DB/MCMspecies.db
    kpp_file: KPPfiles/MCMv3.2.kpp
    extraction: scan
    markers:
      ignore: SKIP
"""


def test__from_yaml(tmp_path):
    """Test mcmcheck.config.Settings.from_yaml."""
    path = tmp_path / "mcmcheck.yaml"
    path.write_text(YAML_STR)
    settings = Settings.from_yaml(path)
    print(settings)
    base = tmp_path.resolve()
    assert settings.jobs == 2
    assert settings.report_folder == base / "out"

    cfg331, cfg32 = settings.versions
    assert cfg331.db_file == base / "DB" / "MCMspecies.db"
    assert cfg331.kpp_file == base / "KPPfiles" / "MCMv3.3.1.kpp"
    assert cfg331.fac_file == Path("/abs/MCMv3.3.1.fac")
    assert cfg331.match_policy == MatchPolicy.FIRST
    assert cfg331.extraction == ExtractionMode.BOUNDED
    assert cfg32.fac_file is None
    assert cfg32.match_policy == MatchPolicy.LAST
    assert cfg32.extraction == ExtractionMode.SCAN
    assert cfg32.markers.ignore == "SKIP"
    assert cfg32.markers.defvar == "#DEFVAR"


def test__from_yaml__errors(tmp_path):
    """Test that missing or invalid settings files are rejected."""
    with pytest.raises(FileNotFoundError):
        Settings.from_yaml(tmp_path / "missing.yaml")

    path = tmp_path / "bad.yaml"
    path.write_text(YAML_STR.replace("first-match", "best-match"))
    with pytest.raises(ValidationError):
        Settings.from_yaml(path)

    # Top level is a list, not a mapping
    path.write_text("- a\n- b\n")
    with pytest.raises(ValidationError):
        Settings.from_yaml(path)


@pytest.mark.parametrize("version", ["", "  ", "v3/3"])
def test__version_config__bad_label(version):
    """Test that unusable version labels are rejected."""
    with pytest.raises(ValidationError):
        VersionConfig(version=version, db_file="a.db", kpp_file="a.kpp")


def test__default_settings():
    """Test mcmcheck.config.default_settings."""
    settings = default_settings(db_folder="db", kpp_folder="kpp", fac_folder=None)
    assert [v.version for v in settings.versions] == ["v3.3.1", "v3.2", "v3.1"]
    assert [v.match_policy for v in settings.versions] == [
        MatchPolicy.FIRST,
        MatchPolicy.LAST,
        MatchPolicy.LAST,
    ]
    assert settings.versions[1].kpp_file == Path("kpp") / "MCMv3.2.kpp"
    assert all(v.db_file == Path("db") / "MCMspecies.db" for v in settings.versions)
    assert all(v.fac_file is None for v in settings.versions)


def test__select():
    """Test mcmcheck.config.Settings.select."""
    settings = default_settings().select(["v3.1", "v3.3.1"])
    assert [v.version for v in settings.versions] == ["v3.1", "v3.3.1"]
    with pytest.raises(ValueError, match="v4.0"):
        settings.select(["v4.0"])
