"""Test mcmcheck.io.kpp functions."""

from pathlib import Path

import pytest

import mcmcheck
from mcmcheck.config import ExtractionMode, Markers

DATA_PATH = Path(__file__).parent / "data"

KPP_331_SPECIES = [
    "CH4",
    "CH3O2",
    "C2H5O2",
    "HOCH2CH2O2",
    "CH3CO3",
    "CH2OOA",
    "CH3O",
    "HCHO",
    "NO",
    "NO2",
    "O3",
    "NEWSPC",
]


@pytest.mark.parametrize(
    "file_name, mode, names",
    [
        ("MCMv3.3.1.kpp", ExtractionMode.BOUNDED, KPP_331_SPECIES),
        ("MCMv3.3.1.kpp", ExtractionMode.SCAN, KPP_331_SPECIES),
        (
            "MCMv3.2.kpp",
            "bounded",
            ["CH4", "CH3O2", "C2H5O2", "IC3H7O2", "CH3O", "NO"],
        ),
        ("MCMv3.1.kpp", "scan", ["CH4", "CH3O2"]),
    ],
)
def test__species(file_name, mode, names):
    """Test mcmcheck.io.kpp.read.species."""
    spc_names = mcmcheck.io.kpp.read.species(DATA_PATH / file_name, mode=mode)
    assert spc_names == names, f"{spc_names} != {names}"


def test__species__scan_is_case_sensitive():
    """Test that only upper-case 'IGNORE' declarations are picked up."""
    lines = ["A = IGNORE;", "B = ignore;", "C=something;"]
    assert mcmcheck.io.kpp.read.species(lines, mode=ExtractionMode.SCAN) == ["A"]


def test__species__one_line_string():
    """Test that a one-line string that isn't a file is read as contents."""
    assert mcmcheck.io.kpp.read.species("A = IGNORE;", mode="scan") == ["A"]
    path_str = str(DATA_PATH / "MCMv3.2.kpp")
    assert mcmcheck.io.kpp.read.species(path_str)[:2] == ["CH4", "CH3O2"]


def test__species__bounded_keeps_every_line():
    """Test that the '#DEFVAR' block is taken as it is."""
    kpp_str = "#DEFVAR\nA = IGNORE ;\n\nB =IGNORE;\n#EQUATIONS\n"
    assert mcmcheck.io.kpp.read.species(kpp_str) == ["A", "", "B"]


@pytest.mark.parametrize(
    "kpp_str, marker",
    [
        ("A = IGNORE ;\nB = IGNORE ;\n", "#DEFVAR"),
        ("A = IGNORE ;\n#DEFVAR\nB = VAR ;\n", "IGNORE"),
        ("#DEFVAR\n#EQUATIONS\n", "IGNORE"),
    ],
)
def test__species__format_error(kpp_str, marker):
    """Test that a missing '#DEFVAR' block is an error in bounded mode."""
    with pytest.raises(mcmcheck.FormatError, match=marker):
        mcmcheck.io.kpp.read.species(kpp_str, mode=ExtractionMode.BOUNDED)


def test__species__missing_file():
    """Test that a missing file raises an I/O error."""
    with pytest.raises(OSError):
        mcmcheck.io.kpp.read.species(DATA_PATH / "MCMv9.9.kpp")


def test__species__custom_markers():
    """Test extraction with different sentinel tokens."""
    markers = Markers(defvar="#DEFFIX", ignore="SKIP")
    kpp_str = "#DEFVAR\nX = SKIP ;\n#DEFFIX\nA = SKIP ;\nB = SKIP;\n"
    assert mcmcheck.io.kpp.read.species(kpp_str, markers=markers) == ["A", "B"]


@pytest.mark.parametrize(
    "file_name, names",
    [
        ("MCMv3.3.1.kpp", ["CH3O2", "C2H5O2", "CH3CO3", "CH2OOA"]),
        ("MCMv3.2.kpp", ["CH3O2", "C2H5O2", "IC3H7O2"]),
        ("MCMv3.1.kpp", ["CH3O2"]),
    ],
)
def test__ro2_summation(file_name, names):
    """Test mcmcheck.io.kpp.read.ro2_summation."""
    ro2_names = mcmcheck.io.kpp.read.ro2_summation(DATA_PATH / file_name)
    assert ro2_names == names, f"{ro2_names} != {names}"


def test__ro2_summation__empty(caplog):
    """Test that a file without a summation gives an empty list and a warning."""
    ro2_names = mcmcheck.io.kpp.read.ro2_summation("#DEFVAR\nA = IGNORE ;\n")
    assert ro2_names == []
    assert "No RO2 summation" in caplog.text
