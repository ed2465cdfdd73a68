"""Test the mcmcheck command line interface."""

from pathlib import Path

import pytest

from mcmcheck import cli

DATA_PATH = Path(__file__).parent / "data"
FOLDER_ARGS = [
    "--db-folder",
    str(DATA_PATH),
    "--kpp-folder",
    str(DATA_PATH),
    "--fac-folder",
    str(DATA_PATH),
]


def test__main(tmp_path, capsys):
    """Test a run where every version can be checked."""
    status = cli.main(["v3.3.1", *FOLDER_ARGS, "-o", str(tmp_path)])
    assert status == 0
    assert "v3.3.1: 4 conflicts" in capsys.readouterr().out
    assert (tmp_path / "RO2sum_v3.3.1.txt").exists()
    assert (tmp_path / "summary.txt").exists()


def test__main__failed_version(tmp_path, capsys):
    """Test a run where one version cannot be checked."""
    status = cli.main([*FOLDER_ARGS, "--no-fac", "-o", str(tmp_path), "-q"])
    assert status == 1
    out = capsys.readouterr().out
    assert "v3.3.1: 2 conflicts" in out
    assert "v3.2: 0 conflicts" in out
    assert "v3.1: FAILED" in out


def test__main__bad_config(tmp_path):
    """Test that a missing settings file is a usage error."""
    assert cli.main(["-c", str(tmp_path / "missing.yaml")]) == 2
    assert cli.main(["v9.9"]) == 2
    assert cli.main(["-j", "0"]) == 2

    path = tmp_path / "bad.yaml"
    path.write_text("- a\n- b\n")
    assert cli.main(["-c", str(path)]) == 2


@pytest.mark.parametrize(
    "jobs_args, jobs", [([], 3), (["-j", "1"], 1), (["-j", "4"], 4)]
)
def test__settings__jobs(tmp_path, jobs_args, jobs):
    """Test that the jobs option replaces the value in the settings file."""
    path = tmp_path / "mcmcheck.yaml"
    path.write_text("jobs: 3\n")
    args = cli.parser().parse_args(["-c", str(path), *jobs_args])
    assert cli.settings(args).jobs == jobs
