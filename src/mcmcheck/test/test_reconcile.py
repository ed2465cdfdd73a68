"""Test mcmcheck.reconcile functions."""

import pytest

import mcmcheck
from mcmcheck import reconcile

NAME_LISTS = [
    ["A", "B", "C"],
    ["B", "C", "D"],
    ["CH3O2", "C2H5O2", "ch3o2"],
    ["A", "A", "B"],
    ["X"],
]


@pytest.mark.parametrize("names", NAME_LISTS)
def test__conflicts__self(names):
    """Test that a list has no conflicts with itself."""
    assert reconcile.conflicts(names, names) == []
    conf = reconcile.compare(names, names, "test", "v0", "ref", "cand")
    assert conf.is_empty()
    assert conf.count() == 0


@pytest.mark.parametrize("names1", NAME_LISTS)
@pytest.mark.parametrize("names2", NAME_LISTS)
def test__conflicts__symmetry(names1, names2):
    """Test that the two directions split the symmetric difference."""
    confs12 = reconcile.conflicts(names1, names2)
    confs21 = reconcile.conflicts(names2, names1)
    assert set(confs12) == set(names2) - set(names1)
    assert set(confs21) == set(names1) - set(names2)
    assert not set(confs12) & set(confs21)
    assert set(confs12) | set(confs21) == set(names1) ^ set(names2)


def test__conflicts__order_and_case():
    """Test that conflicts keep input order and are case-sensitive."""
    confs = reconcile.conflicts(["ch3o2"], ["C2H5O2", "CH3O2", "C2H5O2", "ch3o2"])
    assert confs == ["C2H5O2", "CH3O2"]


def test__compare(caplog):
    """Test mcmcheck.reconcile.compare."""
    summation = ["A", "B", "C"]
    mechanism = ["B", "C", "D"]
    assert reconcile.conflicts(summation, mechanism) == ["D"]
    assert reconcile.conflicts(mechanism, summation) == ["A"]

    conf = reconcile.compare(
        mechanism,
        summation,
        category="RO2sum",
        version="v3.3.1",
        ref_label="mechanism",
        label="summation",
    )
    assert isinstance(conf, mcmcheck.Conflicts)
    assert conf.missing == ["D"]
    assert conf.extra == ["A"]
    assert conf.count() == 2
    assert "D missing in summation" in caplog.text
    assert "A should not be in summation" in caplog.text
