import pytest

from geoquant.config import Settings
from geoquant.core.dimensions import LENGTH, SCALE
from geoquant.core.quantity import Quantity
from geoquant.core.unit import LinearUnit

M = LinearUnit("m", "metre", 1.0, LENGTH)
KM = LinearUnit("km", "kilometre", 1000.0, LENGTH)
UNITY = LinearUnit("unity", "unity", 1.0, SCALE)


def test_equal_across_units():
    assert Quantity(1, KM) == Quantity(1000, M)
    assert Quantity(1, KM) != Quantity(999, M)


def test_float_noise_is_tolerated():
    assert Quantity(1.0 + 1e-14, M) == Quantity(1.0, M)


def test_different_dimensions_never_equal():
    assert Quantity(1, M) != Quantity(1, UNITY)


def test_non_quantity_comparison():
    assert (Quantity(1, M) == 1.0) is False


def test_ordering():
    assert Quantity(1, KM) > Quantity(999, M)
    assert Quantity(999, M) < Quantity(1, KM)
    assert Quantity(1, KM) >= Quantity(1000, M)
    assert Quantity(1000, M) <= Quantity(1, KM)


def test_ordering_dim_mismatch():
    with pytest.raises(TypeError):
        _ = Quantity(1, M) < Quantity(1, UNITY)


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Quantity(1, M))


def test_as_key_groups_close_values():
    q1 = Quantity(1.0 + 1e-13, M)
    q2 = Quantity(1.0 - 1e-13, M)
    assert q1.as_key() == q2.as_key() == (LENGTH, 1.0)
    assert Quantity(1, KM).as_key() == (LENGTH, 1000.0)


def test_as_key_negative_zero():
    assert Quantity(-0.0, M).as_key() == Quantity(0.0, M).as_key()


def test_tolerance_follows_settings(monkeypatch):
    import geoquant.core.quantity as qmod

    monkeypatch.setattr(qmod, "get_settings", lambda: Settings(rel_tol=1e-3))
    assert Quantity(1.0005, M) == Quantity(1.0, M)
