import math
from dataclasses import FrozenInstanceError

import pytest

from geoquant.core.dimensions import LENGTH, SCALE
from geoquant.core.quantity import Quantity
from geoquant.core.unit import LinearUnit, Unit, base_unit


def test_linear_unit_to_base():
    km = LinearUnit("urn:ogc:def:uom:EPSG::9036", "kilometre", 1000.0, LENGTH)
    assert km.to_base(2.5) == 2500.0
    assert isinstance(km, Unit)


@pytest.mark.parametrize("scale", [0.0, -1.0, math.inf, math.nan])
def test_invalid_scale_rejected(scale):
    with pytest.raises(ValueError):
        LinearUnit("x", "bad", scale, LENGTH)


def test_dim_must_be_dimension():
    with pytest.raises(TypeError):
        LinearUnit("x", "bad", 1.0, (1, 0, 0))


def test_unit_is_frozen():
    u = LinearUnit("x", "thing", 2.0, LENGTH)
    with pytest.raises(FrozenInstanceError):
        u.scale_to_base = 3.0


def test_equality_is_by_tag():
    a = LinearUnit("x", "thing", 2.0, LENGTH)
    assert a == LinearUnit("x", "thing", 2.0, LENGTH)
    assert a != LinearUnit("y", "thing", 2.0, LENGTH)
    assert a != LinearUnit("x", "thing", 2.0, SCALE)


def test_base_unit_is_cached_and_canonical():
    m = base_unit(LENGTH)
    assert m is base_unit(LENGTH)
    assert m.uid == LENGTH.base_uid
    assert m.name == "metre"
    assert m.scale_to_base == 1.0


def test_scalar_times_unit_builds_quantity():
    km = LinearUnit("km", "kilometre", 1000.0, LENGTH)
    q = 5 * km
    assert isinstance(q, Quantity)
    assert q.value == 5.0
    assert q.unit is km
