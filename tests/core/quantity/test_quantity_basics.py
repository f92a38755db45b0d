from dataclasses import FrozenInstanceError

import pytest

from geoquant.core.dimensions import LENGTH, SCALE
from geoquant.core.quantity import Quantity
from geoquant.core.unit import LinearUnit, base_unit

KM = LinearUnit("urn:ogc:def:uom:EPSG::9036", "kilometre", 1000.0, LENGTH)
PPM = LinearUnit("urn:ogc:def:uom:EPSG::9202", "parts per million", 1e-6, SCALE)


def test_accessors():
    q = Quantity(2, KM)
    assert q.value == 2.0
    assert isinstance(q.value, float)
    assert q.unit is KM
    assert q.unit_name == "kilometre"
    assert q.uid == "urn:ogc:def:uom:EPSG::9036"
    assert q.dim == LENGTH


def test_quantity_is_immutable():
    q = Quantity(1.0, KM)
    with pytest.raises(FrozenInstanceError):
        q.value = 2.0


def test_unit_must_implement_protocol():
    with pytest.raises(TypeError):
        Quantity(1.0, "kilometre")


def test_to_base_length():
    b = Quantity(1.0, KM).to_base()
    assert b.value == 1000.0
    assert b.unit == base_unit(LENGTH)
    assert b.unit_name == "metre"


def test_to_base_scale():
    b = Quantity(3.0, PPM).to_base()
    assert b.value == pytest.approx(3e-6)
    assert b.unit_name == "unity"


def test_to_base_of_base_is_identity():
    m = Quantity(12.5, base_unit(LENGTH))
    assert m.to_base().value == 12.5
