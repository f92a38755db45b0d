from dataclasses import FrozenInstanceError

import pytest

from geoquant.core.dimensions import DIMENSIONS, LENGTH, SCALE, TIME, Dimension


def test_base_units():
    assert LENGTH.base_uid == "urn:ogc:def:uom:EPSG::9001"
    assert LENGTH.base_name == "metre"
    assert SCALE.base_uid == "urn:ogc:def:uom:EPSG::9201"
    assert SCALE.base_name == "unity"
    assert TIME.base_uid == "urn:ogc:def:uom:EPSG::1029"
    assert TIME.base_name == "year"


def test_dimensions_are_distinct_and_hashable():
    assert len(set(DIMENSIONS)) == 3
    assert LENGTH != SCALE != TIME
    assert {LENGTH: 1}[Dimension("length", LENGTH.base_uid, "metre")] == 1


def test_dimension_is_frozen():
    with pytest.raises(FrozenInstanceError):
        LENGTH.name = "distance"


def test_repr_and_str():
    assert repr(LENGTH) == "[length]"
    assert str(TIME) == "time"
