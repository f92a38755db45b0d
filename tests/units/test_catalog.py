import pytest

from geoquant.core.dimensions import LENGTH, SCALE, TIME
from geoquant.exceptions import UnknownUnitError
from geoquant.units.catalog import DEFAULT_CATALOG, UnitCatalog
from geoquant.units.length import KILOMETRE, METRE, US_SURVEY_FOOT
from geoquant.units.registry import UnitsRegistry
from geoquant.units.scale import UNITY
from geoquant.units.time import YEAR


def test_registry_per_dimension(catalog, lengths, scales, times):
    assert catalog.registry(LENGTH) is lengths
    assert catalog.registry(SCALE) is scales
    assert catalog.registry(TIME) is times
    assert list(catalog) == [lengths, scales, times]


def test_missing_dimension():
    with pytest.raises(KeyError):
        UnitCatalog(()).registry(LENGTH)


def test_duplicate_dimension_rejected():
    with pytest.raises(ValueError):
        UnitCatalog((UnitsRegistry(LENGTH), UnitsRegistry(LENGTH)))


def test_dimension_of(catalog):
    assert catalog.dimension_of(US_SURVEY_FOOT) == LENGTH
    assert catalog.dimension_of(UNITY) == SCALE
    assert catalog.dimension_of(YEAR) == TIME
    assert catalog.dimension_of("nope") is None
    assert UNITY in catalog and "nope" not in catalog


def test_make_unit_dispatches_to_owning_registry(catalog):
    q = catalog.make_unit(13500000.0, US_SURVEY_FOOT)
    assert q.dim == LENGTH
    assert q.unit_name == "US survey foot"
    assert catalog.make_unit(1.000035, UNITY).dim == SCALE


def test_make_unit_unknown(catalog):
    with pytest.raises(UnknownUnitError):
        catalog.make_unit(1.0, "not-a-real-id")


def test_convert(catalog):
    km = catalog.make_unit(1.0, KILOMETRE)
    assert catalog.convert(km, METRE).value == 1000.0


def test_first_registry_wins_on_shared_identifier(catalog, lengths, scales):
    from geoquant.core.quantity import Quantity
    from geoquant.core.unit import base_unit

    scales.register(METRE, "shadow", lambda v: Quantity(v, base_unit(SCALE)))
    assert catalog.make_unit(1.0, METRE).dim == LENGTH


def test_default_catalog_is_seeded():
    assert DEFAULT_CATALOG.registry(LENGTH).has(METRE)
    assert DEFAULT_CATALOG.registry(SCALE).has(UNITY)
    assert DEFAULT_CATALOG.registry(TIME).has(YEAR)
