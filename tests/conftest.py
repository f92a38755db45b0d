# tests/conftest.py
import pytest

from geoquant.units.catalog import UnitCatalog
from geoquant.units.length import bootstrap_length_registry
from geoquant.units.scale import bootstrap_scale_registry
from geoquant.units.time import bootstrap_time_registry


@pytest.fixture()
def lengths():
    """Fresh, fully-seeded length registry so tests never mutate the default one."""
    return bootstrap_length_registry()


@pytest.fixture()
def scales():
    return bootstrap_scale_registry()


@pytest.fixture()
def times():
    return bootstrap_time_registry()


@pytest.fixture()
def catalog(lengths, scales, times):
    return UnitCatalog((lengths, scales, times))


@pytest.fixture()
def fresh_settings(monkeypatch):
    """Reload settings around a test that changes GEOQUANT_* variables."""
    from geoquant.config import reload_settings

    yield monkeypatch
    monkeypatch.undo()
    reload_settings()
