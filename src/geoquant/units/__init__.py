from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from geoquant.units.catalog import UnitCatalog
# Lazy access helpers -------------------------------------------------------

_REGISTRY_NAMES = ("length_registry", "scale_registry", "time_registry")


def _get_default_catalog() -> "UnitCatalog":
    # Import here to avoid import-time side-effects / circular imports.
    from geoquant.units.catalog import DEFAULT_CATALOG  # local import
    return DEFAULT_CATALOG


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. The default catalog and its per-dimension
    registries are built on first use.
    """
    if name == "default_catalog":
        return _get_default_catalog()
    if name in _REGISTRY_NAMES:
        from geoquant.core.dimensions import LENGTH, SCALE, TIME

        dim = dict(zip(_REGISTRY_NAMES, (LENGTH, SCALE, TIME)))[name]
        return _get_default_catalog().registry(dim)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["default_catalog", *_REGISTRY_NAMES])
