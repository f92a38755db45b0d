"""
geoquant.units.catalog
======================

A `UnitCatalog` bundles one `UnitsRegistry` per dimension and is passed by
reference to whatever needs to resolve unit identifiers. `make_unit` on the
catalog finds the registry owning an identifier and delegates to it, so every
resolution is still dimension scoped.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from geoquant.core.dimensions import Dimension
from geoquant.core.quantity import Quantity
from geoquant.exceptions import UnknownUnitError
from geoquant.units.length import bootstrap_length_registry
from geoquant.units.registry import UnitsRegistry
from geoquant.units.scale import bootstrap_scale_registry
from geoquant.units.time import bootstrap_time_registry


class UnitCatalog:
    """Ordered, per-dimension collection of unit registries."""

    def __init__(self, registries: Iterable[UnitsRegistry]) -> None:
        self._registries: Dict[Dimension, UnitsRegistry] = {}
        for reg in registries:
            if reg.dim in self._registries:
                raise ValueError(f"Duplicate registry for dimension {reg.dim.name!r}")
            self._registries[reg.dim] = reg

    def __iter__(self) -> Iterator[UnitsRegistry]:
        return iter(self._registries.values())

    def __contains__(self, uid: object) -> bool:
        return any(uid in reg for reg in self)

    def registry(self, dim: Dimension) -> UnitsRegistry:
        try:
            return self._registries[dim]
        except KeyError:
            raise KeyError(f"No registry for dimension {dim.name!r}") from None

    def dimension_of(self, uid: str) -> Optional[Dimension]:
        """Dimension of the first registry (in catalog order) that knows ``uid``."""
        for reg in self:
            if uid in reg:
                return reg.dim
        return None

    def make_unit(self, value: float, uid: str) -> Quantity:
        dim = self.dimension_of(uid)
        if dim is None:
            raise UnknownUnitError(uid)
        return self._registries[dim].make_unit(value, uid)

    def convert(self, quantity: Quantity, uid: str) -> Quantity:
        return self.registry(quantity.dim).convert(quantity, uid)


def _bootstrap_default_catalog() -> UnitCatalog:
    return UnitCatalog(
        (
            bootstrap_length_registry(),
            bootstrap_scale_registry(),
            bootstrap_time_registry(),
        )
    )


# Public, shared default catalog
DEFAULT_CATALOG: UnitCatalog = _bootstrap_default_catalog()


__all__ = ["UnitCatalog", "DEFAULT_CATALOG"]
