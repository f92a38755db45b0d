"""
geoquant.core.conversion
========================

The conversion engine shared by quantity arithmetic and registry lookups.

A *factory* is any callable turning a magnitude into a `Quantity` of one
particular unit: ``partial(Quantity, unit=km)`` or the ``build`` method
of a registry definition. The ratio of a unit to its base unit is always
derived from the unit's own ``to_base`` through such a factory; it is never
stored and never cached, so a re-registered identifier is picked up by the
next conversion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from geoquant.core.quantity import Quantity

UnitFactory = Callable[[float], "Quantity"]


def conversion_ratio(factory: UnitFactory) -> float:
    """Base-unit magnitude of one unit produced by ``factory``."""
    return factory(1.0).to_base().value


def rebase(quantity: "Quantity", factory: UnitFactory) -> "Quantity":
    """Express ``quantity`` in the unit produced by ``factory``, via the base unit."""
    return from_base(quantity.to_base().value, factory)


def from_base(base_value: float, factory: UnitFactory) -> "Quantity":
    """Build a quantity through ``factory`` from a magnitude in base units."""
    return factory(base_value / conversion_ratio(factory))


__all__ = ["UnitFactory", "conversion_ratio", "rebase", "from_base"]
