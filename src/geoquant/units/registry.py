"""
geoquant.units.registry
=======================

Per-dimension registry mapping unit identifiers to unit definitions.

Key points
----------
- One `UnitsRegistry` per dimension; lookups never cross dimensions.
- Identifiers are opaque strings (usually EPSG URNs) matched exactly.
- Entries are either a built-in variant (a concrete `Unit`) or a custom
  factory registered at runtime.
- Registration is last-writer-wins and immediately visible to every holder
  of the registry. Reads and writes are serialized by a lock.
- Conversion ratios are recomputed from the target unit on every call.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from functools import partial
from typing import Dict, Iterator, List, Optional, Tuple

from geoquant.core.conversion import UnitFactory, conversion_ratio, rebase
from geoquant.core.dimensions import Dimension
from geoquant.core.quantity import Quantity
from geoquant.core.unit import LinearUnit, Unit
from geoquant.exceptions import DimensionMismatchError, UnknownUnitError
from geoquant.logging import logger


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """A registry entry: display metadata plus how to build a quantity."""

    uid: str
    name: str
    help: str = ""
    unit: Optional[Unit] = None
    factory: Optional[UnitFactory] = None

    def __post_init__(self) -> None:
        if (self.unit is None) == (self.factory is None):
            raise ValueError("UnitDefinition needs exactly one of 'unit' or 'factory'")

    @property
    def is_custom(self) -> bool:
        return self.factory is not None

    def build(self, value: float) -> Quantity:
        if self.factory is not None:
            return self.factory(value)
        return Quantity(value, self.unit)


class UnitsRegistry:
    """Thread-safe registry of the units of one dimension."""

    def __init__(self, dim: Dimension) -> None:
        self.dim = dim
        self._lock = threading.RLock()
        self._definitions: Dict[str, UnitDefinition] = {}

    def __contains__(self, uid: object) -> bool:
        with self._lock:
            return uid in self._definitions

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._definitions))

    def __repr__(self) -> str:
        return f"<UnitsRegistry {self.dim.name}: {len(self)} units>"

    # -------------------------- registration -------------------------------
    def _store(self, definition: UnitDefinition) -> None:
        with self._lock:
            previous = self._definitions.get(definition.uid)
            self._definitions[definition.uid] = definition
        if previous is not None:
            logger.info(
                "Overwriting {} unit {!r} ({} -> {})",
                self.dim.name, definition.uid, previous.name, definition.name,
            )
        else:
            logger.debug("Registered {} unit {!r} ({})", self.dim.name, definition.uid, definition.name)

    def add_builtin(self, unit: Unit, help: str = "") -> None:
        """Seed a built-in unit variant under its own identifier."""
        if unit.dim != self.dim:
            raise DimensionMismatchError(
                operation="register", left=self.dim.name, right=unit.dim.name
            )
        self._store(UnitDefinition(unit.uid, unit.name, help, unit=unit))

    def register(self, uid: str, name: str, factory: UnitFactory, help: str = "") -> None:
        """Register (or overwrite) a custom unit built by ``factory``.

        ``factory`` receives a magnitude and must return a `Quantity` of this
        registry's dimension; that is not checked here.
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")
        self._store(UnitDefinition(uid, name, help, factory=factory))

    register_custom_unit = register

    def define(self, uid: str, name: str, scale: float, reference: str, help: str = "") -> LinearUnit:
        """Define a linear unit as ``scale`` times the unit registered as ``reference``.

        The unit is stored as a custom definition, like any other runtime
        registration; only the seeded tables hold built-in variants.
        """
        ratio = conversion_ratio(self.lookup(reference).build)
        unit = LinearUnit(uid, name, float(scale) * ratio, self.dim)
        self.register(uid, name, partial(Quantity, unit=unit), help)
        return unit

    # ---------------------------- lookup -----------------------------------
    def lookup(self, uid: str) -> UnitDefinition:
        with self._lock:
            definition = self._definitions.get(uid)
        if definition is None:
            raise UnknownUnitError(uid, self.dim.name)
        return definition

    def has(self, uid: str) -> bool:
        return uid in self

    def make_unit(self, value: float, uid: str) -> Quantity:
        """Build a quantity of ``value`` in the unit registered as ``uid``."""
        return self.lookup(uid).build(value)

    def convert(self, quantity: Quantity, uid: str) -> Quantity:
        """Express ``quantity`` in the unit registered as ``uid``."""
        if quantity.dim != self.dim:
            raise DimensionMismatchError(
                operation="convert", left=quantity.unit.name, right=self.dim.name
            )
        # one lookup, so ratio and result come from the same definition
        definition = self.lookup(uid)
        return rebase(quantity, definition.build)

    # ------------------------- introspection -------------------------------
    def list_all(self) -> List[Tuple[str, str, str]]:
        with self._lock:
            return [(d.uid, d.name, d.help) for d in self._definitions.values()]

    def supported_unit_ids(self) -> Dict[str, str]:
        return {uid: name for uid, name, _ in self.list_all()}

    def supported_unit_ids_with_help(self) -> Dict[str, Dict[str, str]]:
        return {uid: {"name": name, "help": help} for uid, name, help in self.list_all()}


__all__ = [
    "UnitDefinition",
    "UnitsRegistry",
]
