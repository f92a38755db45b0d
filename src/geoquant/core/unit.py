from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from math import isfinite
from typing import Protocol, runtime_checkable

from geoquant.core.dimensions import Dimension


@runtime_checkable
class Unit(Protocol):
    uid: str
    name: str
    dim: Dimension

    # Convert a magnitude in this unit to the dimension's base unit.
    def to_base(self, x: float) -> float: ...


@dataclass(frozen=True, slots=True)
class LinearUnit(Unit):
    """A unit that is a fixed multiple of its dimension's base unit."""

    uid: str
    name: str
    scale_to_base: float
    dim: Dimension

    def __post_init__(self) -> None:
        if not isinstance(self.dim, Dimension):
            raise TypeError(f"dim must be a Dimension, got {type(self.dim).__name__}")
        if not (self.scale_to_base > 0 and isfinite(self.scale_to_base)):
            raise ValueError("scale_to_base must be a positive, finite number")

    def to_base(self, x: float) -> float:
        return x * self.scale_to_base

    def __rmul__(self, value: float):
        # 5 * kilometre -> Quantity(5.0, kilometre)
        from geoquant.core.quantity import Quantity

        if not isinstance(value, (int, float)):
            return NotImplemented
        return Quantity(value, self)


@lru_cache(maxsize=None)
def base_unit(dim: Dimension) -> LinearUnit:
    """Return the canonical unit of ``dim`` (scale 1)."""
    return LinearUnit(dim.base_uid, dim.base_name, 1.0, dim)


__all__ = ["Unit", "LinearUnit", "base_unit"]
