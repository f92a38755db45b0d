"""
geoquant.core.quantity
======================

Defines the `Quantity` class: an immutable magnitude tagged with a concrete
unit of one dimension (length, scale, time).

The system supports:
- Conversion to the dimension's base unit (`to_base`).
- Dimension-preserving arithmetic across mixed units. Results keep the
  unit of the left operand.
- Scaling by plain numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from math import isclose
from typing import Union

from geoquant.config import get_settings
from geoquant.core.conversion import from_base
from geoquant.core.dimensions import Dimension
from geoquant.core.unit import Unit, base_unit
from geoquant.exceptions import DimensionMismatchError

Number = Union[int, float]


@dataclass(frozen=True, slots=True, eq=False)
class Quantity:
    """
    A physical quantity: a magnitude expressed in a specific unit.

    Attributes
    ----------
    value : float
        The magnitude, in ``unit``.
    unit : Unit
        The unit the magnitude is expressed in.

    Notes
    -----
    ``divide(0)`` is not special-cased. It raises ``ZeroDivisionError``
    exactly as Python float division does; overflowing results become
    ``inf``.
    """

    value: float
    unit: Unit

    def __post_init__(self) -> None:
        if not isinstance(self.unit, Unit):
            raise TypeError(f"unit must implement Unit, got {type(self.unit).__name__}")
        object.__setattr__(self, "value", float(self.value))

    # --- accessors ---
    @property
    def dim(self) -> Dimension:
        return self.unit.dim

    @property
    def unit_name(self) -> str:
        return self.unit.name

    @property
    def uid(self) -> str:
        return self.unit.uid

    def to_base(self) -> Quantity:
        """Return this quantity expressed in its dimension's base unit."""
        return Quantity(self.unit.to_base(self.value), base_unit(self.dim))

    def _check_dim_compatible(self, other: object, operation: str) -> None:
        """Internal helper to raise on dimension mismatch."""
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot {operation} Quantity and {type(other).__name__}")
        if self.dim != other.dim:
            raise DimensionMismatchError(
                operation=operation,
                left=self.unit.name,
                right=other.unit.name,
            )

    def _same_unit(self, other: Quantity) -> bool:
        return self.unit == other.unit

    def _in_own_unit(self, base_value: float) -> Quantity:
        return from_base(base_value, partial(Quantity, unit=self.unit))

    # --- arithmetic ---
    def add(self, other: Quantity) -> Quantity:
        self._check_dim_compatible(other, "add")
        if self._same_unit(other):
            return Quantity(self.value + other.value, self.unit)
        # return in left operand's unit
        return self._in_own_unit(self.to_base().value + other.to_base().value)

    def subtract(self, other: Quantity) -> Quantity:
        self._check_dim_compatible(other, "subtract")
        if self._same_unit(other):
            return Quantity(self.value - other.value, self.unit)
        return self._in_own_unit(self.to_base().value - other.to_base().value)

    def multiply(self, scalar: Number) -> Quantity:
        return Quantity(self.value * float(scalar), self.unit)

    def divide(self, scalar: Number) -> Quantity:
        return Quantity(self.value / float(scalar), self.unit)

    def __add__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Quantity:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> Quantity:
        # allows 3 * (2 m) -> 6 m
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Quantity:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Quantity:
        return Quantity(-self.value, self.unit)

    # --- comparison ---
    def _is_close(self, other: Quantity) -> bool:
        """Internal helper for fuzzy equality on base magnitudes."""
        return isclose(
            self.to_base().value,
            other.to_base().value,
            rel_tol=get_settings().rel_tol,
            abs_tol=0.0,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.dim == other.dim and self._is_close(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return not self.__eq__(other)

    def __lt__(self, other: Quantity) -> bool:
        self._check_dim_compatible(other, "compare")
        return self.to_base().value < other.to_base().value and not self._is_close(other)

    def __le__(self, other: Quantity) -> bool:
        self._check_dim_compatible(other, "compare")
        return self.to_base().value < other.to_base().value or self._is_close(other)

    def __gt__(self, other: Quantity) -> bool:
        self._check_dim_compatible(other, "compare")
        return self.to_base().value > other.to_base().value and not self._is_close(other)

    def __ge__(self, other: Quantity) -> bool:
        self._check_dim_compatible(other, "compare")
        return self.to_base().value > other.to_base().value or self._is_close(other)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Return a hashable, discretized key for this quantity.

        ``__hash__`` is not implemented because ``__eq__`` is tolerance based.
        Use this to key dicts or sets at a chosen precision.

        >>> a = Quantity(1.0 + 1e-13, metre)
        >>> b = Quantity(1.0 - 1e-13, metre)
        >>> a.as_key(precision=9) == b.as_key(precision=9)
        True
        """
        rounded = round(self.to_base().value, precision)
        # -0.0 and 0.0 round identically but must key identically too
        if rounded == 0.0:
            rounded = 0.0
        return (self.dim, rounded)

    # --- display ---
    def __repr__(self) -> str:
        return f"{self.value:.15g} {self.unit.name}"

    def __str__(self) -> str:
        return repr(self)

    def __format__(self, spec: str) -> str:
        """
        Supported specifiers
        --------------------
        "" (empty), or "native"
            The quantity in its own unit.
        "base"
            The quantity converted to its dimension's base unit.
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return repr(self)
        if spec == "base":
            return repr(self.to_base())
        raise ValueError("Unknown format spec; use '', 'native', or 'base'")


__all__ = ["Quantity", "Number"]
