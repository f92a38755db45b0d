"""
geoquant.units.time
===================

Built-in time units. Base unit: year, which is also how epochs are carried
(decimal years such as ``2010.5``).
"""

from __future__ import annotations

from datetime import datetime, timedelta

from geoquant.core.dimensions import TIME
from geoquant.core.quantity import Quantity
from geoquant.core.unit import LinearUnit, base_unit
from geoquant.exceptions import DimensionMismatchError
from geoquant.units.registry import UnitsRegistry

YEAR = "urn:ogc:def:uom:EPSG::1029"
SECOND = "urn:ogc:def:uom:EPSG::1040"

SECONDS_PER_YEAR = 31556925.445
DAYS_PER_YEAR = 365.25

# (uid, name, years per unit, help)
TIME_UNITS = (
    (YEAR, "year", 1.0, "=31556925.445 seconds (tropical year)."),
    (SECOND, "second", 1 / SECONDS_PER_YEAR, "SI base unit for time."),
)


def bootstrap_time_registry() -> UnitsRegistry:
    """Return a fresh registry seeded with the built-in time units."""
    reg = UnitsRegistry(TIME)
    for uid, name, years, help in TIME_UNITS:
        reg.add_builtin(LinearUnit(uid, name, years, TIME), help)
    return reg


def year_from_datetime(moment: datetime) -> Quantity:
    """Decimal-year epoch of ``moment``, rounded to two decimals.

    The fraction is the zero-based day of the year over 365.25 days.
    """
    day_of_year = moment.timetuple().tm_yday - 1
    return Quantity(round(moment.year + day_of_year / DAYS_PER_YEAR, 2), base_unit(TIME))


def year_to_datetime(epoch: Quantity) -> datetime:
    """Midnight of the day an epoch falls on."""
    if epoch.dim != TIME:
        raise DimensionMismatchError(operation="convert", left=epoch.unit.name, right=TIME.name)
    years = epoch.to_base().value
    year = int(years)
    days = round((years - year) * DAYS_PER_YEAR)
    return datetime(year, 1, 1) + timedelta(days=days)


__all__ = [
    "YEAR",
    "SECOND",
    "SECONDS_PER_YEAR",
    "DAYS_PER_YEAR",
    "TIME_UNITS",
    "bootstrap_time_registry",
    "year_from_datetime",
    "year_to_datetime",
]
