"""
geoquant.units.scale
====================

Built-in scale (dimensionless ratio) units. Base unit: unity.
"""

from __future__ import annotations

from geoquant.core.dimensions import SCALE
from geoquant.core.unit import LinearUnit
from geoquant.units.registry import UnitsRegistry

UNITY = "urn:ogc:def:uom:EPSG::9201"
PARTS_PER_MILLION = "urn:ogc:def:uom:EPSG::9202"
COEFFICIENT = "urn:ogc:def:uom:EPSG::9203"
PARTS_PER_BILLION = "urn:ogc:def:uom:EPSG::1028"

# (uid, name, unity per unit, help)
SCALE_UNITS = (
    (UNITY, "unity", 1.0, "EPSG standard unit for scale. SI coherent derived unit for dimensionless ratios."),
    (PARTS_PER_MILLION, "parts per million", 1e-6, ""),
    (
        COEFFICIENT,
        "coefficient",
        1.0,
        "Used when parameters are coefficients. They inherently take the units which depend upon the term "
        "to which the coefficient applies.",
    ),
    (PARTS_PER_BILLION, "parts per billion", 1e-9, "Billion is internationally ambiguous, in different languages being 1E+9 and 1E+12. Use of the term billion is deprecated."),
)


def bootstrap_scale_registry() -> UnitsRegistry:
    """Return a fresh registry seeded with the built-in scale units."""
    reg = UnitsRegistry(SCALE)
    for uid, name, ratio, help in SCALE_UNITS:
        reg.add_builtin(LinearUnit(uid, name, ratio, SCALE), help)
    return reg


__all__ = [
    "UNITY",
    "PARTS_PER_MILLION",
    "COEFFICIENT",
    "PARTS_PER_BILLION",
    "SCALE_UNITS",
    "bootstrap_scale_registry",
]
