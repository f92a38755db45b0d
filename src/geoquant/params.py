"""
geoquant.params
===============

Resolve EPSG-style parameter records into quantities.

A record maps parameter names to ``(value, unit identifier)`` pairs, for
example::

    {
        "scaleFactorAtNaturalOrigin": (1.000035, "urn:ogc:def:uom:EPSG::9201"),
        "falseEasting": (13500000.0, "urn:ogc:def:uom:EPSG::9003"),
    }
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

from geoquant.core.quantity import Quantity
from geoquant.exceptions import UnknownUnitError
from geoquant.logging import logger
from geoquant.units.catalog import UnitCatalog

ParameterRecord = Tuple[float, str]


def resolve_parameters(
    records: Mapping[str, ParameterRecord],
    catalog: Optional[UnitCatalog] = None,
) -> Dict[str, Quantity]:
    """Turn every ``(value, uid)`` pair of ``records`` into a `Quantity`, keeping key order."""
    if catalog is None:
        from geoquant.units.catalog import DEFAULT_CATALOG as catalog

    resolved: Dict[str, Quantity] = {}
    for name, (value, uid) in records.items():
        try:
            resolved[name] = catalog.make_unit(value, uid)
        except UnknownUnitError as e:
            raise UnknownUnitError(uid, e.dimension, parameter=name) from e
    logger.debug("Resolved {} parameters", len(resolved))
    return resolved


__all__ = ["ParameterRecord", "resolve_parameters"]
