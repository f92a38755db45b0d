# geoquant.core.dimensions

from __future__ import annotations

from dataclasses import dataclass

# --- Core object -------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dimension:
    """
    A physical dimension with exactly one base unit.

    Every quantity belongs to one dimension; all conversions inside a
    dimension route through its base unit.
    """

    name: str
    base_uid: str
    base_name: str

    def __repr__(self) -> str:
        return f"[{self.name}]"

    def __str__(self) -> str:
        return self.name


# --- Public constants --------------------------------------------------------

LENGTH = Dimension("length", "urn:ogc:def:uom:EPSG::9001", "metre")
SCALE = Dimension("scale", "urn:ogc:def:uom:EPSG::9201", "unity")
TIME = Dimension("time", "urn:ogc:def:uom:EPSG::1029", "year")

DIMENSIONS = (LENGTH, SCALE, TIME)

__all__ = ["Dimension", "LENGTH", "SCALE", "TIME", "DIMENSIONS"]
