"""
geoquant.units.length
=====================

Built-in length units, keyed by EPSG unit-of-measure URN. Base unit: metre.
"""

from __future__ import annotations

from geoquant.core.dimensions import LENGTH
from geoquant.core.unit import LinearUnit
from geoquant.units.registry import UnitsRegistry

MILLIMETRE = "urn:ogc:def:uom:EPSG::1025"
CENTIMETRE = "urn:ogc:def:uom:EPSG::1033"
METRE = "urn:ogc:def:uom:EPSG::9001"
FOOT = "urn:ogc:def:uom:EPSG::9002"
US_SURVEY_FOOT = "urn:ogc:def:uom:EPSG::9003"
CLARKES_FOOT = "urn:ogc:def:uom:EPSG::9005"
GERMAN_LEGAL_METRE = "urn:ogc:def:uom:EPSG::9031"
KILOMETRE = "urn:ogc:def:uom:EPSG::9036"
CLARKES_YARD = "urn:ogc:def:uom:EPSG::9037"
CLARKES_LINK = "urn:ogc:def:uom:EPSG::9039"
BRITISH_YARD_SEARS_1922 = "urn:ogc:def:uom:EPSG::9040"
BRITISH_FOOT_SEARS_1922 = "urn:ogc:def:uom:EPSG::9041"
BRITISH_CHAIN_SEARS_1922 = "urn:ogc:def:uom:EPSG::9042"
BRITISH_CHAIN_BENOIT_1895_B = "urn:ogc:def:uom:EPSG::9062"
INDIAN_FOOT = "urn:ogc:def:uom:EPSG::9080"
INDIAN_YARD = "urn:ogc:def:uom:EPSG::9084"
GOLD_COAST_FOOT = "urn:ogc:def:uom:EPSG::9094"
BRITISH_FOOT_1936 = "urn:ogc:def:uom:EPSG::9095"
LINK = "urn:ogc:def:uom:EPSG::9098"
BRITISH_CHAIN_SEARS_1922_TRUNCATED = "urn:ogc:def:uom:EPSG::9301"
NAUTICAL_MILE = "urn:ogc:def:uom:EPSG::9030"
STATUTE_MILE = "urn:ogc:def:uom:EPSG::9093"
US_SURVEY_MILE = "urn:ogc:def:uom:EPSG::9035"

_CLARKE_HELP = (
    "Assumes Clarke's 1865 ratio of 1 British foot = 0.3047972654 French legal metres applies to the "
    "international metre.   Used in older Australian, southern African & British West Indian mapping."
)
_SEARS_HELP = (
    "Uses Sear's 1922 British yard-metre ratio as given by Bomford as 39.370147 inches per metre.  "
    "Used in East Malaysian and older New Zealand mapping."
)
_INDIAN_HELP = (
    "Indian Foot = 0.99999566 British feet (A.R.Clarke 1865).  British yard (= 3 British feet) taken to "
    "be J.S.Clark's 1865 value of 0.9144025 metres."
)

# (uid, name, metres per unit, help)
LENGTH_UNITS = (
    (MILLIMETRE, "millimetre", 0.001, ""),
    (CENTIMETRE, "centimetre", 0.01, ""),
    (METRE, "metre", 1.0, "SI base unit for length."),
    (FOOT, "foot", 0.3048, ""),
    (US_SURVEY_FOOT, "US survey foot", 1200 / 3937, "Used in USA."),
    (CLARKES_FOOT, "Clarke's foot", 0.3047972654, _CLARKE_HELP),
    (GERMAN_LEGAL_METRE, "German legal metre", 1.0000135965, "Used in Namibia."),
    (KILOMETRE, "kilometre", 1000.0, ""),
    (CLARKES_YARD, "Clarke's yard", 0.9143917962, "=3 Clarke's feet.  " + _CLARKE_HELP),
    (CLARKES_LINK, "Clarke's link", 0.201166195164, "=1/100 Clarke's chain. " + _CLARKE_HELP),
    (BRITISH_YARD_SEARS_1922, "British yard (Sears 1922)", 36 / 39.370147, _SEARS_HELP),
    (BRITISH_FOOT_SEARS_1922, "British foot (Sears 1922)", 12 / 39.370147, _SEARS_HELP),
    (BRITISH_CHAIN_SEARS_1922, "British chain (Sears 1922)", 792 / 39.370147, _SEARS_HELP),
    (
        BRITISH_CHAIN_BENOIT_1895_B,
        "British chain (Benoit 1895 B)",
        792 / 39.370113,
        "Uses Benoit's 1895 British yard-metre ratio as given by Bomford as 39.370113 inches per metre.  "
        "Used in West Malaysian mapping.",
    ),
    (INDIAN_FOOT, "Indian foot", 12 / 39.370142, _INDIAN_HELP),
    (INDIAN_YARD, "Indian yard", 36 / 39.370142, _INDIAN_HELP),
    (
        GOLD_COAST_FOOT,
        "Gold Coast foot",
        6378300 / 20926201,
        "Used in Ghana and some adjacent parts of British west Africa prior to metrication, except for the "
        "metrication of projection defining parameters when British foot (Sears 1922) used.",
    ),
    (
        BRITISH_FOOT_1936,
        "British foot (1936)",
        0.3048007491,
        "For the 1936 retriangulation OSGB defines the relationship of 10 feet of 1796 to the International "
        "metre through the logarithmic relationship (10^0.48401603 exactly). 1 ft = 0.3048007491…m. Also "
        "used for metric conversions in Ireland.",
    ),
    (LINK, "link", 0.201168, "=1/100 international chain."),
    (
        BRITISH_CHAIN_SEARS_1922_TRUNCATED,
        "British chain (Sears 1922 truncated)",
        20.116756,
        "Uses Sear's 1922 British yard-metre ratio (UoM code 9040) truncated to 6 significant figures; this "
        "truncated ratio (0.914398, UoM code 9099) then converted to other imperial units. "
        "1 chSe(T) = 22 ydSe(T). Used in metrication of Malaya RSO grid.",
    ),
    (NAUTICAL_MILE, "nautical mile", 1852.0, "Exactly 1,852 metres."),
    (STATUTE_MILE, "statute mile", 1609.344, "5,280 feet."),
    (US_SURVEY_MILE, "US survey mile", 5280 * 1200 / 3937, "Used in USA primarily for public lands cadastral work."),
)


def bootstrap_length_registry() -> UnitsRegistry:
    """Return a fresh registry seeded with the built-in length units."""
    reg = UnitsRegistry(LENGTH)
    for uid, name, metres, help in LENGTH_UNITS:
        reg.add_builtin(LinearUnit(uid, name, metres, LENGTH), help)
    return reg


__all__ = [
    "MILLIMETRE",
    "CENTIMETRE",
    "METRE",
    "FOOT",
    "US_SURVEY_FOOT",
    "CLARKES_FOOT",
    "GERMAN_LEGAL_METRE",
    "KILOMETRE",
    "CLARKES_YARD",
    "CLARKES_LINK",
    "BRITISH_YARD_SEARS_1922",
    "BRITISH_FOOT_SEARS_1922",
    "BRITISH_CHAIN_SEARS_1922",
    "BRITISH_CHAIN_BENOIT_1895_B",
    "INDIAN_FOOT",
    "INDIAN_YARD",
    "GOLD_COAST_FOOT",
    "BRITISH_FOOT_1936",
    "LINK",
    "BRITISH_CHAIN_SEARS_1922_TRUNCATED",
    "NAUTICAL_MILE",
    "STATUTE_MILE",
    "US_SURVEY_MILE",
    "LENGTH_UNITS",
    "bootstrap_length_registry",
]
