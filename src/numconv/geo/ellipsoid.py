from __future__ import annotations
from numconv.models.common import Ellipsoid

WGS84 = Ellipsoid(name="wgs84", a_m=6378137.0, f=1.0 / 298.257223563)
GRS80 = Ellipsoid(name="grs80", a_m=6378137.0, f=1.0 / 298.257222101)

ELLIPSOIDS: dict[str, Ellipsoid] = {e.name: e for e in (WGS84, GRS80)}

def get_ellipsoid(name: str) -> Ellipsoid:
    """Look up a reference ellipsoid by (case-insensitive) name."""
    try:
        return ELLIPSOIDS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown ellipsoid {name!r}; choose from {sorted(ELLIPSOIDS)}") from None
