from __future__ import annotations
import math

import utm

from numconv.geo.errors import InvalidCoordinateError
from numconv.models.common import Hemisphere, ZoneDesignator

ZONE_WIDTH_DEG = 6.0
MIN_ZONE, MAX_ZONE = 1, 60


def check_lat_lon(lat_deg: float, lon_deg: float) -> None:
    if not (math.isfinite(lat_deg) and math.isfinite(lon_deg)):
        raise InvalidCoordinateError(f"non-finite coordinate: lat={lat_deg}, lon={lon_deg}")
    if not -90.0 <= lat_deg <= 90.0:
        raise InvalidCoordinateError(f"latitude {lat_deg} outside [-90, 90]")
    if not -180.0 <= lon_deg <= 180.0:
        raise InvalidCoordinateError(f"longitude {lon_deg} outside [-180, 180]")


def _clamp_zone(zone: int) -> int:
    return max(MIN_ZONE, min(MAX_ZONE, zone))


def zone_number_from_lon(lon_deg: float) -> int:
    """Plain 6-degree longitude banding; lon=180 stays in zone 60."""
    return _clamp_zone(math.floor((lon_deg + 180.0) / ZONE_WIDTH_DEG) + 1)


def in_irregular_band(lat_deg: float, lon_deg: float) -> bool:
    """True inside the Norway (56-64N, 3-12E) or Svalbard (72-84N, east) blocks."""
    if 56.0 <= lat_deg < 64.0 and 3.0 <= lon_deg < 12.0:
        return True
    return 72.0 <= lat_deg <= 84.0 and 0.0 <= lon_deg < 42.0


def zone_from_lat_lon(lat_deg: float, lon_deg: float, *, exceptions: bool = False) -> ZoneDesignator:
    """
    Grid zone designator (zone number + hemisphere) for a lat/lon pair.

    By default only the regular longitude banding is applied. Pass
    exceptions=True for the irregular Norway (32V) and Svalbard zones of
    the UTM grid; everywhere else both policies give the same zone.
    """
    check_lat_lon(lat_deg, lon_deg)

    zone = zone_number_from_lon(lon_deg)
    if exceptions and in_irregular_band(lat_deg, lon_deg):
        zone = _clamp_zone(int(utm.latlon_to_zone_number(lat_deg, lon_deg)))

    return ZoneDesignator(
        zone_number=zone,
        hemisphere=Hemisphere.NORTH if lat_deg >= 0 else Hemisphere.SOUTH,
        band=utm.latitude_to_zone_letter(lat_deg),
    )
