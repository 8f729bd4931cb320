from __future__ import annotations
import math

from pydantic import ValidationError

from numconv.geo.ellipsoid import WGS84
from numconv.geo.errors import InvalidCoordinateError
from numconv.models.common import CartesianPoint, Ellipsoid, GeodeticPoint


def prime_vertical_radius(lat_rad: float, ellipsoid: Ellipsoid = WGS84) -> float:
    """N: radius of curvature in the prime vertical at the given latitude."""
    s = math.sin(lat_rad)
    return ellipsoid.a_m / math.sqrt(1.0 - ellipsoid.e2 * s * s)


def point_to_cartesian(point: GeodeticPoint, *, ellipsoid: Ellipsoid = WGS84) -> CartesianPoint:
    lat = math.radians(point.lat_deg)
    lon = math.radians(point.lon_deg)
    h = point.height_m

    n = prime_vertical_radius(lat, ellipsoid)
    cos_lat = math.cos(lat)
    return CartesianPoint(
        x_m=(n + h) * cos_lat * math.cos(lon),
        y_m=(n + h) * cos_lat * math.sin(lon),
        z_m=(n * (1.0 - ellipsoid.e2) + h) * math.sin(lat),
    )


def to_cartesian(
    lat_deg: float,
    lon_deg: float,
    height_m: float = 0.0,
    *,
    ellipsoid: Ellipsoid = WGS84,
) -> CartesianPoint:
    """
    Geodetic latitude/longitude (degrees) and ellipsoidal height (metres)
    to earth-centred Cartesian x, y, z (metres).
    """
    try:
        point = GeodeticPoint(lat_deg=lat_deg, lon_deg=lon_deg, height_m=height_m)
    except ValidationError as e:
        raise InvalidCoordinateError(
            f"invalid geodetic point lat={lat_deg}, lon={lon_deg}, height={height_m}"
        ) from e
    return point_to_cartesian(point, ellipsoid=ellipsoid)
