from __future__ import annotations


class InvalidCoordinateError(ValueError):
    """Latitude/longitude/height outside the valid geodetic domain."""
