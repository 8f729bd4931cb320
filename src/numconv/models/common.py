from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field

class Hemisphere(str, Enum):
    NORTH = "N"
    SOUTH = "S"

class GeodeticPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat_deg: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon_deg: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    height_m: float = Field(0.0, allow_inf_nan=False)  # negative = below the ellipsoid

class CartesianPoint(BaseModel):
    """Earth-centred, earth-fixed position in metres."""
    model_config = ConfigDict(frozen=True)

    x_m: float
    y_m: float
    z_m: float

    def as_tuple(self) -> tuple[float, float, float]:
        return self.x_m, self.y_m, self.z_m

class ZoneDesignator(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone_number: int = Field(..., ge=1, le=60)
    hemisphere: Hemisphere
    band: str | None = Field(None, min_length=1, max_length=1)

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.zone_number}{self.hemisphere.value}"

    def __str__(self) -> str:
        return self.label

class Ellipsoid(BaseModel):
    """Reference ellipsoid: semi-major axis and flattening."""
    model_config = ConfigDict(frozen=True)

    name: str
    a_m: float = Field(..., gt=0)
    f: float = Field(..., ge=0, lt=1)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2.0 - self.f)

    @property
    def b_m(self) -> float:
        return self.a_m * (1.0 - self.f)
