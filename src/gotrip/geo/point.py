"""Geographic points and addressed places."""

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from gotrip.core.exceptions import InvalidInput


class GeoPoint(BaseModel):
    """A latitude/longitude pair in degrees. Immutable once captured."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)

    @classmethod
    def of(cls, latitude: float, longitude: float) -> "GeoPoint":
        """Build a point, reporting bad coordinates as InvalidInput."""
        try:
            return cls(latitude=latitude, longitude=longitude)
        except PydanticValidationError as e:
            raise InvalidInput(
                f"Invalid coordinates ({latitude}, {longitude})",
                details={"latitude": latitude, "longitude": longitude},
            ) from e


class Place(BaseModel):
    """A point plus the address the rider typed or picked."""

    model_config = ConfigDict(frozen=True)

    point: GeoPoint
    address: str = ""


def ensure_point(point: GeoPoint | None, label: str) -> GeoPoint:
    """Reject a missing point or one carrying non-finite coordinates.

    GeoPoint validates on construction, but values built with
    ``model_construct`` or supplied by duck-typed callers skip that.
    """
    if point is None:
        raise InvalidInput(f"{label} location is missing", details={"field": label})

    lat = getattr(point, "latitude", None)
    lng = getattr(point, "longitude", None)
    for value in (lat, lng):
        if not isinstance(value, int | float) or not math.isfinite(value):
            raise InvalidInput(
                f"{label} location has invalid coordinates",
                details={"field": label, "latitude": lat, "longitude": lng},
            )
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        raise InvalidInput(
            f"{label} location is out of range",
            details={"field": label, "latitude": lat, "longitude": lng},
        )
    return point
