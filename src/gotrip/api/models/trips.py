from typing import Literal

from pydantic import BaseModel, Field

from gotrip.geo import Place
from gotrip.pricing import VehicleClass


class CreateTripRequest(BaseModel):
    rider_id: str = Field(min_length=1)
    pickup: Place
    dropoff: Place
    vehicle_class: VehicleClass


class AcceptTripRequest(BaseModel):
    driver_id: str = Field(min_length=1)


class CancelTripRequest(BaseModel):
    actor: Literal["rider", "provider"]
    reason: str | None = Field(default=None, max_length=500)


class CompleteTripRequest(BaseModel):
    final_price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    tip: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class RateTripRequest(BaseModel):
    rating: int = Field(ge=1, le=5)
    comment: str | None = Field(default=None, max_length=1000)
    tip: float = Field(default=0.0, ge=0, allow_inf_nan=False)
