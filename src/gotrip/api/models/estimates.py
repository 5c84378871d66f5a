from pydantic import BaseModel, Field

from gotrip.geo import GeoPoint
from gotrip.pricing import FareEstimate, SimulatedFare, VehicleClass


class EstimateRequest(BaseModel):
    pickup: GeoPoint
    dropoff: GeoPoint
    preferred: VehicleClass | None = None


class EstimateResponse(BaseModel):
    currency: str
    estimates: list[FareEstimate]


class SimulateRequest(BaseModel):
    distance_km: float = Field(ge=0, le=500, allow_inf_nan=False)
    duration_min: float = Field(ge=0, le=600, allow_inf_nan=False)


class SimulateResponse(BaseModel):
    currency: str
    results: list[SimulatedFare]
