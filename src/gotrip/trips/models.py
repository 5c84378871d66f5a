"""Trip request and trip models."""

from datetime import datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from gotrip.geo import Place
from gotrip.pricing import FareEstimate, VehicleClass

from .state import TripStatus

CancelActor = Literal["rider", "provider"]


class TripRequest(BaseModel):
    """What a rider submits: where from, where to, and the chosen estimate."""

    rider_id: str = Field(min_length=1)
    pickup: Place
    dropoff: Place
    estimate: FareEstimate


class Trip(BaseModel):
    """One ride from request to terminal outcome."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    rider_id: str
    driver_id: str | None = None
    pickup: Place
    dropoff: Place
    vehicle_class: VehicleClass
    status: TripStatus = TripStatus.SEARCHING
    estimated_price: float = Field(ge=0)
    estimated_distance_km: float = Field(default=0.0, ge=0)
    estimated_duration_min: int = Field(default=0, ge=0)
    surge_multiplier: float = Field(default=1.0, ge=1.0)
    final_price: float | None = None
    tip: float | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    rating_comment: str | None = None
    cancelled_by: CancelActor | None = None
    cancellation_reason: str | None = None
    requested_at: datetime | None = None
    accepted_at: datetime | None = None
    arrived_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    cancelled_at: datetime | None = None
    expired_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return not self.status.is_terminal

    @property
    def charged_price(self) -> float:
        """Final price when set, else the estimate."""
        return self.final_price if self.final_price is not None else self.estimated_price
