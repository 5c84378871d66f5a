from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from .models import Trip
from .state import TripStatus


class TripStatusChanged(BaseModel):
    """Emitted to the tracker's listener after every status change."""

    event_id: UUID = Field(default_factory=uuid4)
    event_type: str
    trip_id: str
    rider_id: str
    driver_id: str | None
    previous_status: TripStatus | None
    status: TripStatus
    timestamp: datetime
    trip: Trip
