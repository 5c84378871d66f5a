from .events import TripStatusChanged
from .models import CancelActor, Trip, TripRequest
from .repository import InMemoryTripRepository
from .state import (
    ACTIVE_STATUSES,
    TERMINAL_STATUSES,
    VALID_TRANSITIONS,
    TripStatus,
    TripTrigger,
    next_status,
)
from .tracker import TripListener, TripTracker

__all__ = [
    "ACTIVE_STATUSES",
    "TERMINAL_STATUSES",
    "VALID_TRANSITIONS",
    "CancelActor",
    "InMemoryTripRepository",
    "Trip",
    "TripListener",
    "TripRequest",
    "TripStatus",
    "TripStatusChanged",
    "TripTracker",
    "TripTrigger",
    "next_status",
]
