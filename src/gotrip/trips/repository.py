"""In-memory trip store used by the HTTP API."""

from collections.abc import Iterable

from gotrip.core.exceptions import NotFoundError

from .models import Trip
from .state import TripStatus


class InMemoryTripRepository:
    """Keeps the latest value of every trip, in insertion order."""

    def __init__(self) -> None:
        self._trips: dict[str, Trip] = {}

    def save(self, trip: Trip) -> Trip:
        """Store ``trip``, replacing any earlier value with the same id."""
        self._trips[trip.id] = trip
        return trip

    def get(self, trip_id: str) -> Trip | None:
        return self._trips.get(trip_id)

    def require(self, trip_id: str) -> Trip:
        """Get a trip or raise NotFoundError."""
        trip = self._trips.get(trip_id)
        if trip is None:
            raise NotFoundError(f"Trip {trip_id} not found", details={"trip_id": trip_id})
        return trip

    def list_trips(self, statuses: Iterable[TripStatus] | None = None) -> list[Trip]:
        if statuses is None:
            return list(self._trips.values())
        wanted = set(statuses)
        return [t for t in self._trips.values() if t.status in wanted]

    def clear(self) -> None:
        self._trips.clear()

    def __len__(self) -> int:
        return len(self._trips)
