"""Trip lifecycle tracking with a single synchronous listener."""

import logging
import math
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from gotrip.app_logging import log_trip_context
from gotrip.core.exceptions import ActiveTripExists, InvalidInput, InvalidTransition
from gotrip.settings import TripSettings

from .events import TripStatusChanged
from .models import CancelActor, Trip, TripRequest
from .state import TripStatus, TripTrigger, next_status

logger = logging.getLogger(__name__)

TripListener = Callable[[TripStatusChanged], None]

_TIMESTAMP_FIELDS: dict[TripStatus, str] = {
    TripStatus.ACCEPTED: "accepted_at",
    TripStatus.ARRIVED: "arrived_at",
    TripStatus.IN_PROGRESS: "started_at",
    TripStatus.COMPLETED: "completed_at",
    TripStatus.CANCELLED_BY_RIDER: "cancelled_at",
    TripStatus.CANCELLED_BY_PROVIDER: "cancelled_at",
    TripStatus.NO_MATCH_FOUND: "expired_at",
}

_CANCEL_TRIGGERS: dict[CancelActor, TripTrigger] = {
    "rider": TripTrigger.CANCEL_BY_RIDER,
    "provider": TripTrigger.CANCEL_BY_PROVIDER,
}


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _check_amount(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(f"{name} must be a non-negative number", details={name: value})


class TripTracker:
    """Applies lifecycle events to trips, one at a time.

    Trips are values: every operation returns an updated copy and leaves the
    argument untouched. The tracker keeps the latest value of each rider's
    non-terminal trip, refuses a second concurrent request, and rejects
    operations on copies that are no longer current (a trip cancelled or
    advanced since the copy was taken). Events are expected in arrival order
    from a single thread; nothing here locks.

    Exactly one listener (the requester's view) can be subscribed. It is
    called synchronously after each status change. If it raises, the change
    is rolled back and the exception reaches the caller.
    """

    def __init__(
        self,
        settings: TripSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings or TripSettings()
        self._clock = clock or _utc_now
        self._listener: TripListener | None = None
        self._active_by_rider: dict[str, Trip] = {}

    def subscribe(self, listener: TripListener) -> None:
        """Register the listener, replacing any previous one."""
        self._listener = listener

    def unsubscribe(self) -> None:
        self._listener = None

    def active_trip(self, rider_id: str) -> str | None:
        """Id of the rider's non-terminal trip, if any."""
        trip = self._active_by_rider.get(rider_id)
        return trip.id if trip is not None else None

    def create(self, request: TripRequest) -> Trip:
        """Open a trip in ``searching`` for the request's rider.

        Raises:
            ActiveTripExists: if the rider already has a non-terminal trip.
            InvalidInput: if the estimate is priced below its minimum fare.
        """
        existing = self._active_by_rider.get(request.rider_id)
        if existing is not None:
            raise ActiveTripExists(
                f"Rider {request.rider_id} already has active trip {existing.id}",
                details={"rider_id": request.rider_id, "trip_id": existing.id},
            )

        estimate = request.estimate
        if estimate.estimated_price < estimate.minimum_fare:
            raise InvalidInput(
                f"Estimated price {estimate.estimated_price} is below the minimum fare "
                f"{estimate.minimum_fare} for {estimate.vehicle_class.value}",
                details={
                    "estimated_price": estimate.estimated_price,
                    "minimum_fare": estimate.minimum_fare,
                },
            )

        trip = Trip(
            rider_id=request.rider_id,
            pickup=request.pickup,
            dropoff=request.dropoff,
            vehicle_class=estimate.vehicle_class,
            status=TripStatus.SEARCHING,
            estimated_price=estimate.estimated_price,
            estimated_distance_km=estimate.estimated_distance_km,
            estimated_duration_min=estimate.estimated_duration_min,
            surge_multiplier=estimate.surge_multiplier,
            requested_at=self._clock(),
        )
        self._active_by_rider[trip.rider_id] = trip

        with log_trip_context(trip.id, rider_id=trip.rider_id):
            try:
                self._notify(None, trip)
            except Exception:
                del self._active_by_rider[trip.rider_id]
                logger.warning("Listener failed on trip request, request dropped")
                raise
            logger.info(f"Trip requested ({trip.vehicle_class.value}, {trip.estimated_price:.0f})")
        return trip

    def transition(
        self,
        trip: Trip,
        trigger: TripTrigger,
        driver_id: str | None = None,
    ) -> Trip:
        """Apply one lifecycle edge and return the updated trip.

        ``driver_id`` is recorded on ``accept``.

        Raises:
            InvalidTransition: if ``trigger`` is not legal from the current
                status, or ``trip`` is not the tracker's current value.
        """
        updates: dict[str, Any] = {}
        if trigger == TripTrigger.ACCEPT and driver_id is not None:
            updates["driver_id"] = driver_id
        elif trigger == TripTrigger.CANCEL_BY_RIDER:
            updates["cancelled_by"] = "rider"
        elif trigger == TripTrigger.CANCEL_BY_PROVIDER:
            updates["cancelled_by"] = "provider"
        return self._commit(trip, self._resolve(trip, trigger), updates)

    def accept(self, trip: Trip, driver_id: str) -> Trip:
        return self.transition(trip, TripTrigger.ACCEPT, driver_id=driver_id)

    def arrive(self, trip: Trip) -> Trip:
        return self.transition(trip, TripTrigger.ARRIVE)

    def start(self, trip: Trip) -> Trip:
        return self.transition(trip, TripTrigger.START)

    def cancel(self, trip: Trip, actor: CancelActor, reason: str | None = None) -> Trip:
        """Cancel a non-terminal trip, recording who cancelled and why.

        Raises:
            InvalidTransition: if the trip is already terminal (including
                already cancelled).
        """
        trigger = _CANCEL_TRIGGERS.get(actor)
        if trigger is None:
            raise InvalidInput(f"Unknown cancelling actor {actor!r}", details={"actor": actor})
        target = self._resolve(trip, trigger)
        return self._commit(trip, target, {"cancelled_by": actor, "cancellation_reason": reason})

    def complete(
        self,
        trip: Trip,
        final_price: float | None = None,
        tip: float | None = None,
    ) -> Trip:
        """Finish an ``in_progress`` trip.

        The final price defaults to the estimate; a tip is added on top.
        """
        target = self._resolve(trip, TripTrigger.COMPLETE)

        price = trip.estimated_price if final_price is None else final_price
        _check_amount("final_price", price)
        updates: dict[str, Any] = {"final_price": price}
        if tip is not None:
            _check_amount("tip", tip)
            updates["final_price"] = price + tip
            updates["tip"] = tip
        return self._commit(trip, target, updates)

    def rate(
        self,
        trip: Trip,
        rating: int,
        comment: str | None = None,
        tip: float = 0.0,
    ) -> Trip:
        """Record the rider's rating (and optional tip) on a completed trip.

        Does not change status, so the listener is not called.

        Raises:
            InvalidTransition: if the trip is not completed or is already rated.
            InvalidInput: if the rating is outside 1..5 or the tip is negative.
        """
        details = {"trip_id": trip.id, "status": trip.status.value}
        if trip.status != TripStatus.COMPLETED:
            raise InvalidTransition(
                f"Only completed trips can be rated, trip is {trip.status.value}", details
            )
        if trip.rating is not None:
            raise InvalidTransition("Trip has already been rated", details)
        if not 1 <= rating <= 5:
            raise InvalidInput(f"Rating must be between 1 and 5, got {rating}", {"rating": rating})
        _check_amount("tip", tip)

        rated = trip.model_copy(
            update={
                "rating": rating,
                "rating_comment": comment,
                "tip": (trip.tip or 0.0) + tip,
                "final_price": trip.charged_price + tip,
            }
        )
        with log_trip_context(trip.id, rider_id=trip.rider_id):
            logger.info(f"Trip rated {rating}/5")
        return rated

    def expire_search(self, trip: Trip) -> Trip:
        """Give up searching: ``searching -> no_match_found``."""
        return self.transition(trip, TripTrigger.NO_MATCH)

    def is_search_expired(self, trip: Trip, now: datetime | None = None) -> bool:
        """Whether a searching trip has outlived the configured search timeout.

        Always False when no timeout is configured.
        """
        timeout = self._settings.search_timeout_seconds
        if timeout is None or trip.status != TripStatus.SEARCHING or trip.requested_at is None:
            return False
        now = now or self._clock()
        return now - trip.requested_at >= timedelta(seconds=timeout)

    def _resolve(self, trip: Trip, trigger: TripTrigger) -> TripStatus:
        """Target status for ``trigger``; raises before anything is changed."""
        with log_trip_context(trip.id, rider_id=trip.rider_id):
            try:
                target = next_status(trip.status, trigger)
                self._check_current(trip)
            except InvalidTransition as e:
                logger.warning(f"Rejected {trigger.value}: {e.message}")
                raise
        return target

    def _check_current(self, trip: Trip) -> None:
        current = self._active_by_rider.get(trip.rider_id)
        if current is None or current.id != trip.id:
            raise InvalidTransition(
                f"Trip {trip.id} is not the active trip of rider {trip.rider_id}",
                details={"trip_id": trip.id, "status": trip.status.value},
            )
        if current.status != trip.status:
            raise InvalidTransition(
                f"Trip {trip.id} is out of date: given {trip.status.value}, "
                f"current {current.status.value}",
                details={
                    "trip_id": trip.id,
                    "status": trip.status.value,
                    "current_status": current.status.value,
                },
            )

    def _commit(self, trip: Trip, target: TripStatus, updates: dict[str, Any]) -> Trip:
        updates["status"] = target
        updates[_TIMESTAMP_FIELDS[target]] = self._clock()
        updated = trip.model_copy(update=updates)

        if target.is_terminal:
            del self._active_by_rider[trip.rider_id]
        else:
            self._active_by_rider[trip.rider_id] = updated

        with log_trip_context(trip.id, rider_id=trip.rider_id):
            try:
                self._notify(trip.status, updated)
            except Exception:
                self._active_by_rider[trip.rider_id] = trip
                logger.warning(f"Listener failed on {target.value}, trip left {trip.status.value}")
                raise
            logger.info(f"Trip {trip.status.value} -> {target.value}")
        return updated

    def _notify(self, previous: TripStatus | None, trip: Trip) -> None:
        if self._listener is None:
            return
        self._listener(
            TripStatusChanged(
                event_type=trip.status.to_event_type(),
                trip_id=trip.id,
                rider_id=trip.rider_id,
                driver_id=trip.driver_id,
                previous_status=previous,
                status=trip.status,
                timestamp=self._clock(),
                trip=trip,
            )
        )
