from fastapi import APIRouter, Depends

from gotrip.api.auth import verify_api_key
from gotrip.api.dependencies import EstimatorDep, PriceConfigsDep, RepositoryDep, TrackerDep
from gotrip.api.models import (
    AcceptTripRequest,
    CancelTripRequest,
    CompleteTripRequest,
    CreateTripRequest,
    RateTripRequest,
)
from gotrip.core.exceptions import InvalidInput
from gotrip.trips import InMemoryTripRepository, Trip, TripRequest, TripTracker

router = APIRouter(prefix="/trips", tags=["trips"], dependencies=[Depends(verify_api_key)])


def _expire_if_due(trip: Trip, tracker: TripTracker, repository: InMemoryTripRepository) -> Trip:
    """Close a search that outlived TRIP_SEARCH_TIMEOUT_SECONDS as no-match."""
    if tracker.is_search_expired(trip):
        return repository.save(tracker.expire_search(trip))
    return trip


def _load(trip_id: str, tracker: TripTracker, repository: InMemoryTripRepository) -> Trip:
    return _expire_if_due(repository.require(trip_id), tracker, repository)


@router.post("", response_model=Trip, status_code=201)
def create_trip(
    body: CreateTripRequest,
    tracker: TrackerDep,
    repository: RepositoryDep,
    estimator: EstimatorDep,
    price_configs: PriceConfigsDep,
) -> Trip:
    """Request a trip; the fare is re-estimated server-side for the chosen class."""
    estimates = estimator.estimate(
        body.pickup.point, body.dropoff.point, price_configs, preferred=body.vehicle_class
    )
    estimate = next((e for e in estimates if e.vehicle_class == body.vehicle_class), None)
    if estimate is None:
        raise InvalidInput(
            f"Vehicle class {body.vehicle_class.value} is not available",
            details={"vehicle_class": body.vehicle_class.value},
        )

    # A timed-out search must not block the rider's next request.
    active_id = tracker.active_trip(body.rider_id)
    active = repository.get(active_id) if active_id is not None else None
    if active is not None:
        _expire_if_due(active, tracker, repository)

    trip = tracker.create(
        TripRequest(
            rider_id=body.rider_id,
            pickup=body.pickup,
            dropoff=body.dropoff,
            estimate=estimate,
        )
    )
    return repository.save(trip)


@router.get("/{trip_id}", response_model=Trip)
def get_trip(trip_id: str, tracker: TrackerDep, repository: RepositoryDep) -> Trip:
    return _load(trip_id, tracker, repository)


@router.post("/{trip_id}/accept", response_model=Trip)
def accept_trip(
    trip_id: str, body: AcceptTripRequest, tracker: TrackerDep, repository: RepositoryDep
) -> Trip:
    """Driver accepted the request. Too late once the search has timed out."""
    return repository.save(tracker.accept(_load(trip_id, tracker, repository), body.driver_id))


@router.post("/{trip_id}/arrive", response_model=Trip)
def arrive_trip(trip_id: str, tracker: TrackerDep, repository: RepositoryDep) -> Trip:
    """Driver is at the pickup point."""
    return repository.save(tracker.arrive(repository.require(trip_id)))


@router.post("/{trip_id}/start", response_model=Trip)
def start_trip(trip_id: str, tracker: TrackerDep, repository: RepositoryDep) -> Trip:
    """Rider is on board."""
    return repository.save(tracker.start(repository.require(trip_id)))


@router.post("/{trip_id}/no-match", response_model=Trip)
def expire_trip_search(trip_id: str, tracker: TrackerDep, repository: RepositoryDep) -> Trip:
    """No driver accepted; close the search."""
    return repository.save(tracker.expire_search(repository.require(trip_id)))


@router.post("/{trip_id}/cancel", response_model=Trip)
def cancel_trip(
    trip_id: str, body: CancelTripRequest, tracker: TrackerDep, repository: RepositoryDep
) -> Trip:
    trip = tracker.cancel(repository.require(trip_id), body.actor, body.reason)
    return repository.save(trip)


@router.post("/{trip_id}/complete", response_model=Trip)
def complete_trip(
    trip_id: str, body: CompleteTripRequest, tracker: TrackerDep, repository: RepositoryDep
) -> Trip:
    trip = tracker.complete(repository.require(trip_id), body.final_price, body.tip)
    return repository.save(trip)


@router.post("/{trip_id}/rating", response_model=Trip)
def rate_trip(
    trip_id: str, body: RateTripRequest, tracker: TrackerDep, repository: RepositoryDep
) -> Trip:
    trip = tracker.rate(repository.require(trip_id), body.rating, body.comment, body.tip)
    return repository.save(trip)
