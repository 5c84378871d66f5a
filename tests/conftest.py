import os

# The HTTP layer refuses to serve without a key; give tests a known one.
os.environ.setdefault("API_KEY", "test-api-key")

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from gotrip.geo import GeoPoint, Place
from gotrip.pricing import FareEstimator, PriceConfig, VehicleClass
from gotrip.settings import TripSettings
from gotrip.trips import Trip, TripRequest, TripTracker

# Asunción, Paraguay
PICKUP = GeoPoint(latitude=-25.2867, longitude=-57.6470)
DROPOFF = GeoPoint(latitude=-25.30, longitude=-57.63)


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def pickup() -> GeoPoint:
    return PICKUP


@pytest.fixture
def dropoff() -> GeoPoint:
    return DROPOFF


@pytest.fixture
def economy_config() -> PriceConfig:
    """Economy tariff in guaraníes."""
    return PriceConfig(
        vehicle_class=VehicleClass.ECONOMY,
        base_fare=15000,
        price_per_km=3000,
        price_per_min=500,
        minimum_fare=20000,
    )


@pytest.fixture
def estimator() -> FareEstimator:
    return FareEstimator()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 14, 18, 30, 0, tzinfo=UTC))


@pytest.fixture
def tracker(clock: FakeClock) -> TripTracker:
    return TripTracker(TripSettings(), clock=clock)


@pytest.fixture
def make_request(
    estimator: FareEstimator, economy_config: PriceConfig
) -> Callable[..., TripRequest]:
    """Factory for trip requests priced with the economy tariff."""

    def _make_request(rider_id: str = "rider-1") -> TripRequest:
        estimate = estimator.estimate(PICKUP, DROPOFF, [economy_config])[0]
        return TripRequest(
            rider_id=rider_id,
            pickup=Place(point=PICKUP, address="Palacio de López"),
            dropoff=Place(point=DROPOFF, address="Shopping del Sol"),
            estimate=estimate,
        )

    return _make_request


@pytest.fixture
def in_progress_trip(tracker: TripTracker, make_request: Callable[..., TripRequest]) -> Trip:
    trip = tracker.create(make_request())
    trip = tracker.accept(trip, "driver-7")
    trip = tracker.arrive(trip)
    return tracker.start(trip)
