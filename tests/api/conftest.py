import pytest
from fastapi.testclient import TestClient

from gotrip.api.app import create_app
from gotrip.settings import APISettings, Settings
from gotrip.trips import InMemoryTripRepository, TripTracker

API_KEY = "test-api-key"


@pytest.fixture
def repository():
    return InMemoryTripRepository()


@pytest.fixture
def app(clock, repository):
    settings = Settings(api=APISettings(key=API_KEY))
    return create_app(
        settings=settings,
        tracker=TripTracker(settings.trips, clock=clock),
        repository=repository,
    )


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"X-API-Key": API_KEY}


@pytest.fixture
def trip_payload():
    return {
        "rider_id": "rider-1",
        "pickup": {
            "point": {"latitude": -25.2867, "longitude": -57.6470},
            "address": "Palacio de López",
        },
        "dropoff": {
            "point": {"latitude": -25.30, "longitude": -57.63},
            "address": "Shopping del Sol",
        },
        "vehicle_class": "economy",
    }
