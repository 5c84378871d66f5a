"""Tests for the in-memory trip repository."""

import pytest

from gotrip.core.exceptions import NotFoundError
from gotrip.trips import InMemoryTripRepository, TripStatus


@pytest.fixture
def repository():
    return InMemoryTripRepository()


@pytest.mark.unit
class TestInMemoryTripRepository:
    def test_save_and_get(self, repository, tracker, make_request):
        trip = repository.save(tracker.create(make_request()))

        assert repository.get(trip.id) == trip
        assert len(repository) == 1

    def test_save_replaces_previous_value(self, repository, tracker, make_request):
        trip = repository.save(tracker.create(make_request()))
        accepted = repository.save(tracker.accept(trip, "driver-7"))

        assert repository.get(trip.id).status == TripStatus.ACCEPTED
        assert repository.get(trip.id) == accepted
        assert len(repository) == 1

    def test_get_missing_returns_none(self, repository):
        assert repository.get("nope") is None

    def test_require_missing_raises(self, repository):
        with pytest.raises(NotFoundError) as exc_info:
            repository.require("nope")
        assert exc_info.value.details == {"trip_id": "nope"}

    def test_list_trips_filters_by_status(self, repository, tracker, make_request):
        searching = repository.save(tracker.create(make_request("rider-1")))
        other = tracker.create(make_request("rider-2"))
        cancelled = repository.save(tracker.cancel(other, "rider"))

        assert repository.list_trips() == [searching, cancelled]
        assert repository.list_trips([TripStatus.SEARCHING]) == [searching]
        assert repository.list_trips([TripStatus.COMPLETED]) == []

    def test_clear(self, repository, tracker, make_request):
        repository.save(tracker.create(make_request()))
        repository.clear()
        assert len(repository) == 0
