"""Tests for the planar distance and duration heuristics."""

import math

import pytest
from pydantic import ValidationError

from gotrip.core.exceptions import InvalidInput
from gotrip.geo import GeoPoint, ensure_point, estimate_duration_min, planar_distance_km


@pytest.mark.unit
class TestPlanarDistance:
    def test_same_point_is_zero(self, pickup):
        assert planar_distance_km(pickup, pickup) == 0.0

    def test_asuncion_short_hop(self, pickup, dropoff):
        """Palacio de López to Shopping del Sol is a bit over 2 km."""
        assert planar_distance_km(pickup, dropoff) == pytest.approx(2.256, abs=0.005)

    def test_one_degree_of_latitude_is_111_km(self):
        a = GeoPoint(latitude=0.0, longitude=0.0)
        b = GeoPoint(latitude=1.0, longitude=0.0)
        assert planar_distance_km(a, b) == pytest.approx(111.0)

    def test_longitude_scaled_by_pickup_latitude(self):
        a = GeoPoint(latitude=60.0, longitude=10.0)
        b = GeoPoint(latitude=60.0, longitude=11.0)
        assert planar_distance_km(a, b) == pytest.approx(111.0 * 0.5)

    def test_not_symmetric_across_latitudes(self):
        """The cosine uses the pickup latitude only, so A->B and B->A differ."""
        a = GeoPoint(latitude=0.0, longitude=0.0)
        b = GeoPoint(latitude=10.0, longitude=10.0)
        assert planar_distance_km(a, b) != pytest.approx(planar_distance_km(b, a))


@pytest.mark.unit
class TestDurationEstimate:
    @pytest.mark.parametrize(
        ("distance_km", "expected"),
        [(0.0, 0), (1.0, 3), (2.256, 7), (0.5, 2), (0.1, 0), (10.0, 30)],
    )
    def test_three_minutes_per_km(self, distance_km, expected):
        assert estimate_duration_min(distance_km) == expected

    def test_halves_round_up(self):
        # 2.5 minutes; banker's rounding would give 2
        assert estimate_duration_min(2.5 / 3) == 3


@pytest.mark.unit
class TestGeoPointValidation:
    def test_of_builds_point(self):
        point = GeoPoint.of(-25.3, -57.6)
        assert point.latitude == -25.3
        assert point.longitude == -57.6

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(math.nan, -57.6), (-25.3, math.inf), (91.0, 0.0), (0.0, -181.0)],
    )
    def test_of_rejects_bad_coordinates(self, lat, lng):
        with pytest.raises(InvalidInput):
            GeoPoint.of(lat, lng)

    def test_points_are_immutable(self, pickup):
        with pytest.raises(ValidationError):
            pickup.latitude = 0.0

    def test_ensure_point_rejects_missing(self):
        with pytest.raises(InvalidInput, match="pickup location is missing"):
            ensure_point(None, "pickup")

    def test_ensure_point_rejects_unvalidated_nan(self):
        point = GeoPoint.model_construct(latitude=math.nan, longitude=-57.6)
        with pytest.raises(InvalidInput) as exc_info:
            ensure_point(point, "dropoff")
        assert exc_info.value.details["field"] == "dropoff"

    def test_ensure_point_returns_valid_point(self, pickup):
        assert ensure_point(pickup, "pickup") is pickup
