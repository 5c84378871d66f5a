import pytest
from fastapi.testclient import TestClient

from gotrip.api.app import create_app
from gotrip.pricing import PriceConfig, VehicleClass
from gotrip.settings import APISettings, Settings

PICKUP = {"latitude": -25.2867, "longitude": -57.6470}
DROPOFF = {"latitude": -25.30, "longitude": -57.63}


@pytest.mark.unit
class TestEstimateEndpoint:
    def test_defaults_when_no_catalog(self, client, auth_headers):
        response = client.post(
            "/estimates", json={"pickup": PICKUP, "dropoff": DROPOFF}, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["currency"] == "PYG"
        assert [e["vehicle_class"] for e in data["estimates"]] == [
            "economy",
            "moto",
            "women",
            "comfort",
            "xl",
        ]
        assert all(e["surge_multiplier"] == 1.0 for e in data["estimates"])

    def test_preferred_first(self, client, auth_headers):
        response = client.post(
            "/estimates",
            json={"pickup": PICKUP, "dropoff": DROPOFF, "preferred": "xl"},
            headers=auth_headers,
        )
        assert response.json()["estimates"][0]["vehicle_class"] == "xl"

    def test_uses_configured_catalog(self, economy_config, auth_headers):
        settings = Settings(api=APISettings(key=auth_headers["X-API-Key"]))
        client = TestClient(create_app(settings=settings, price_configs=[economy_config]))

        response = client.post(
            "/estimates", json={"pickup": PICKUP, "dropoff": DROPOFF}, headers=auth_headers
        )

        [estimate] = response.json()["estimates"]
        assert estimate["estimated_duration_min"] == 7
        assert estimate["estimated_price"] == pytest.approx(25268.7, abs=5)

    def test_out_of_range_latitude(self, client, auth_headers):
        response = client.post(
            "/estimates",
            json={"pickup": {"latitude": 95, "longitude": 0}, "dropoff": DROPOFF},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_missing_dropoff(self, client, auth_headers):
        response = client.post("/estimates", json={"pickup": PICKUP}, headers=auth_headers)
        assert response.status_code == 422


@pytest.mark.unit
class TestSimulateEndpoint:
    def test_empty_catalog_previews_nothing(self, client, auth_headers):
        response = client.post(
            "/estimates/simulate",
            json={"distance_km": 5, "duration_min": 15},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["results"] == []

    def test_cheapest_first_with_booking_fee(self, auth_headers):
        configs = [
            PriceConfig(
                vehicle_class=VehicleClass.COMFORT,
                base_fare=7000,
                price_per_km=3800,
                price_per_min=600,
                minimum_fare=14000,
                booking_fee=1500,
            ),
            PriceConfig(
                vehicle_class=VehicleClass.MOTO,
                base_fare=3000,
                price_per_km=2000,
                price_per_min=300,
                minimum_fare=7000,
            ),
        ]
        settings = Settings(api=APISettings(key=auth_headers["X-API-Key"]))
        client = TestClient(create_app(settings=settings, price_configs=configs))

        response = client.post(
            "/estimates/simulate",
            json={"distance_km": 5, "duration_min": 15},
            headers=auth_headers,
        )

        results = response.json()["results"]
        assert [r["vehicle_class"] for r in results] == ["moto", "comfort"]
        assert results[1]["price"] == pytest.approx(7000 + 19000 + 9000 + 1500)

    def test_negative_distance_rejected(self, client, auth_headers):
        response = client.post(
            "/estimates/simulate",
            json={"distance_km": -1, "duration_min": 15},
            headers=auth_headers,
        )
        assert response.status_code == 422
