"""Fare estimation per vehicle class."""

import logging
import math
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from gotrip.core.exceptions import EmptyPricingSource, InvalidInput
from gotrip.geo import GeoPoint, ensure_point, estimate_duration_min, planar_distance_km

from .config import DEFAULT_PRICE_CONFIGS, PriceConfig, VehicleClass, select_active_configs

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY: tuple[VehicleClass, ...] = (
    VehicleClass.ECONOMY,
    VehicleClass.MOTO,
    VehicleClass.WOMEN,
    VehicleClass.COMFORT,
    VehicleClass.XL,
)


class FareEstimate(BaseModel):
    """Price/time/distance projection for one vehicle class. Not a commitment."""

    vehicle_class: VehicleClass
    estimated_price: float = Field(ge=0)
    estimated_distance_km: float = Field(ge=0)
    estimated_duration_min: int = Field(ge=0)
    surge_multiplier: float = Field(default=1.0, ge=1.0)
    minimum_fare: float = Field(ge=0)


class SimulatedFare(BaseModel):
    """Admin preview of a tariff for an explicit distance and duration."""

    vehicle_class: VehicleClass
    display_name: str
    price: float = Field(ge=0)
    minimum_fare: float = Field(ge=0)
    at_minimum_fare: bool


class FareEstimator:
    """Computes fare estimates from a pricing catalog.

    Surge is not computed; every estimate carries a multiplier of 1.0.
    """

    def __init__(
        self,
        priority: Sequence[VehicleClass | str] | None = None,
        defaults: Sequence[PriceConfig] = DEFAULT_PRICE_CONFIGS,
    ) -> None:
        order = [VehicleClass(c) for c in (priority or DEFAULT_PRIORITY)]
        # Classes left out of a custom priority keep their default relative order.
        order += [c for c in DEFAULT_PRIORITY if c not in order]
        self._rank = {vehicle_class: i for i, vehicle_class in enumerate(order)}
        self._defaults = list(defaults)

    def estimate(
        self,
        pickup: GeoPoint | None,
        dropoff: GeoPoint | None,
        configs: Iterable[PriceConfig] | None,
        preferred: VehicleClass | None = None,
    ) -> list[FareEstimate]:
        """Estimate a fare for every active vehicle class.

        Falls back to the built-in default table when ``configs`` holds no
        active entry. Zero distance yields each class's minimum fare.

        Raises:
            InvalidInput: if either point is missing or has bad coordinates.
        """
        pickup = ensure_point(pickup, "pickup")
        dropoff = ensure_point(dropoff, "dropoff")
        active = self._resolve(configs)

        distance_km = planar_distance_km(pickup, dropoff)
        duration_min = estimate_duration_min(distance_km)

        estimates = [
            FareEstimate(
                vehicle_class=config.vehicle_class,
                estimated_price=self._price(config, distance_km, duration_min),
                estimated_distance_km=distance_km,
                estimated_duration_min=duration_min,
                surge_multiplier=1.0,
                minimum_fare=config.minimum_fare,
            )
            for config in active
        ]
        estimates.sort(key=lambda e: self._sort_key(e.vehicle_class, preferred))

        logger.debug(
            f"Estimated {len(estimates)} classes for {distance_km:.2f} km / {duration_min} min"
        )
        return estimates

    def simulate(
        self,
        distance_km: float,
        duration_min: float,
        configs: Iterable[PriceConfig] | None,
    ) -> list[SimulatedFare]:
        """Preview active tariffs for a given distance and duration, cheapest first.

        Unlike ``estimate`` this includes the booking fee and does not fall
        back to the default table: an empty catalog previews nothing.
        """
        for name, value in (("distance_km", distance_km), ("duration_min", duration_min)):
            if not math.isfinite(value) or value < 0:
                raise InvalidInput(f"{name} must be a non-negative number", details={name: value})

        results = []
        for config in configs or ():
            if not config.active:
                continue
            price = max(
                config.base_fare
                + distance_km * config.price_per_km
                + duration_min * config.price_per_min
                + config.booking_fee,
                config.minimum_fare,
            )
            results.append(
                SimulatedFare(
                    vehicle_class=config.vehicle_class,
                    display_name=config.display_name or config.vehicle_class.value,
                    price=price,
                    minimum_fare=config.minimum_fare,
                    at_minimum_fare=price <= config.minimum_fare,
                )
            )
        results.sort(key=lambda r: r.price)
        return results

    def _resolve(self, configs: Iterable[PriceConfig] | None) -> list[PriceConfig]:
        try:
            return select_active_configs(configs)
        except EmptyPricingSource:
            logger.warning("Pricing source returned no active configs, using default table")
            return list(self._defaults)

    def _sort_key(
        self, vehicle_class: VehicleClass, preferred: VehicleClass | None
    ) -> tuple[int, int]:
        return (0 if vehicle_class == preferred else 1, self._rank[vehicle_class])

    @staticmethod
    def _price(config: PriceConfig, distance_km: float, duration_min: int) -> float:
        price = (
            config.base_fare
            + distance_km * config.price_per_km
            + duration_min * config.price_per_min
        )
        return max(price, config.minimum_fare)
