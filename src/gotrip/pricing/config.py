"""Vehicle classes and their pricing configuration."""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from gotrip.core.exceptions import EmptyPricingSource


class VehicleClass(str, Enum):
    """Service tiers a rider can request."""

    ECONOMY = "economy"
    MOTO = "moto"
    WOMEN = "women"
    COMFORT = "comfort"
    XL = "xl"


class PriceConfig(BaseModel):
    """Tariff for one vehicle class. Amounts are in the settings currency."""

    model_config = ConfigDict(frozen=True)

    vehicle_class: VehicleClass
    base_fare: float = Field(ge=0)
    price_per_km: float = Field(ge=0)
    price_per_min: float = Field(ge=0)
    minimum_fare: float = Field(ge=0)
    active: bool = True
    display_name: str | None = None
    # Only the admin simulator adds the booking fee; rider estimates do not.
    booking_fee: float = Field(default=0.0, ge=0)


DEFAULT_PRICE_CONFIGS: tuple[PriceConfig, ...] = (
    PriceConfig(
        vehicle_class=VehicleClass.ECONOMY,
        display_name="GO Economy",
        base_fare=5000,
        price_per_km=3000,
        price_per_min=500,
        minimum_fare=10000,
    ),
    PriceConfig(
        vehicle_class=VehicleClass.MOTO,
        display_name="GO Moto",
        base_fare=3000,
        price_per_km=2000,
        price_per_min=300,
        minimum_fare=7000,
    ),
    PriceConfig(
        vehicle_class=VehicleClass.WOMEN,
        display_name="GO Mujer",
        base_fare=5500,
        price_per_km=3200,
        price_per_min=500,
        minimum_fare=11000,
    ),
    PriceConfig(
        vehicle_class=VehicleClass.COMFORT,
        display_name="GO Comfort",
        base_fare=7000,
        price_per_km=3800,
        price_per_min=600,
        minimum_fare=14000,
    ),
    PriceConfig(
        vehicle_class=VehicleClass.XL,
        display_name="GO XL",
        base_fare=9000,
        price_per_km=4500,
        price_per_min=700,
        minimum_fare=18000,
    ),
)


def select_active_configs(configs: Iterable[PriceConfig] | None) -> list[PriceConfig]:
    """Active configs, one per vehicle class (first occurrence wins).

    Raises:
        EmptyPricingSource: if no active config is left.
    """
    selected: dict[VehicleClass, PriceConfig] = {}
    for config in configs or ():
        if config.active and config.vehicle_class not in selected:
            selected[config.vehicle_class] = config

    if not selected:
        raise EmptyPricingSource("No active price configuration available")
    return list(selected.values())
