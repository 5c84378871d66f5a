from .config import DEFAULT_PRICE_CONFIGS, PriceConfig, VehicleClass, select_active_configs
from .estimator import FareEstimate, FareEstimator, SimulatedFare

__all__ = [
    "DEFAULT_PRICE_CONFIGS",
    "FareEstimate",
    "FareEstimator",
    "PriceConfig",
    "SimulatedFare",
    "VehicleClass",
    "select_active_configs",
]
