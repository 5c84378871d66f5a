from .distance import KM_PER_DEGREE, MINUTES_PER_KM, estimate_duration_min, planar_distance_km
from .point import GeoPoint, Place, ensure_point

__all__ = [
    "KM_PER_DEGREE",
    "MINUTES_PER_KM",
    "GeoPoint",
    "Place",
    "ensure_point",
    "estimate_duration_min",
    "planar_distance_km",
]
