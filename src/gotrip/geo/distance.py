"""Planar distance and duration heuristics for fare estimates.

The distance is a flat-earth approximation: one degree of latitude is taken
as 111 km and longitude degrees are scaled by cos(pickup latitude). It is
adequate for short urban trips only and drifts from the great-circle
distance as trips get longer or move toward the poles.
"""

import math

from .point import GeoPoint

KM_PER_DEGREE = 111.0
MINUTES_PER_KM = 3


def planar_distance_km(pickup: GeoPoint, dropoff: GeoPoint) -> float:
    """Approximate distance in kilometers between pickup and dropoff."""
    dx = (dropoff.latitude - pickup.latitude) * KM_PER_DEGREE
    dy = (
        (dropoff.longitude - pickup.longitude)
        * KM_PER_DEGREE
        * math.cos(math.radians(pickup.latitude))
    )
    return math.sqrt(dx**2 + dy**2)


def estimate_duration_min(distance_km: float) -> int:
    """Whole minutes at MINUTES_PER_KM, rounding halves up."""
    return math.floor(distance_km * MINUTES_PER_KM + 0.5)
