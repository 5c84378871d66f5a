"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from gotrip.pricing import FareEstimator, PriceConfig
from gotrip.trips import InMemoryTripRepository, TripTracker


def get_tracker(request: Request) -> TripTracker:
    """Retrieve TripTracker from app state."""
    return request.app.state.tracker


def get_repository(request: Request) -> InMemoryTripRepository:
    """Retrieve the trip repository from app state."""
    return request.app.state.repository


def get_estimator(request: Request) -> FareEstimator:
    return request.app.state.estimator


def get_price_configs(request: Request) -> list[PriceConfig]:
    return request.app.state.price_configs


TrackerDep = Annotated[TripTracker, Depends(get_tracker)]
RepositoryDep = Annotated[InMemoryTripRepository, Depends(get_repository)]
EstimatorDep = Annotated[FareEstimator, Depends(get_estimator)]
PriceConfigsDep = Annotated[list[PriceConfig], Depends(get_price_configs)]
