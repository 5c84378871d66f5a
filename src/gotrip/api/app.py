"""FastAPI application factory for the fare and trip API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gotrip import __version__
from gotrip.api.errors import register_exception_handlers
from gotrip.api.models import HealthResponse
from gotrip.api.routes import dashboard, estimates, trips
from gotrip.pricing import FareEstimator
from gotrip.settings import Settings, get_settings
from gotrip.trips import InMemoryTripRepository, TripTracker

if TYPE_CHECKING:
    from gotrip.pricing import PriceConfig

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    tracker: TripTracker | None = None,
    repository: InMemoryTripRepository | None = None,
    price_configs: Sequence[PriceConfig] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Loaded settings (read from the environment when omitted)
        tracker: TripTracker holding per-rider active trips
        repository: Trip store backing the trip routes
        price_configs: Pricing catalog; empty or omitted means the built-in table
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="GO Trip API",
        version=__version__,
        description="Fare estimates and trip lifecycle for the GO ride-hailing app",
    )

    app.state.settings = settings
    app.state.tracker = tracker or TripTracker(settings.trips)
    app.state.repository = repository if repository is not None else InMemoryTripRepository()
    app.state.price_configs = list(price_configs or [])
    app.state.estimator = FareEstimator(priority=settings.pricing.priority_list())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors.origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(estimates.router)
    app.include_router(trips.router)
    app.include_router(dashboard.router)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            version=__version__,
            active_trips=sum(1 for t in app.state.repository.list_trips() if t.is_active),
            price_configs=len(app.state.price_configs),
        )

    logger.info(f"API created with {len(app.state.price_configs)} price configs")
    return app
