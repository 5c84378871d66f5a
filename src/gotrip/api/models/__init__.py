from .estimates import EstimateRequest, EstimateResponse, SimulateRequest, SimulateResponse
from .health import HealthResponse
from .trips import (
    AcceptTripRequest,
    CancelTripRequest,
    CompleteTripRequest,
    CreateTripRequest,
    RateTripRequest,
)

__all__ = [
    "AcceptTripRequest",
    "CancelTripRequest",
    "CompleteTripRequest",
    "CreateTripRequest",
    "EstimateRequest",
    "EstimateResponse",
    "HealthResponse",
    "RateTripRequest",
    "SimulateRequest",
    "SimulateResponse",
]
