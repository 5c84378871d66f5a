from fastapi import APIRouter, Depends, Request

from gotrip.api.auth import verify_api_key
from gotrip.api.dependencies import EstimatorDep, PriceConfigsDep
from gotrip.api.models import EstimateRequest, EstimateResponse, SimulateRequest, SimulateResponse

router = APIRouter(prefix="/estimates", tags=["estimates"], dependencies=[Depends(verify_api_key)])


@router.post("", response_model=EstimateResponse)
def estimate_fares(
    request: Request,
    body: EstimateRequest,
    estimator: EstimatorDep,
    price_configs: PriceConfigsDep,
) -> EstimateResponse:
    """Fare estimates for every active vehicle class."""
    estimates = estimator.estimate(body.pickup, body.dropoff, price_configs, body.preferred)
    return EstimateResponse(
        currency=request.app.state.settings.pricing.currency,
        estimates=estimates,
    )


@router.post("/simulate", response_model=SimulateResponse)
def simulate_fares(
    request: Request,
    body: SimulateRequest,
    estimator: EstimatorDep,
    price_configs: PriceConfigsDep,
) -> SimulateResponse:
    """Admin tariff preview for an explicit distance and duration."""
    results = estimator.simulate(body.distance_km, body.duration_min, price_configs)
    return SimulateResponse(
        currency=request.app.state.settings.pricing.currency,
        results=results,
    )
