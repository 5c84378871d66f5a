from fastapi import APIRouter, Depends

from gotrip.analytics import DashboardStats, compute_dashboard
from gotrip.api.auth import verify_api_key
from gotrip.api.dependencies import RepositoryDep

router = APIRouter(tags=["dashboard"], dependencies=[Depends(verify_api_key)])


@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard(repository: RepositoryDep) -> DashboardStats:
    """Totals, revenue and per-status counts over every stored trip."""
    return compute_dashboard(repository.list_trips())
