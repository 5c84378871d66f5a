"""Admin dashboard aggregates over a list of trips."""

from collections import Counter, defaultdict
from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta

from pydantic import BaseModel

from gotrip.trips import Trip, TripStatus


class DriverRevenue(BaseModel):
    driver_id: str
    trip_count: int
    total_revenue: float


class DailyRevenue(BaseModel):
    day: date
    revenue: float
    trips: int


class DashboardStats(BaseModel):
    total_trips: int
    active_trips: int
    completed_trips: int
    total_revenue: float
    today_trips: int
    today_revenue: float
    trips_by_status: dict[TripStatus, int]
    top_drivers: list[DriverRevenue]
    revenue_by_day: list[DailyRevenue]


def compute_dashboard(
    trips: Iterable[Trip],
    now: datetime | None = None,
    top_n: int = 5,
    days: int = 7,
) -> DashboardStats:
    """Reduce trips into dashboard totals.

    Revenue counts completed trips only, at their final price when set and
    the estimate otherwise. "Today" starts at midnight in ``now``'s timezone;
    the daily series runs oldest first and ends with today.
    """
    now = now or datetime.now(UTC)
    today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)

    trips = list(trips)
    completed = [t for t in trips if t.status == TripStatus.COMPLETED]
    today = [t for t in trips if t.requested_at is not None and t.requested_at >= today_start]

    driver_trips: dict[str, int] = defaultdict(int)
    driver_revenue: dict[str, float] = defaultdict(float)
    for trip in completed:
        if trip.driver_id is not None:
            driver_trips[trip.driver_id] += 1
            driver_revenue[trip.driver_id] += trip.charged_price

    top_drivers = sorted(
        (
            DriverRevenue(driver_id=d, trip_count=driver_trips[d], total_revenue=revenue)
            for d, revenue in driver_revenue.items()
        ),
        key=lambda d: d.total_revenue,
        reverse=True,
    )[:top_n]

    revenue_by_day = []
    for offset in range(days - 1, -1, -1):
        start = today_start - timedelta(days=offset)
        end = start + timedelta(days=1)
        day_trips = [
            t for t in completed if _in_window(t.completed_at or t.requested_at, start, end)
        ]
        revenue_by_day.append(
            DailyRevenue(
                day=start.date(),
                revenue=round(sum(t.charged_price for t in day_trips), 2),
                trips=len(day_trips),
            )
        )

    return DashboardStats(
        total_trips=len(trips),
        active_trips=sum(1 for t in trips if t.is_active),
        completed_trips=len(completed),
        total_revenue=sum(t.charged_price for t in completed),
        today_trips=len(today),
        today_revenue=sum(t.charged_price for t in today if t.status == TripStatus.COMPLETED),
        trips_by_status=dict(Counter(t.status for t in trips)),
        top_drivers=top_drivers,
        revenue_by_day=revenue_by_day,
    )


def _in_window(moment: datetime | None, start: datetime, end: datetime) -> bool:
    return moment is not None and start <= moment < end
