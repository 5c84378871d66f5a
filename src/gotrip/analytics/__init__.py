from .dashboard import DailyRevenue, DashboardStats, DriverRevenue, compute_dashboard

__all__ = ["DailyRevenue", "DashboardStats", "DriverRevenue", "compute_dashboard"]
