"""Read-only invoice analytics"""
from .get_dashboard_stats import GetDashboardStats
from .get_monthly_revenue import GetMonthlyRevenue
from .get_top_customers import GetTopCustomers
from .get_status_breakdown import GetStatusBreakdown

__all__ = [
    "GetDashboardStats",
    "GetMonthlyRevenue",
    "GetTopCustomers",
    "GetStatusBreakdown",
]
