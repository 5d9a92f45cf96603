from .get_dashboard_metrics_use_case import (
    MAX_REPORT_LIMIT,
    DashboardMetrics,
    GetDashboardMetricsUseCase,
    ReportItem,
)

__all__ = [
    "DashboardMetrics",
    "GetDashboardMetricsUseCase",
    "MAX_REPORT_LIMIT",
    "ReportItem",
]
