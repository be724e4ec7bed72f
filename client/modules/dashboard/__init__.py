"""
Dashboard module.

Public API:
- IDashboardService: Interface for the patient summary
- DashboardService: Implementation
- DashboardApiError: Raised when the dashboard endpoint fails
"""

from .interfaces import IDashboardService
from .exceptions import DashboardApiError
from .service import DashboardService, get_dashboard_service, reset_dashboard_service

__all__ = [
    "IDashboardService",
    "DashboardService",
    "get_dashboard_service",
    "reset_dashboard_service",
    "DashboardApiError",
]
