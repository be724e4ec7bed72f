"""
Dashboard service implementation.
"""

from typing import Any, Optional

from shared.endpoints import DashboardEndpoints
from shared.service import BaseApiService

from .exceptions import DashboardApiError
from .interfaces import IDashboardService


class DashboardService(BaseApiService, IDashboardService):
    """Implementation of the dashboard service."""

    error_class = DashboardApiError

    async def get_patient_dashboard(self) -> dict[str, Any]:
        envelope = await self._api.get(DashboardEndpoints.PATIENT)
        return self._unwrap(envelope, "Failed to get patient dashboard")


# Module-level instance getter
_service_instance: Optional[DashboardService] = None


def get_dashboard_service() -> DashboardService:
    """Get the dashboard service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = DashboardService()
    return _service_instance


def reset_dashboard_service() -> None:
    """Reset the dashboard service singleton (for testing)."""
    global _service_instance
    _service_instance = None
