"""
Guardian service implementation.
"""

from typing import Any, Optional, Union

from shared.endpoints import GuardianEndpoints, interpolate
from shared.service import BaseApiService

from .exceptions import GuardianApiError
from .interfaces import IGuardianService
from .models import LinkPatientRequest


class GuardianService(BaseApiService, IGuardianService):
    """Implementation of the guardian service."""

    error_class = GuardianApiError

    async def link_patient(
        self, request: Union[LinkPatientRequest, dict[str, Any], str]
    ) -> Any:
        if isinstance(request, str):
            request = LinkPatientRequest(patient_link_code=request)
        envelope = await self._api.post(
            GuardianEndpoints.LINK_PATIENT, LinkPatientRequest.wire_body(request)
        )
        return self._unwrap(envelope, "Failed to link patient")

    async def get_guardian_dashboard(self) -> dict[str, Any]:
        envelope = await self._api.get(GuardianEndpoints.DASHBOARD)
        return self._unwrap(envelope, "Failed to get guardian dashboard")

    async def get_guardian_patient_detail(self) -> dict[str, Any]:
        envelope = await self._api.get(GuardianEndpoints.PATIENT_DETAIL)
        return self._unwrap(envelope, "Failed to get guardian patient detail")

    async def get_guardian_notifications(self) -> dict[str, Any]:
        envelope = await self._api.get(GuardianEndpoints.NOTIFICATIONS)
        return self._unwrap(envelope, "Failed to get guardian notifications")

    async def mark_alert_as_read(self, alert_id: str) -> Any:
        path = interpolate(GuardianEndpoints.ALERT_READ, alertId=alert_id)
        envelope = await self._api.put(path)
        return self._unwrap(envelope, "Failed to mark alert as read")

    async def mark_notification_as_read(self, alert_id: str) -> Any:
        path = interpolate(GuardianEndpoints.ALERT_READ, alertId=alert_id)
        envelope = await self._api.put(path, {})
        return self._unwrap(envelope, "Failed to mark notification as read")


# Module-level instance getter
_service_instance: Optional[GuardianService] = None


def get_guardian_service() -> GuardianService:
    """Get the guardian service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = GuardianService()
    return _service_instance


def reset_guardian_service() -> None:
    """Reset the guardian service singleton (for testing)."""
    global _service_instance
    _service_instance = None
