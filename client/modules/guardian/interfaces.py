"""
Guardian module interface.

The caregiver side of the app: linking to a patient, watching their status
and acknowledging alerts.
"""

from typing import Any, Protocol, Union, runtime_checkable

from .models import LinkPatientRequest


@runtime_checkable
class IGuardianService(Protocol):
    """
    Interface for guardian operations.

    All methods raise GuardianApiError when the backend reports failure.
    """

    async def link_patient(
        self, request: Union[LinkPatientRequest, dict[str, Any], str]
    ) -> Any:
        """
        Link to a patient.

        Args:
            request: The link request, or the bare link code
        """
        ...

    async def get_guardian_dashboard(self) -> dict[str, Any]:
        """Get the guardian's profile, the patient, today's status and alerts."""
        ...

    async def get_guardian_patient_detail(self) -> dict[str, Any]:
        """Get the linked patient's info, contacts and weekly progress."""
        ...

    async def get_guardian_notifications(self) -> dict[str, Any]:
        """Get the guardian's notifications."""
        ...

    async def mark_alert_as_read(self, alert_id: str) -> Any:
        """Acknowledge an emergency alert (no request body)."""
        ...

    async def mark_notification_as_read(self, alert_id: str) -> Any:
        """Acknowledge a notification (empty JSON object body)."""
        ...
