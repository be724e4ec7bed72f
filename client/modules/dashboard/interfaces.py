"""
Dashboard module interface.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDashboardService(Protocol):
    """Interface for the patient home screen summary."""

    async def get_patient_dashboard(self) -> dict[str, Any]:
        """
        Get today's summary and the weekly step counts.

        Returns:
            todaySummary and weeklySteps

        Raises:
            DashboardApiError: If the backend reports failure
        """
        ...
