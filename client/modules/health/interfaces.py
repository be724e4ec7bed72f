"""
Health module interface.
"""

from typing import Any, Optional, Protocol, Union, runtime_checkable

from .models import PainHistoryParams, PainRecord


@runtime_checkable
class IHealthService(Protocol):
    """
    Interface for pain recording operations.
    """

    async def record_pain_manual(self, record: Union[PainRecord, dict[str, Any]]) -> Any:
        """
        Save a pain record the patient entered on their own.

        A SUCCESS response without data still counts as saved; the default
        confirmation message is returned in that case.

        Raises:
            HealthApiError: If the backend reports failure
        """
        ...

    async def record_pain_after_exercise(
        self, record: Union[PainRecord, dict[str, Any]]
    ) -> Any:
        """
        Save a pain record taken right after an exercise.

        Raises:
            HealthApiError: If the backend reports failure or returns no data
        """
        ...

    async def get_pain_history(
        self,
        params: Optional[Union[PainHistoryParams, dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        """
        Get pain records, optionally limited to a date range.

        Returns:
            painRecords
        """
        ...
