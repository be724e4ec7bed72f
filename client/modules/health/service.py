"""
Health service implementation.
"""

from typing import Any, Optional, Union

from shared.endpoints import HealthEndpoints, with_query
from shared.service import BaseApiService

from .exceptions import HealthApiError
from .interfaces import IHealthService
from .models import PainHistoryParams, PainRecord


PAIN_RECORD_SAVED_MESSAGE = "통증 기록이 성공적으로 저장되었습니다."


class HealthService(BaseApiService, IHealthService):
    """Implementation of the health service."""

    error_class = HealthApiError

    async def record_pain_manual(self, record: Union[PainRecord, dict[str, Any]]) -> Any:
        envelope = await self._api.post(
            HealthEndpoints.PAIN_RECORD, PainRecord.wire_body(record)
        )
        return self._unwrap(
            envelope,
            "Failed to record pain",
            allow_empty=True,
            default=PAIN_RECORD_SAVED_MESSAGE,
        )

    async def record_pain_after_exercise(
        self, record: Union[PainRecord, dict[str, Any]]
    ) -> Any:
        envelope = await self._api.post(
            HealthEndpoints.PAIN_RECORD_AFTER_EXERCISE, PainRecord.wire_body(record)
        )
        return self._unwrap(envelope, "Failed to record post-exercise pain")

    async def get_pain_history(
        self,
        params: Optional[Union[PainHistoryParams, dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        query = PainHistoryParams.wire_body(params or {})
        path = with_query(
            HealthEndpoints.PAIN_HISTORY,
            startDate=query.get("startDate"),
            endDate=query.get("endDate"),
        )
        envelope = await self._api.get(path)
        return self._unwrap(envelope, "Failed to get pain history")


# Module-level instance getter
_service_instance: Optional[HealthService] = None


def get_health_service() -> HealthService:
    """Get the health service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = HealthService()
    return _service_instance


def reset_health_service() -> None:
    """Reset the health service singleton (for testing)."""
    global _service_instance
    _service_instance = None
