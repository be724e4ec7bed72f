"""
Exercise service implementation.
"""

from typing import Any, Optional, Union

from shared.endpoints import ExerciseEndpoints, with_query
from shared.service import BaseApiService

from .exceptions import ExerciseApiError
from .interfaces import IExerciseService
from .models import ExerciseHistoryParams, SimpleExerciseRecord, WalkingExerciseRecord


class ExerciseService(BaseApiService, IExerciseService):
    """Implementation of the exercise service."""

    error_class = ExerciseApiError

    async def get_exercise_list(self) -> dict[str, Any]:
        envelope = await self._api.get(ExerciseEndpoints.LIST)
        return self._unwrap(envelope, "Failed to get exercise list")

    async def get_indoor_exercise_status(self) -> dict[str, Any]:
        envelope = await self._api.get(ExerciseEndpoints.INDOOR_STATUS)
        return self._unwrap(envelope, "Failed to get indoor exercise status")

    async def get_outdoor_exercise_status(self) -> dict[str, Any]:
        envelope = await self._api.get(ExerciseEndpoints.OUTDOOR_STATUS)
        return self._unwrap(envelope, "Failed to get outdoor exercise status")

    async def record_walking_exercise(
        self, record: Union[WalkingExerciseRecord, dict[str, Any]]
    ) -> Any:
        envelope = await self._api.post(
            ExerciseEndpoints.RECORD_WALKING, WalkingExerciseRecord.wire_body(record)
        )
        return self._unwrap(envelope, "Failed to record walking exercise")

    async def record_simple_exercise(
        self, record: Union[SimpleExerciseRecord, dict[str, Any]]
    ) -> Any:
        envelope = await self._api.post(
            ExerciseEndpoints.RECORD_SIMPLE, SimpleExerciseRecord.wire_body(record)
        )
        return self._unwrap(envelope, "Failed to record simple exercise")

    async def get_exercise_history(
        self,
        params: Optional[Union[ExerciseHistoryParams, dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        query = ExerciseHistoryParams.wire_body(params or {})
        path = with_query(
            ExerciseEndpoints.HISTORY,
            exerciseType=query.get("exerciseType"),
            startDate=query.get("startDate"),
            endDate=query.get("endDate"),
        )
        envelope = await self._api.get(path)
        return self._unwrap(envelope, "Failed to get exercise history")


# Module-level instance getter
_service_instance: Optional[ExerciseService] = None


def get_exercise_service() -> ExerciseService:
    """Get the exercise service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ExerciseService()
    return _service_instance


def reset_exercise_service() -> None:
    """Reset the exercise service singleton (for testing)."""
    global _service_instance
    _service_instance = None
