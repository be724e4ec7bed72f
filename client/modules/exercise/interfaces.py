"""
Exercise module interface.
"""

from typing import Any, Optional, Protocol, Union, runtime_checkable

from .models import ExerciseHistoryParams, SimpleExerciseRecord, WalkingExerciseRecord


@runtime_checkable
class IExerciseService(Protocol):
    """
    Interface for exercise catalogue, status and record operations.
    """

    async def get_exercise_list(self) -> dict[str, Any]:
        """
        Get today's exercise catalogue.

        Returns:
            requiredExercises, recommendedExercises and a completion summary

        Raises:
            ExerciseApiError: If the backend reports failure
        """
        ...

    async def get_indoor_exercise_status(self) -> dict[str, Any]:
        """Get today's indoor progress and per-exercise completion."""
        ...

    async def get_outdoor_exercise_status(self) -> dict[str, Any]:
        """Get the best distance and yesterday's outdoor record."""
        ...

    async def record_walking_exercise(
        self, record: Union[WalkingExerciseRecord, dict[str, Any]]
    ) -> Any:
        """Persist a finished walk."""
        ...

    async def record_simple_exercise(
        self, record: Union[SimpleExerciseRecord, dict[str, Any]]
    ) -> Any:
        """Persist a finished indoor exercise."""
        ...

    async def get_exercise_history(
        self,
        params: Optional[Union[ExerciseHistoryParams, dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        """
        Get exercise records and totals, optionally filtered.

        Args:
            params: exerciseType / startDate / endDate filters; unset
                    filters are left out of the query string

        Returns:
            statistics and exerciseRecords
        """
        ...
