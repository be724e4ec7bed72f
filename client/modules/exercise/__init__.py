"""
Exercise module.

Exercise catalogue, indoor/outdoor status, exercise records and history.

Public API:
- IExerciseService: Interface for exercise operations
- ExerciseService: Implementation
- WalkingExerciseRecord, SimpleExerciseRecord, ExerciseHistoryParams: Request models
- ExerciseLocation: History filter enum
- ExerciseApiError: Raised when an exercise endpoint fails
"""

from .interfaces import IExerciseService
from .models import (
    ExerciseLocation,
    WalkingExerciseRecord,
    SimpleExerciseRecord,
    ExerciseHistoryParams,
)
from .exceptions import ExerciseApiError
from .service import ExerciseService, get_exercise_service, reset_exercise_service

__all__ = [
    "IExerciseService",
    "ExerciseService",
    "get_exercise_service",
    "reset_exercise_service",
    "ExerciseLocation",
    "WalkingExerciseRecord",
    "SimpleExerciseRecord",
    "ExerciseHistoryParams",
    "ExerciseApiError",
]
