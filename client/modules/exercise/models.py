"""
Exercise module data models.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import Field

from shared.models import QueryModel, WireModel


class ExerciseLocation(str, Enum):
    """Where an exercise is done. Used as the history filter."""

    INDOOR = "INDOOR"
    OUTDOOR = "OUTDOOR"


class WalkingExerciseRecord(WireModel):
    """A finished walk, with step and distance measurements."""

    exercise_id: int = Field(..., description="Backend exercise ID")
    duration_minutes: int = Field(..., ge=0, description="Walk duration")
    steps: int = Field(..., ge=0, description="Steps counted")
    distance_km: float = Field(..., ge=0, description="Distance walked")
    calories_burned: float = Field(..., ge=0, description="Estimated calories")
    notes: Optional[str] = None


class SimpleExerciseRecord(WireModel):
    """A finished indoor exercise with duration only."""

    exercise_id: int = Field(..., description="Backend exercise ID")
    duration_minutes: int = Field(..., ge=0, description="Exercise duration")
    notes: Optional[str] = None


class ExerciseHistoryParams(QueryModel):
    """
    Filters for the exercise history query.

    Every filter is optional; dates are YYYY-MM-DD.
    """

    exercise_type: Optional[ExerciseLocation] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
