"""
Patient state container.

Holds the exercise session state machine and the activity stats shown on
the patient screens.

    idle --start_session--> tracking --end_session--> idle
      ^                                                 |
      +------------------- reset_session ---------------+

While tracking, update_steps / update_pain_level / update_pain_location
write scratch fields that end_session copies into the session record.
Finished sessions stay in memory only; persisting them is done separately
through the exercise and health modules.
"""

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional
from pydantic import BaseModel, Field, PrivateAttr


class SessionType(str, Enum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"


class ExerciseSession(BaseModel):
    """One tracked exercise interval."""

    id: str = Field(..., description="Start time in epoch milliseconds")
    date: str = Field(..., description="Start date, YYYY-MM-DD")
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: int = Field(default=0, description="Whole minutes, set at end_session")
    steps: int = 0
    pain_level: int = 0
    pain_location: str = ""
    notes: Optional[str] = None
    type: SessionType


class DailyStats(BaseModel):
    date: str
    total_steps: int = 0
    total_duration: int = 0
    average_pain: float = 0
    sessions: list[ExerciseSession] = Field(default_factory=list)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PatientState(BaseModel):
    """Patient exercise state with its setters."""

    current_session: Optional[ExerciseSession] = None
    daily_stats: Optional[DailyStats] = None
    weekly_stats: list[DailyStats] = Field(default_factory=list)
    monthly_stats: list[DailyStats] = Field(default_factory=list)
    is_loading: bool = False
    error: Optional[str] = None
    is_tracking: bool = False
    current_steps: int = 0
    current_pain_level: int = 0
    current_pain_location: str = ""

    _clock: Callable[[], datetime] = PrivateAttr(default_factory=lambda: _utc_now)

    def use_clock(self, clock: Callable[[], datetime]) -> None:
        """Replace the wall clock used to stamp sessions."""
        self._clock = clock

    # -------------------------------------------------------------------------
    # Session state machine
    # -------------------------------------------------------------------------

    def start_session(self, type: SessionType) -> ExerciseSession:
        """Open a new session with zeroed scratch fields, replacing any current one."""
        now = self._clock()
        self.current_session = ExerciseSession(
            id=str(int(now.timestamp() * 1000)),
            date=now.date().isoformat(),
            start_time=now,
            type=SessionType(type),
        )
        self.is_tracking = True
        self.current_steps = 0
        self.current_pain_level = 0
        self.current_pain_location = ""
        return self.current_session

    def update_session(self, **fields: Any) -> None:
        """Overwrite session fields wholesale. No-op without a session."""
        if self.current_session is not None:
            self.current_session = self.current_session.model_copy(update=fields)

    def end_session(self) -> Optional[ExerciseSession]:
        """
        Close the current session.

        Stamps the end time, rounds the elapsed wall-clock time to whole
        minutes and copies the scratch fields into the record. Without a
        current session this only stops tracking.
        """
        session = self.current_session
        if session is not None:
            session.end_time = self._clock()
            elapsed_minutes = (session.end_time - session.start_time).total_seconds() / 60
            session.duration = math.floor(elapsed_minutes + 0.5)
            session.steps = self.current_steps
            session.pain_level = self.current_pain_level
            session.pain_location = self.current_pain_location
        self.is_tracking = False
        return session

    def update_steps(self, steps: int) -> None:
        self.current_steps = steps

    def update_pain_level(self, level: int) -> None:
        self.current_pain_level = level

    def update_pain_location(self, location: str) -> None:
        self.current_pain_location = location

    def reset_session(self) -> None:
        """Discard the session and scratch fields from any state."""
        self.current_session = None
        self.is_tracking = False
        self.current_steps = 0
        self.current_pain_level = 0
        self.current_pain_location = ""

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------

    def set_daily_stats(self, stats: DailyStats) -> None:
        self.daily_stats = stats

    def set_weekly_stats(self, stats: list[DailyStats]) -> None:
        self.weekly_stats = stats

    def set_monthly_stats(self, stats: list[DailyStats]) -> None:
        self.monthly_stats = stats

    def set_loading(self, is_loading: bool) -> None:
        self.is_loading = is_loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
