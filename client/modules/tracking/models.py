"""
Tracking module data models.

Configuration, state snapshots and events of the client-side exercise
state machines. Nothing here is sent to the backend.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class TimerPhase(str, Enum):
    """Phases of the hold/rest rep timer."""

    IDLE = "idle"          # Not started, or cancelled
    READY = "ready"        # Waiting for the patient to start the next hold
    HOLDING = "holding"    # Hold countdown running
    RESTING = "resting"    # Rest countdown running
    COMPLETE = "complete"  # All sets done


class TimerEventType(str, Enum):
    """What a tick caused, if anything."""

    HOLD_COMPLETED = "hold_completed"
    SIDE_COMPLETED = "side_completed"
    SET_COMPLETED = "set_completed"
    REST_COMPLETED = "rest_completed"
    EXERCISE_COMPLETED = "exercise_completed"


class RepTimerConfig(BaseModel):
    """
    Shape of one hold/rest exercise.

    Each set runs every side in order; each side is reps_per_set holds.
    The short rest separates sides, the long rest separates sets.
    """

    total_sets: int = Field(..., ge=1, description="Number of sets")
    reps_per_set: int = Field(..., ge=1, description="Holds per side per set")
    hold_seconds: int = Field(..., ge=1, description="Length of one hold")
    rest_seconds_short: int = Field(default=0, ge=0, description="Rest when switching side")
    rest_seconds_long: int = Field(default=0, ge=0, description="Rest between sets")
    sides: tuple[str, ...] = Field(
        default=("left", "right"),
        min_length=1,
        description="Sides worked in order within a set",
    )

    model_config = {"frozen": True}

    @property
    def total_reps(self) -> int:
        return self.total_sets * self.reps_per_set * len(self.sides)


# Presets taken from the indoor measurement exercises
SITTING_TIMER = RepTimerConfig(
    total_sets=3,
    reps_per_set=10,
    hold_seconds=3,
    rest_seconds_short=15,
    rest_seconds_long=30,
)
BALANCE_TIMER = RepTimerConfig(
    total_sets=3,
    reps_per_set=1,
    hold_seconds=15,
    rest_seconds_short=10,
    rest_seconds_long=30,
)
STANDING_TIMER = RepTimerConfig(
    total_sets=3,
    reps_per_set=8,
    hold_seconds=1,
    rest_seconds_long=60,
    sides=("both",),
)


class RepTimerState(BaseModel):
    """Snapshot of the rep timer."""

    phase: TimerPhase = TimerPhase.IDLE
    paused: bool = False
    current_set: int = Field(default=0, description="1-indexed set, 0 before start")
    side: Optional[str] = Field(None, description="Side currently worked")
    current_rep: int = Field(default=0, description="Holds finished on this side in this set")
    completed_reps: int = Field(default=0, description="Holds finished overall")
    remaining_seconds: int = Field(default=0, description="Seconds left in the countdown")


class GeoPoint(BaseModel):
    """A WGS84 position."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    model_config = {"frozen": True}


class Checkpoint(BaseModel):
    """A geofence circle the patient walks to."""

    center: GeoPoint
    radius: float = Field(..., gt=0, description="Radius in metres")

    model_config = {"frozen": True}


class GameEventType(str, Enum):
    LOCATION_UPDATE = "location_update"
    CHECKPOINT_REACHED = "checkpoint_reached"


class GameEvent(BaseModel):
    """Event emitted by the checkpoint game after a position update."""

    type: GameEventType = Field(..., description="Event type")
    payload: dict[str, Any] = Field(default_factory=dict, description="Event data")
