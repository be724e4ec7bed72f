"""
Tracking module.

Client-side exercise state machines. These make no backend calls; a caller
submits the finished result through the exercise or health module.

Public API:
- RepTimer: Hold/rest rep counter for indoor exercises
- CheckpointGame: Outdoor walk checkpoint game
- haversine_distance, offset_point: Geometry helpers
- Models: RepTimerConfig (+ presets), RepTimerState, TimerPhase,
  TimerEventType, GeoPoint, Checkpoint, GameEvent, GameEventType
- Exceptions: InvalidTransitionError, GameNotStartedError
"""

from .models import (
    RepTimerConfig,
    RepTimerState,
    TimerPhase,
    TimerEventType,
    SITTING_TIMER,
    BALANCE_TIMER,
    STANDING_TIMER,
    GeoPoint,
    Checkpoint,
    GameEvent,
    GameEventType,
)
from .exceptions import InvalidTransitionError, GameNotStartedError
from .rep_timer import RepTimer
from .checkpoints import CheckpointGame, haversine_distance, offset_point

__all__ = [
    "RepTimer",
    "RepTimerConfig",
    "RepTimerState",
    "TimerPhase",
    "TimerEventType",
    "SITTING_TIMER",
    "BALANCE_TIMER",
    "STANDING_TIMER",
    "CheckpointGame",
    "haversine_distance",
    "offset_point",
    "GeoPoint",
    "Checkpoint",
    "GameEvent",
    "GameEventType",
    "InvalidTransitionError",
    "GameNotStartedError",
]
