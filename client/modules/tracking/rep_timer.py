"""
Hold/rest rep timer for the indoor measurement exercises.

An explicit state machine driven by an external one-second tick, so it can
be run by any clock (a UI timer, an asyncio loop, a test) and never owns a
timer itself.

    idle --start--> ready --begin_hold--> holding --tick*--> ready
                                              |                 ^
                                              +--> resting -----+
                                              +--> complete

pause()/resume() freeze the countdown; cancel() returns to idle from
anywhere.
"""

import logging
from typing import Optional

from .exceptions import InvalidTransitionError
from .models import RepTimerConfig, RepTimerState, TimerEventType, TimerPhase


logger = logging.getLogger(__name__)


class RepTimer:
    """Rep counter with hold and rest countdowns."""

    def __init__(self, config: RepTimerConfig):
        self._config = config
        self._state = RepTimerState()

    @property
    def config(self) -> RepTimerConfig:
        return self._config

    @property
    def state(self) -> RepTimerState:
        """A copy of the current state."""
        return self._state.model_copy()

    @property
    def phase(self) -> TimerPhase:
        return self._state.phase

    def start(self) -> None:
        """Begin the first set on the first side."""
        if self._state.phase != TimerPhase.IDLE:
            raise InvalidTransitionError("start", self._state.phase.value)
        self._state = RepTimerState(
            phase=TimerPhase.READY,
            current_set=1,
            side=self._config.sides[0],
        )

    def begin_hold(self) -> None:
        """Start the hold countdown for the next rep."""
        if self._state.phase != TimerPhase.READY:
            raise InvalidTransitionError("begin hold", self._state.phase.value)
        self._state.phase = TimerPhase.HOLDING
        self._state.remaining_seconds = self._config.hold_seconds

    def pause(self) -> None:
        if self._state.phase not in (TimerPhase.HOLDING, TimerPhase.RESTING):
            raise InvalidTransitionError("pause", self._state.phase.value)
        self._state.paused = True

    def resume(self) -> None:
        if not self._state.paused:
            raise InvalidTransitionError("resume", self._state.phase.value)
        self._state.paused = False

    def cancel(self) -> None:
        """Abandon the exercise. Allowed in any phase."""
        if self._state.phase != TimerPhase.IDLE:
            logger.debug(f"Rep timer cancelled at set {self._state.current_set}")
        self._state = RepTimerState()

    def tick(self) -> Optional[TimerEventType]:
        """
        Advance the running countdown by one second.

        Returns:
            The event the tick caused, or None. Ticks while idle, ready,
            complete or paused do nothing.
        """
        if self._state.paused:
            return None
        if self._state.phase == TimerPhase.HOLDING:
            return self._tick_hold()
        if self._state.phase == TimerPhase.RESTING:
            return self._tick_rest()
        return None

    def progress(self) -> float:
        """Share of all holds finished, in percent."""
        return self._state.completed_reps / self._config.total_reps * 100

    def _tick_hold(self) -> Optional[TimerEventType]:
        state = self._state
        state.remaining_seconds -= 1
        if state.remaining_seconds > 0:
            return None

        state.current_rep += 1
        state.completed_reps += 1
        if state.current_rep < self._config.reps_per_set:
            state.phase = TimerPhase.READY
            return TimerEventType.HOLD_COMPLETED

        side_index = self._config.sides.index(state.side)
        if side_index + 1 < len(self._config.sides):
            state.side = self._config.sides[side_index + 1]
            state.current_rep = 0
            self._rest(self._config.rest_seconds_short)
            return TimerEventType.SIDE_COMPLETED

        if state.current_set >= self._config.total_sets:
            state.phase = TimerPhase.COMPLETE
            state.remaining_seconds = 0
            logger.debug("Rep timer complete")
            return TimerEventType.EXERCISE_COMPLETED

        state.current_set += 1
        state.side = self._config.sides[0]
        state.current_rep = 0
        self._rest(self._config.rest_seconds_long)
        return TimerEventType.SET_COMPLETED

    def _tick_rest(self) -> Optional[TimerEventType]:
        self._state.remaining_seconds -= 1
        if self._state.remaining_seconds > 0:
            return None
        self._state.phase = TimerPhase.READY
        return TimerEventType.REST_COMPLETED

    def _rest(self, seconds: int) -> None:
        if seconds > 0:
            self._state.phase = TimerPhase.RESTING
            self._state.remaining_seconds = seconds
        else:
            self._state.phase = TimerPhase.READY
            self._state.remaining_seconds = 0
