"""Tests for the hold/rest rep timer."""

import pytest

from modules.tracking.exceptions import InvalidTransitionError
from modules.tracking.models import (
    BALANCE_TIMER,
    SITTING_TIMER,
    STANDING_TIMER,
    RepTimerConfig,
    TimerEventType,
    TimerPhase,
)
from modules.tracking.rep_timer import RepTimer


def do_hold(timer: RepTimer):
    """Run one full hold and return the event of its last tick."""
    timer.begin_hold()
    event = None
    for _ in range(timer.config.hold_seconds):
        event = timer.tick()
    return event


def do_rest(timer: RepTimer):
    """Tick until the rest is over and return the final event."""
    event = None
    while timer.phase == TimerPhase.RESTING:
        event = timer.tick()
    return event


@pytest.fixture
def config() -> RepTimerConfig:
    return RepTimerConfig(
        total_sets=2,
        reps_per_set=2,
        hold_seconds=2,
        rest_seconds_short=1,
        rest_seconds_long=3,
    )


class TestPresets:
    def test_sitting_timer(self):
        assert SITTING_TIMER.total_sets == 3
        assert SITTING_TIMER.reps_per_set == 10
        assert SITTING_TIMER.hold_seconds == 3
        assert SITTING_TIMER.total_reps == 60

    def test_balance_timer(self):
        assert BALANCE_TIMER.hold_seconds == 15
        assert BALANCE_TIMER.total_reps == 6

    def test_standing_timer_single_side(self):
        assert STANDING_TIMER.sides == ("both",)
        assert STANDING_TIMER.total_reps == 24

    def test_config_is_frozen(self):
        with pytest.raises(Exception):
            SITTING_TIMER.hold_seconds = 5


class TestRepTimerFlow:
    def test_starts_idle(self, config):
        timer = RepTimer(config)
        assert timer.phase == TimerPhase.IDLE
        assert timer.tick() is None

    def test_start(self, config):
        """start should wait for the first hold on the first side."""
        timer = RepTimer(config)
        timer.start()

        state = timer.state
        assert state.phase == TimerPhase.READY
        assert state.current_set == 1
        assert state.side == "left"

    def test_hold_counts_down(self, config):
        timer = RepTimer(config)
        timer.start()
        timer.begin_hold()

        assert timer.state.remaining_seconds == 2
        assert timer.tick() is None
        assert timer.state.remaining_seconds == 1

    def test_hold_completed(self, config):
        timer = RepTimer(config)
        timer.start()

        assert do_hold(timer) == TimerEventType.HOLD_COMPLETED
        assert timer.phase == TimerPhase.READY
        assert timer.state.current_rep == 1
        assert timer.state.completed_reps == 1

    def test_side_switch_rests_short(self, config):
        """Finishing a side should switch sides and take the short rest."""
        timer = RepTimer(config)
        timer.start()
        do_hold(timer)

        assert do_hold(timer) == TimerEventType.SIDE_COMPLETED
        state = timer.state
        assert state.phase == TimerPhase.RESTING
        assert state.side == "right"
        assert state.current_rep == 0
        assert state.remaining_seconds == 1

        assert do_rest(timer) == TimerEventType.REST_COMPLETED
        assert timer.phase == TimerPhase.READY

    def test_set_completed_rests_long(self, config):
        timer = RepTimer(config)
        timer.start()
        for _ in range(2):
            do_hold(timer)
        do_rest(timer)
        do_hold(timer)

        assert do_hold(timer) == TimerEventType.SET_COMPLETED
        state = timer.state
        assert state.current_set == 2
        assert state.side == "left"
        assert state.remaining_seconds == 3

    def test_full_exercise(self, config):
        """Every hold of every side of every set should be counted once."""
        timer = RepTimer(config)
        timer.start()
        events = []
        while timer.phase != TimerPhase.COMPLETE:
            if timer.phase == TimerPhase.READY:
                events.append(do_hold(timer))
            else:
                events.append(do_rest(timer))

        assert events[-1] == TimerEventType.EXERCISE_COMPLETED
        assert events.count(TimerEventType.SET_COMPLETED) == 1
        assert events.count(TimerEventType.SIDE_COMPLETED) == 2
        assert timer.state.completed_reps == config.total_reps
        assert timer.progress() == 100

    def test_zero_rest_goes_straight_to_ready(self):
        timer = RepTimer(
            RepTimerConfig(total_sets=2, reps_per_set=1, hold_seconds=1, sides=("both",))
        )
        timer.start()

        assert do_hold(timer) == TimerEventType.SET_COMPLETED
        assert timer.phase == TimerPhase.READY
        assert timer.state.current_set == 2

    def test_progress(self, config):
        timer = RepTimer(config)
        timer.start()
        do_hold(timer)
        assert timer.progress() == pytest.approx(100 / 8)

    def test_state_is_a_copy(self, config):
        """Mutating the returned state should not affect the timer."""
        timer = RepTimer(config)
        timer.start()
        timer.state.current_set = 99
        assert timer.state.current_set == 1


class TestRepTimerTransitions:
    def test_start_twice_raises(self, config):
        timer = RepTimer(config)
        timer.start()
        with pytest.raises(InvalidTransitionError) as exc_info:
            timer.start()
        assert str(exc_info.value) == "Cannot start while ready"

    def test_begin_hold_before_start_raises(self, config):
        with pytest.raises(InvalidTransitionError):
            RepTimer(config).begin_hold()

    def test_begin_hold_while_resting_raises(self, config):
        timer = RepTimer(config)
        timer.start()
        do_hold(timer)
        do_hold(timer)
        with pytest.raises(InvalidTransitionError):
            timer.begin_hold()

    def test_pause_freezes_countdown(self, config):
        timer = RepTimer(config)
        timer.start()
        timer.begin_hold()
        timer.pause()

        assert timer.tick() is None
        assert timer.state.remaining_seconds == 2

        timer.resume()
        timer.tick()
        assert timer.state.remaining_seconds == 1

    def test_pause_while_ready_raises(self, config):
        timer = RepTimer(config)
        timer.start()
        with pytest.raises(InvalidTransitionError):
            timer.pause()

    def test_resume_when_not_paused_raises(self, config):
        timer = RepTimer(config)
        timer.start()
        timer.begin_hold()
        with pytest.raises(InvalidTransitionError):
            timer.resume()

    def test_cancel_from_any_phase(self, config):
        """cancel should return to idle, even while paused."""
        timer = RepTimer(config)
        timer.start()
        timer.begin_hold()
        timer.pause()

        timer.cancel()

        state = timer.state
        assert state.phase == TimerPhase.IDLE
        assert state.paused is False
        assert state.completed_reps == 0
        timer.start()

    def test_complete_ignores_ticks(self):
        timer = RepTimer(RepTimerConfig(total_sets=1, reps_per_set=1, hold_seconds=1, sides=("both",)))
        timer.start()
        assert do_hold(timer) == TimerEventType.EXERCISE_COMPLETED
        assert timer.tick() is None
        assert timer.phase == TimerPhase.COMPLETE
