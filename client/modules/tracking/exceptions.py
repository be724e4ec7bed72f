"""
Tracking module exceptions.
"""

from shared.exceptions import TrackingError


class InvalidTransitionError(TrackingError):
    """Raised when a state machine action is not allowed in the current phase."""

    def __init__(self, action: str, phase: str):
        super().__init__(f"Cannot {action} while {phase}", state=phase)
        self.action = action
        self.details["action"] = action


class GameNotStartedError(TrackingError):
    """Raised when the checkpoint game is driven before it has a position."""

    def __init__(self):
        super().__init__("Checkpoint game has not been initialized", state="uninitialized")
