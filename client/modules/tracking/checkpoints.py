"""
Outdoor walk checkpoint game.

The patient walks toward a randomly placed geofence circle. Reaching it
counts a checkpoint and places the next one further out, so each leg of the
walk is a little longer than the last. Only the geometry and bookkeeping
live here; drawing the map is up to the caller.
"""

import logging
import math
import random
from typing import Optional

from .exceptions import GameNotStartedError
from .models import Checkpoint, GameEvent, GameEventType, GeoPoint


logger = logging.getLogger(__name__)

EARTH_RADIUS_M = 6371e3
METRES_PER_DEGREE = 111000

INITIAL_PLACEMENT_DISTANCE_M = 50
PLACEMENT_DISTANCE_STEP_M = 30
CHECKPOINT_RADIUS_M = 25
DEFAULT_MAX_DISTANCE_M = 3500
MIN_MOVEMENT_M = 1


def haversine_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points, in metres."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)

    h = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def offset_point(origin: GeoPoint, distance_m: float, bearing: float) -> GeoPoint:
    """
    Move a point by distance_m along bearing (radians, 0 = north).

    Flat-earth approximation, good for the few hundred metres a checkpoint
    is placed away.
    """
    d_lat = distance_m * math.cos(bearing) / METRES_PER_DEGREE
    d_lng = distance_m * math.sin(bearing) / (
        METRES_PER_DEGREE * math.cos(math.radians(origin.lat))
    )
    return GeoPoint(lat=origin.lat + d_lat, lng=origin.lng + d_lng)


class CheckpointGame:
    """
    State of one gamified outdoor walk.

    current_distance and total_distance both grow with every accepted fix
    and are only cleared by reset().
    """

    def __init__(
        self,
        max_distance: float = DEFAULT_MAX_DISTANCE_M,
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng or random.Random()
        self.reset()
        self._max_distance = max_distance

    def reset(self) -> None:
        """Forget the walk and restore the default max distance."""
        self.position: Optional[GeoPoint] = None
        self.checkpoint: Optional[Checkpoint] = None
        self.total_distance = 0.0
        self.current_distance = 0.0
        self.checkpoint_count = 0
        self.placement_distance = INITIAL_PLACEMENT_DISTANCE_M
        self.path: list[GeoPoint] = []
        self._max_distance = DEFAULT_MAX_DISTANCE_M

    @property
    def max_distance(self) -> float:
        return self._max_distance

    def set_max_distance(self, metres: float) -> None:
        self._max_distance = metres

    @property
    def progress(self) -> float:
        """Walked share of the max distance, in percent, capped at 100."""
        if self._max_distance <= 0:
            return 100.0
        return min(100.0, self.total_distance / self._max_distance * 100)

    def init(self, position: GeoPoint) -> Checkpoint:
        """Start the walk at position and place the first checkpoint."""
        self.position = position
        self.path = [position]
        return self._place_checkpoint()

    def update_position(self, position: GeoPoint) -> list[GameEvent]:
        """
        Feed a new position fix.

        Movements shorter than a metre are treated as GPS jitter and not
        added to the distance.

        Returns:
            A checkpoint_reached event if the fix lands inside the current
            checkpoint, then always a location_update event.
        """
        if self.position is None:
            raise GameNotStartedError()

        moved = haversine_distance(self.position, position)
        if moved >= MIN_MOVEMENT_M:
            self.total_distance += moved
            self.current_distance += moved
            self.path.append(position)
        self.position = position

        events = []
        if self.checkpoint and self._inside(self.checkpoint, position):
            events.append(self._reach_checkpoint())
        events.append(self._location_update())
        return events

    def _inside(self, checkpoint: Checkpoint, position: GeoPoint) -> bool:
        return haversine_distance(position, checkpoint.center) <= checkpoint.radius

    def _place_checkpoint(self) -> Checkpoint:
        bearing = self._rng.uniform(0, 2 * math.pi)
        center = offset_point(self.position, self.placement_distance, bearing)
        self.checkpoint = Checkpoint(center=center, radius=CHECKPOINT_RADIUS_M)
        return self.checkpoint

    def _reach_checkpoint(self) -> GameEvent:
        self.checkpoint_count += 1
        self.placement_distance += PLACEMENT_DISTANCE_STEP_M
        self._place_checkpoint()
        logger.debug(
            f"Checkpoint {self.checkpoint_count} reached, "
            f"next one {self.placement_distance}m away"
        )
        return GameEvent(
            type=GameEventType.CHECKPOINT_REACHED,
            payload={
                "checkpointCount": self.checkpoint_count,
                "newRadius": self.placement_distance,
                "totalDistance": round(self.total_distance),
            },
        )

    def _location_update(self) -> GameEvent:
        return GameEvent(
            type=GameEventType.LOCATION_UPDATE,
            payload={
                "distance": round(self.total_distance),
                "currentDistance": round(self.current_distance),
                "progress": self.progress,
                "checkpoints": self.checkpoint_count,
                "position": self.position.model_dump(),
            },
        )
