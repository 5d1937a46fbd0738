"""Activity and goal records and the activity types they refer to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ActivityType(IntEnum):
    """Kinds of activity; the integer value is the code stored on disk."""

    RUNNING = 0
    WALKING = 1
    SWIMMING = 2
    CARDIO = 3
    STRENGTH = 4
    UNKNOWN = 5

    def display_name(self) -> str:
        """Human-readable name, e.g. ``"Running"``."""
        return self.name.capitalize()

    def has_distance(self) -> bool:
        """Whether activities of this type record a distance."""
        return self in _DISTANCE_TYPES


_DISTANCE_TYPES = frozenset(
    {ActivityType.RUNNING, ActivityType.WALKING, ActivityType.SWIMMING}
)

# Types a user can pick, in menu order.
SELECTABLE_TYPES = (
    ActivityType.RUNNING,
    ActivityType.WALKING,
    ActivityType.SWIMMING,
    ActivityType.CARDIO,
    ActivityType.STRENGTH,
)


def activity_type_from_code(code: int) -> ActivityType:
    """Map a stored integer code to a type; out-of-range codes become UNKNOWN."""
    if ActivityType.RUNNING <= code <= ActivityType.STRENGTH:
        return ActivityType(code)
    return ActivityType.UNKNOWN


@dataclass
class Activity:
    """A single recorded activity.

    ``date`` is ``YYYY-MM-DD``, ``duration`` is in minutes and ``distance``
    in kilometres.
    """

    kind: ActivityType = ActivityType.UNKNOWN
    date: str = ""
    duration: float = 0.0
    distance: float = 0.0
    repetitions: int = 0


@dataclass
class Goal:
    """A target to reach for one activity type before a deadline."""

    kind: ActivityType = ActivityType.UNKNOWN
    description: str = ""
    deadline: str = ""
    target_distance: float = 0.0
    target_duration: float = 0.0
    target_reps: int = 0
    achieved: bool = False