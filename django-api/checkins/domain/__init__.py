from checkins.domain.models import CheckIn, EventState, GoalStatus, RosterChange
from checkins.domain.value_objects import (
    DEFAULT_CAPACITY,
    TEAM_IDS,
    TEAMS,
    Capacity,
    CheckInId,
    Team,
)

__all__ = [
    "CheckIn",
    "EventState",
    "GoalStatus",
    "RosterChange",
    "CheckInId",
    "Capacity",
    "Team",
    "TEAMS",
    "TEAM_IDS",
    "DEFAULT_CAPACITY",
]
