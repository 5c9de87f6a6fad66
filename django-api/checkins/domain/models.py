"""Domain models representing check-in state.

These are pure domain objects with no storage or HTTP concerns.
The Django ORM model holding the serialized snapshot is in checkins/models.py.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Self

from checkins.domain.normalization import normalize_name
from checkins.domain.value_objects import DEFAULT_CAPACITY, Capacity, CheckInId


@dataclass(frozen=True)
class CheckIn:
    """Domain representation of one attendee's check-in."""

    id: CheckInId
    display_name: str
    normalized_name: str
    team_id: str
    created_at: datetime

    def __post_init__(self) -> None:
        if self.normalized_name != normalize_name(self.display_name):
            raise ValueError("normalized_name must be derived from display_name")

    @classmethod
    def create(
        cls,
        check_in_id: CheckInId,
        display_name: str,
        team_id: str,
        created_at: datetime,
    ) -> Self:
        return cls(
            id=check_in_id,
            display_name=display_name,
            normalized_name=normalize_name(display_name),
            team_id=team_id,
            created_at=created_at,
        )


@dataclass(frozen=True)
class EventState:
    """Aggregate root: the ordered roster plus the celebration flag."""

    check_ins: tuple[CheckIn, ...] = ()
    celebrated: bool = False
    capacity: Capacity = DEFAULT_CAPACITY

    @classmethod
    def empty(cls, capacity: Capacity = DEFAULT_CAPACITY) -> Self:
        return cls(check_ins=(), celebrated=False, capacity=capacity)

    @property
    def count(self) -> int:
        return len(self.check_ins)

    def find(self, check_in_id: CheckInId) -> CheckIn | None:
        for check_in in self.check_ins:
            if check_in.id == check_in_id:
                return check_in
        return None


@dataclass(frozen=True)
class RosterChange:
    """Result of a roster command: the new state and the affected record."""

    state: EventState
    check_in: CheckIn


@dataclass(frozen=True)
class GoalStatus:
    """Outcome of evaluating the participation goal on a state."""

    reached: bool
    winners: tuple[str, ...] = ()
    just_reached: bool = False
