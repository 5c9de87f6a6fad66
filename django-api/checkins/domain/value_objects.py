"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class CheckInId:
    """Unique identifier for a CheckIn."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Positive integer representing how many check-ins an event accepts."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Capacity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Team:
    """One of the fixed teams an attendee can check in for."""

    id: str
    label: str


TEAMS: tuple[Team, ...] = (
    Team(id="water", label="Team Water Wise"),
    Team(id="zero", label="Team Net Zero"),
    Team(id="power", label="Team Renewables"),
)

TEAM_IDS: tuple[str, ...] = tuple(team.id for team in TEAMS)

DEFAULT_CAPACITY = Capacity(50)
