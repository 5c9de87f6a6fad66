"""Domain error codes for the checkins module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EMPTY_NAME = "EMPTY_NAME"
    INVALID_TEAM = "INVALID_TEAM"
    AT_CAPACITY = "AT_CAPACITY"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EmptyNameError(DomainError):
    """Raised when the attendee name is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_NAME,
            message="Please enter a name.",
        )


class InvalidTeamError(DomainError):
    """Raised when the team does not resolve to one of the fixed teams."""

    def __init__(self, team: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TEAM,
            message="Please select a team.",
        )
        self.team = team


class AtCapacityError(DomainError):
    """Raised when the roster already holds `capacity` check-ins."""

    def __init__(self, capacity: int) -> None:
        super().__init__(
            code=ErrorCode.AT_CAPACITY,
            message=f"Event is at capacity ({capacity}/{capacity}).",
        )
        self.capacity = capacity


class DuplicateEntryError(DomainError):
    """Raised when the same normalized name is already checked in for the team."""

    def __init__(self, name: str, team_label: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_ENTRY,
            message=f"{name} is already checked in for {team_label}.",
        )
        self.name = name
        self.team_label = team_label


class CheckInNotFoundError(DomainError):
    """Raised when a check-in is not found."""

    def __init__(self, check_in_id: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="Check-in not found.",
        )
        self.check_in_id = check_in_id
