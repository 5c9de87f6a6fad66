"""Validation rules applied before a roster mutation is accepted.

Each rule either returns the cleaned value or raises the matching
DomainError. Rules never modify state.
"""

from checkins.domain.errors import (
    AtCapacityError,
    DuplicateEntryError,
    EmptyNameError,
    InvalidTeamError,
)
from checkins.domain.models import EventState
from checkins.domain.normalization import (
    clean_display_name,
    is_known_team,
    normalize_name,
    resolve_team_id,
    team_label,
)
from checkins.domain.value_objects import CheckInId


def require_name(raw: str | None) -> str:
    """Return the display name, or raise EmptyNameError if it is blank."""
    name = clean_display_name(raw)
    if not name:
        raise EmptyNameError()
    return name


def require_team(raw: str | None) -> str:
    """Return the canonical team id, or raise InvalidTeamError."""
    team_id = resolve_team_id(raw)
    if not is_known_team(team_id):
        raise InvalidTeamError(team_id)
    return team_id


def require_room(state: EventState) -> None:
    if state.count >= state.capacity.value:
        raise AtCapacityError(state.capacity.value)


def is_duplicate(
    state: EventState,
    name: str,
    team_id: str,
    exclude: CheckInId | None = None,
) -> bool:
    """True if another record has the same normalized name on the same team."""
    key = normalize_name(name)
    return any(
        check_in.normalized_name == key and check_in.team_id == team_id
        for check_in in state.check_ins
        if check_in.id != exclude
    )


def require_unique(
    state: EventState,
    name: str,
    team_id: str,
    exclude: CheckInId | None = None,
) -> None:
    if is_duplicate(state, name, team_id, exclude=exclude):
        raise DuplicateEntryError(name, team_label(team_id))
