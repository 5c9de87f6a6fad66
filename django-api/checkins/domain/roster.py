"""Roster commands: check in, edit, remove and reset.

Every command takes an EventState and returns a new one. The input
snapshot is never modified, so a caller can keep the previous state for
comparison or undo. Rejections are raised as DomainError subclasses.
"""

from dataclasses import replace
from datetime import datetime, timezone

from checkins.domain.errors import CheckInNotFoundError
from checkins.domain.models import CheckIn, EventState, RosterChange
from checkins.domain.normalization import normalize_name
from checkins.domain.rules import require_name, require_room, require_team, require_unique
from checkins.domain.value_objects import CheckInId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _settle_celebration(state: EventState) -> EventState:
    # A roster below capacity can never be celebrated.
    if state.celebrated and state.count < state.capacity.value:
        return replace(state, celebrated=False)
    return state


def check_in(
    state: EventState,
    name: str | None,
    team_raw: str | None,
    *,
    now: datetime | None = None,
    check_in_id: CheckInId | None = None,
) -> RosterChange:
    """Append a new check-in.

    Raises:
        EmptyNameError: If the trimmed name is empty.
        InvalidTeamError: If the team does not resolve to a known team.
        AtCapacityError: If the roster is already full.
        DuplicateEntryError: If the name is already checked in for the team.
        ValueError: If an injected `check_in_id` is already in use.
    """
    if check_in_id is not None and state.find(check_in_id) is not None:
        raise ValueError(f"Check-in id {check_in_id} is already in use")

    display_name = require_name(name)
    team_id = require_team(team_raw)
    require_room(state)
    require_unique(state, display_name, team_id)

    record = CheckIn.create(
        check_in_id=check_in_id or CheckInId.generate(),
        display_name=display_name,
        team_id=team_id,
        created_at=now or utc_now(),
    )
    new_state = replace(state, check_ins=state.check_ins + (record,))
    return RosterChange(state=new_state, check_in=record)


def edit_check_in(
    state: EventState,
    check_in_id: CheckInId,
    name: str | None,
    team_raw: str | None,
) -> RosterChange:
    """Replace the name and team of an existing check-in in place.

    The record keeps its id, creation time and position.

    Raises:
        CheckInNotFoundError: If no record has the given id.
        EmptyNameError: If the trimmed name is empty.
        InvalidTeamError: If the team does not resolve to a known team.
        DuplicateEntryError: If another record has the same name and team.
    """
    current = state.find(check_in_id)
    if current is None:
        raise CheckInNotFoundError(str(check_in_id))

    display_name = require_name(name)
    team_id = require_team(team_raw)
    require_unique(state, display_name, team_id, exclude=check_in_id)

    updated = replace(
        current,
        display_name=display_name,
        normalized_name=normalize_name(display_name),
        team_id=team_id,
    )
    check_ins = tuple(
        updated if check_in.id == check_in_id else check_in
        for check_in in state.check_ins
    )
    new_state = _settle_celebration(replace(state, check_ins=check_ins))
    return RosterChange(state=new_state, check_in=updated)


def remove_check_in(state: EventState, check_in_id: CheckInId) -> RosterChange:
    """Remove a check-in and return it alongside the new state.

    Raises:
        CheckInNotFoundError: If no record has the given id.
    """
    removed = state.find(check_in_id)
    if removed is None:
        raise CheckInNotFoundError(str(check_in_id))

    check_ins = tuple(c for c in state.check_ins if c.id != check_in_id)
    new_state = _settle_celebration(replace(state, check_ins=check_ins))
    return RosterChange(state=new_state, check_in=removed)


def remove_last_check_in(state: EventState) -> RosterChange:
    """Remove the most recent check-in.

    Raises:
        CheckInNotFoundError: If the roster is empty.
    """
    if not state.check_ins:
        raise CheckInNotFoundError()
    return remove_check_in(state, state.check_ins[-1].id)


def reset(state: EventState) -> EventState:
    """Return a fresh empty state with the same capacity."""
    return EventState.empty(state.capacity)
