"""Check-in service - the command surface over the pure domain core.

Services:
- Depend only on interfaces (stores)
- Load and repair the stored snapshot before every operation
- Run the roster command, evaluate the goal, persist the result
- Return domain models or raise domain errors
"""

import logging
from dataclasses import dataclass

from django.conf import settings

from checkins.domain import roster
from checkins.domain.errors import AtCapacityError, CheckInNotFoundError
from checkins.domain.goal import (
    acknowledge_goal,
    compute_team_tallies,
    compute_winners,
    evaluate_goal,
    is_full,
)
from checkins.domain.models import CheckIn, EventState, GoalStatus, RosterChange
from checkins.domain.normalization import team_label
from checkins.domain.snapshot import rehydrate, serialize, to_json
from checkins.domain.value_objects import Capacity, CheckInId
from checkins.stores.interfaces import SnapshotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    """What a caller hands to the presentation layer after a command."""

    state: EventState
    goal: GoalStatus
    check_in: CheckIn | None = None


class CheckInService:
    """Service for check-in commands and roster queries."""

    def __init__(self, store: SnapshotStore, capacity: Capacity) -> None:
        self._store = store
        self._capacity = capacity

    @property
    def capacity(self) -> Capacity:
        return self._capacity

    def _load(self) -> EventState:
        return rehydrate(self._store.load(), self._capacity)

    def _commit(self, state: EventState, check_in: CheckIn | None = None) -> CommandOutcome:
        goal = evaluate_goal(state)
        state = acknowledge_goal(state)
        self._store.save(serialize(state))
        if goal.just_reached:
            winners = " & ".join(team_label(team_id) for team_id in goal.winners)
            logger.info(f"Goal reached at {state.count}/{self._capacity}, winners: {winners}")
        return CommandOutcome(state=state, goal=goal, check_in=check_in)

    @staticmethod
    def _parse_id(check_in_id: str) -> CheckInId:
        try:
            return CheckInId.from_string(check_in_id)
        except (TypeError, ValueError):
            raise CheckInNotFoundError(check_in_id) from None

    def _apply(self, change: RosterChange) -> CommandOutcome:
        return self._commit(change.state, change.check_in)

    def check_in(self, name: str | None, team: str | None) -> CommandOutcome:
        """Check an attendee in for a team.

        Raises:
            EmptyNameError, InvalidTeamError, AtCapacityError, DuplicateEntryError
        """
        raw = self._store.load()
        state = rehydrate(raw, self._capacity)
        try:
            change = roster.check_in(state, name, team)
        except AtCapacityError:
            # The stored roster may already be full without having been
            # acknowledged, e.g. after an external write.
            settled = serialize(acknowledge_goal(state))
            if settled != raw:
                self._store.save(settled)
            logger.warning(f"Rejected check-in, event at capacity {self._capacity}")
            raise
        outcome = self._apply(change)
        logger.info(
            f"Checked in {change.check_in.id} for {change.check_in.team_id} "
            f"({outcome.state.count}/{self._capacity})"
        )
        return outcome

    def edit(self, check_in_id: str, name: str | None, team: str | None) -> CommandOutcome:
        """Change the name and team of an existing check-in.

        Raises:
            CheckInNotFoundError, EmptyNameError, InvalidTeamError, DuplicateEntryError
        """
        change = roster.edit_check_in(self._load(), self._parse_id(check_in_id), name, team)
        logger.info(f"Edited check-in {change.check_in.id}")
        return self._apply(change)

    def remove(self, check_in_id: str) -> CommandOutcome:
        """Remove a check-in.

        Raises:
            CheckInNotFoundError: If the id is malformed or unknown.
        """
        change = roster.remove_check_in(self._load(), self._parse_id(check_in_id))
        logger.info(f"Removed check-in {change.check_in.id}")
        return self._apply(change)

    def remove_last(self) -> CommandOutcome:
        """Remove the most recent check-in.

        Raises:
            CheckInNotFoundError: If there are no check-ins.
        """
        change = roster.remove_last_check_in(self._load())
        logger.info(f"Removed latest check-in {change.check_in.id}")
        return self._apply(change)

    def reset(self) -> CommandOutcome:
        """Clear every check-in and the celebration flag."""
        outcome = self._commit(roster.reset(self._load()))
        logger.info("Reset all check-ins")
        return outcome

    def current(self) -> EventState:
        return self._load()

    def tallies(self) -> dict[str, int]:
        return compute_team_tallies(self._load())

    def winners(self) -> tuple[str, ...]:
        return compute_winners(self._load())

    def is_full(self) -> bool:
        return is_full(self._load())

    def goal(self) -> GoalStatus:
        return evaluate_goal(self._load())

    def export(self) -> str:
        """Return the current roster as indented JSON."""
        return to_json(self._load())


def get_checkin_service() -> CheckInService:
    """Build the service from Django settings."""
    from checkins.stores.django_store import DjangoSnapshotStore

    config = settings.CHECKINS
    return CheckInService(
        store=DjangoSnapshotStore(config["STORAGE_KEY"]),
        capacity=Capacity(config["CAPACITY"]),
    )
