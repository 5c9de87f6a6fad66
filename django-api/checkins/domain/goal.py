"""Goal evaluation: team tallies, winners and the one-shot celebration flag."""

from dataclasses import replace

from checkins.domain.models import EventState, GoalStatus
from checkins.domain.value_objects import TEAM_IDS


def compute_team_tallies(state: EventState) -> dict[str, int]:
    """Return the check-in count for every team, including empty ones."""
    tallies = dict.fromkeys(TEAM_IDS, 0)
    for check_in in state.check_ins:
        if check_in.team_id in tallies:
            tallies[check_in.team_id] += 1
    return tallies


def compute_winners(state: EventState) -> tuple[str, ...]:
    """Return every team whose tally equals the maximum.

    Ties are kept, never broken. Order follows the fixed team order.
    """
    tallies = compute_team_tallies(state)
    top = max(tallies.values())
    return tuple(team_id for team_id, count in tallies.items() if count == top)


def is_full(state: EventState) -> bool:
    return state.count >= state.capacity.value


def remaining_spots(state: EventState) -> int:
    return max(0, state.capacity.value - state.count)


def progress_percent(state: EventState) -> int:
    """Share of capacity filled, rounded half up and capped at 100."""
    percent = int(state.count * 100 / state.capacity.value + 0.5)
    return min(100, percent)


def evaluate_goal(state: EventState) -> GoalStatus:
    """Evaluate the goal on a state.

    `just_reached` is true only when the roster is full and the state has
    not yet been acknowledged as celebrated; callers use it to fire
    one-shot effects and must then persist `acknowledge_goal(state)`.
    """
    if state.count != state.capacity.value:
        return GoalStatus(reached=False)
    return GoalStatus(
        reached=True,
        winners=compute_winners(state),
        just_reached=not state.celebrated,
    )


def acknowledge_goal(state: EventState) -> EventState:
    """Return the state with `celebrated` settled from the roster length."""
    celebrated = is_full(state)
    if celebrated == state.celebrated:
        return state
    return replace(state, celebrated=celebrated)
