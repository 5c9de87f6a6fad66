"""User-facing messages for command outcomes."""

from checkins.domain.models import CheckIn, EventState, GoalStatus
from checkins.domain.normalization import team_label


def welcome(check_in: CheckIn) -> str:
    return f"Welcome, {check_in.display_name} from {team_label(check_in.team_id)}!"


def updated(check_in: CheckIn) -> str:
    return f"Updated: {check_in.display_name} ({team_label(check_in.team_id)})"


def removed(check_in: CheckIn) -> str:
    return f"Removed: {check_in.display_name} ({team_label(check_in.team_id)})"


def reset_done() -> str:
    return "Reset: all check-ins cleared."


def celebration_banner(state: EventState, goal: GoalStatus) -> str | None:
    """Banner text while the goal is reached, otherwise None."""
    if not goal.reached:
        return None
    capacity = state.capacity.value
    winners = " & ".join(team_label(team_id) for team_id in goal.winners)
    return f"Goal reached! {capacity}/{capacity} checked in. Winning team: {winners}!"
