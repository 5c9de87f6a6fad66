"""Name and team normalization.

Pure functions shared by validation, duplicate detection and rehydration.
"""

import re

from checkins.domain.value_objects import TEAMS

_WHITESPACE = re.compile(r"\s+")

_TEAMS_BY_ID = {team.id: team for team in TEAMS}
_TEAM_IDS_BY_LABEL = {team.label: team.id for team in TEAMS}


def normalize_name(raw: str | None) -> str:
    """Trim, collapse whitespace runs to one space and lowercase."""
    return _WHITESPACE.sub(" ", (raw or "").strip()).lower()


def clean_display_name(raw: str | None) -> str:
    """Display form of a name: outer whitespace removed, inner spacing kept."""
    return (raw or "").strip()


def resolve_team_id(raw: str | None) -> str:
    """Map a team id or display label to the canonical team id.

    Unrecognized input is returned as-is (trimmed) so validation can
    reject it; it is never coerced to a default team.
    """
    value = (raw or "").strip()
    if value in _TEAMS_BY_ID:
        return value
    return _TEAM_IDS_BY_LABEL.get(value, value)


def is_known_team(team_id: str) -> bool:
    return team_id in _TEAMS_BY_ID


def team_label(team_id: str) -> str:
    """Display label for a team id, or the id itself when unknown."""
    team = _TEAMS_BY_ID.get(team_id)
    return team.label if team else team_id
