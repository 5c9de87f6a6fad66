"""Serialization of EventState to a JSON-compatible blob and back.

Rehydration never trusts the stored blob. Records that cannot be repaired
are dropped, missing ids are regenerated, normalized names are recomputed,
the roster is truncated to capacity and `celebrated` is derived from the
repaired length. A blob that cannot be read at all yields an empty state.

Blobs written by the earlier browser build (`checkins`, `nameOriginal`,
`teamKey`, `timeISO`) are read as well.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from checkins.domain.models import CheckIn, EventState
from checkins.domain.normalization import (
    clean_display_name,
    is_known_team,
    normalize_name,
    resolve_team_id,
)
from checkins.domain.value_objects import DEFAULT_CAPACITY, Capacity, CheckInId

logger = logging.getLogger(__name__)

_LIST_KEYS = ("checkIns", "checkins")
_NAME_KEYS = ("displayName", "nameOriginal")
_TEAM_KEYS = ("teamId", "teamKey")
_TIME_KEYS = ("createdAt", "timeISO")


def serialize(state: EventState) -> dict[str, Any]:
    """Return a JSON-serializable blob mirroring the state."""
    return {
        "checkIns": [
            {
                "id": str(check_in.id),
                "displayName": check_in.display_name,
                "normalizedName": check_in.normalized_name,
                "teamId": check_in.team_id,
                "createdAt": check_in.created_at.isoformat(),
            }
            for check_in in state.check_ins
        ],
        "celebrated": state.celebrated,
    }


def to_json(state: EventState) -> str:
    return json.dumps(serialize(state), indent=2)


def from_json(text: str | None, capacity: Capacity = DEFAULT_CAPACITY) -> EventState:
    if not text:
        return EventState.empty(capacity)
    try:
        blob = json.loads(text)
    except ValueError:
        logger.warning("Stored check-in snapshot is not valid JSON, starting empty")
        return EventState.empty(capacity)
    return rehydrate(blob, capacity)


def _first(entry: dict, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in entry:
            return entry[key]
    return None


def _parse_id(raw: Any, used: set[CheckInId]) -> CheckInId:
    if isinstance(raw, str):
        try:
            check_in_id = CheckInId.from_string(raw)
        except ValueError:
            pass
        else:
            if check_in_id not in used:
                return check_in_id
    check_in_id = CheckInId.generate()
    while check_in_id in used:
        check_in_id = CheckInId.generate()
    return check_in_id


def _parse_time(raw: Any, fallback: datetime) -> datetime:
    if not isinstance(raw, str):
        return fallback
    try:
        # "Z" suffix as produced by JavaScript's toISOString()
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return fallback
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def rehydrate(blob: Any, capacity: Capacity = DEFAULT_CAPACITY) -> EventState:
    """Rebuild a valid EventState from an untrusted blob."""
    if blob is None:
        return EventState.empty(capacity)
    if not isinstance(blob, dict):
        logger.warning(f"Discarding malformed check-in snapshot of type {type(blob).__name__}")
        return EventState.empty(capacity)

    entries = _first(blob, _LIST_KEYS)
    if not isinstance(entries, list):
        logger.warning("Discarding check-in snapshot without a check-in list")
        return EventState.empty(capacity)

    now = datetime.now(timezone.utc)
    used_ids: set[CheckInId] = set()
    seen: set[tuple[str, str]] = set()
    check_ins: list[CheckIn] = []
    dropped = 0

    for entry in entries:
        if not isinstance(entry, dict):
            dropped += 1
            continue
        raw_name = _first(entry, _NAME_KEYS)
        raw_team = _first(entry, _TEAM_KEYS)
        if not isinstance(raw_name, str) or not isinstance(raw_team, str):
            dropped += 1
            continue

        display_name = clean_display_name(raw_name)
        team_id = resolve_team_id(raw_team)
        key = (normalize_name(display_name), team_id)
        if not display_name or not is_known_team(team_id) or key in seen:
            dropped += 1
            continue

        check_in_id = _parse_id(entry.get("id"), used_ids)
        used_ids.add(check_in_id)
        seen.add(key)
        check_ins.append(
            CheckIn.create(
                check_in_id=check_in_id,
                display_name=display_name,
                team_id=team_id,
                created_at=_parse_time(_first(entry, _TIME_KEYS), now),
            )
        )

    if dropped:
        logger.warning(f"Dropped {dropped} unusable check-in record(s) while loading snapshot")
    if len(check_ins) > capacity.value:
        logger.warning(
            f"Snapshot held {len(check_ins)} check-ins, truncating to capacity {capacity}"
        )
        del check_ins[capacity.value:]

    return EventState(
        check_ins=tuple(check_ins),
        celebrated=len(check_ins) == capacity.value,
        capacity=capacity,
    )
