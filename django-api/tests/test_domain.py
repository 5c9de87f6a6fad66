"""Unit tests for domain primitives and normalization.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest

from checkins.domain import TEAM_IDS, Capacity, CheckIn, CheckInId, EventState
from checkins.domain.normalization import (
    normalize_name,
    resolve_team_id,
    team_label,
)


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(50).value == 50

    def test_capacity_rejects_zero(self):
        """An event must accept at least one check-in."""
        with pytest.raises(ValueError):
            Capacity(0)

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestCheckInId:
    """Tests for CheckInId value object."""

    def test_from_string_valid_uuid(self):
        """CheckInId.from_string parses valid UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        check_in_id = CheckInId.from_string(raw)
        assert check_in_id.value == UUID(raw)
        assert str(check_in_id) == raw

    def test_from_string_invalid_uuid(self):
        """CheckInId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            CheckInId.from_string("not-a-uuid")

    def test_generate_is_unique(self):
        assert CheckInId.generate() != CheckInId.generate()


class TestNormalizeName:
    """Tests for normalize_name."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Ana Lee", "ana lee"),
            ("  ana   lee ", "ana lee"),
            ("ANA\tLEE\n", "ana lee"),
            ("", ""),
            ("   ", ""),
            (None, ""),
        ],
    )
    def test_normalizes(self, raw, expected):
        assert normalize_name(raw) == expected

    def test_is_idempotent(self):
        once = normalize_name("  Mixed   CASE\tName ")
        assert normalize_name(once) == once


class TestResolveTeamId:
    """Tests for resolve_team_id."""

    @pytest.mark.parametrize("team_id", TEAM_IDS)
    def test_canonical_id_is_kept(self, team_id):
        assert resolve_team_id(team_id) == team_id

    def test_label_maps_to_id(self):
        assert resolve_team_id("Team Water Wise") == "water"
        assert resolve_team_id("  Team Net Zero ") == "zero"

    def test_unknown_value_passes_through(self):
        """Unknown teams are never coerced to a default."""
        assert resolve_team_id("fire") == "fire"
        assert resolve_team_id(None) == ""

    def test_team_label(self):
        assert team_label("power") == "Team Renewables"
        assert team_label("fire") == "fire"


class TestCheckInModel:
    """Tests for CheckIn and EventState domain models."""

    def test_create_derives_normalized_name(self):
        check_in = CheckIn.create(
            check_in_id=CheckInId.generate(),
            display_name="Ana  Lee",
            team_id="water",
            created_at=datetime.now(timezone.utc),
        )
        assert check_in.normalized_name == "ana lee"

    def test_rejects_independently_authored_normalized_name(self):
        with pytest.raises(ValueError):
            CheckIn(
                id=CheckInId.generate(),
                display_name="Ana Lee",
                normalized_name="someone else",
                team_id="water",
                created_at=datetime.now(timezone.utc),
            )

    def test_empty_state(self):
        state = EventState.empty(Capacity(10))
        assert state.check_ins == ()
        assert state.celebrated is False
        assert state.count == 0
        assert state.capacity == Capacity(10)
