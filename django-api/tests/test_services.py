"""Unit tests for CheckInService.

These test command orchestration, persistence and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import json

import pytest

from checkins.domain import Capacity
from checkins.domain.errors import (
    AtCapacityError,
    CheckInNotFoundError,
    DuplicateEntryError,
    EmptyNameError,
)
from checkins.services import CheckInService
from checkins.stores import InMemorySnapshotStore


@pytest.fixture
def store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture
def service(store) -> CheckInService:
    return CheckInService(store=store, capacity=Capacity(3))


class TestCheckInService:
    """Tests for CheckInService."""

    def test_check_in_persists_snapshot(self, service, store):
        """A successful check-in is saved through the store."""
        outcome = service.check_in("Ana Lee", "water")

        blob = store.load()
        assert [e["displayName"] for e in blob["checkIns"]] == ["Ana Lee"]
        assert blob["checkIns"][0]["id"] == str(outcome.check_in.id)
        assert outcome.goal.reached is False

    def test_rejected_command_does_not_save(self, service, store):
        service.check_in("Ana", "water")
        before = store.load()

        with pytest.raises(EmptyNameError):
            service.check_in(" ", "water")
        with pytest.raises(DuplicateEntryError):
            service.check_in("ANA", "water")

        assert store.load() == before

    def test_goal_fires_once_and_is_acknowledged(self, service, store):
        service.check_in("Ana", "water")
        service.check_in("Ben", "zero")
        outcome = service.check_in("Cy", "zero")

        assert outcome.goal.just_reached is True
        assert outcome.goal.winners == ("zero",)
        assert outcome.state.celebrated is True
        assert store.load()["celebrated"] is True
        assert service.goal().just_reached is False

    def test_at_capacity_rejection(self, service):
        for name in ("Ana", "Ben", "Cy"):
            service.check_in(name, "power")
        with pytest.raises(AtCapacityError):
            service.check_in("Dee", "water")
        assert service.is_full() is True

    def test_at_capacity_settles_unacknowledged_store(self, store):
        """A full roster written elsewhere is acknowledged on the next attempt."""
        store.save(
            {
                "checkIns": [{"displayName": n, "teamId": "water"} for n in ("A", "B", "C")],
                "celebrated": False,
            }
        )
        service = CheckInService(store=store, capacity=Capacity(3))

        with pytest.raises(AtCapacityError):
            service.check_in("Dee", "water")

        assert store.load()["celebrated"] is True

    def test_remove_clears_celebrated(self, service, store):
        for name in ("Ana", "Ben", "Cy"):
            service.check_in(name, "water")

        outcome = service.remove(str(service.current().check_ins[0].id))

        assert outcome.check_in.display_name == "Ana"
        assert outcome.state.celebrated is False
        assert store.load()["celebrated"] is False

    def test_refill_after_removal_fires_again(self, service):
        for name in ("Ana", "Ben", "Cy"):
            service.check_in(name, "water")
        service.remove_last()

        outcome = service.check_in("Dee", "zero")

        assert outcome.goal.just_reached is True

    def test_edit_updates_record(self, service):
        created = service.check_in("Ana", "water").check_in

        outcome = service.edit(str(created.id), "Ana Maria", "Team Net Zero")

        assert outcome.check_in.id == created.id
        assert service.tallies() == {"water": 0, "zero": 1, "power": 0}

    @pytest.mark.parametrize("bad_id", ["not-a-uuid", "12345678-1234-5678-1234-567812345678"])
    def test_unknown_or_malformed_id_is_not_found(self, service, bad_id):
        with pytest.raises(CheckInNotFoundError):
            service.remove(bad_id)
        with pytest.raises(CheckInNotFoundError):
            service.edit(bad_id, "Ana", "water")

    def test_remove_last_on_empty_roster(self, service):
        with pytest.raises(CheckInNotFoundError):
            service.remove_last()

    def test_reset_clears_everything(self, service, store):
        for name in ("Ana", "Ben", "Cy"):
            service.check_in(name, "water")

        outcome = service.reset()

        assert outcome.state.check_ins == ()
        assert store.load() == {"checkIns": [], "celebrated": False}

    def test_queries(self, service):
        service.check_in("Ana", "water")
        service.check_in("Ben", "power")

        assert service.tallies() == {"water": 1, "zero": 0, "power": 1}
        assert service.winners() == ("water", "power")
        assert service.is_full() is False
        assert [e["displayName"] for e in json.loads(service.export())["checkIns"]] == [
            "Ana",
            "Ben",
        ]

    def test_corrupt_store_degrades_to_empty(self, store):
        store.save({"checkIns": "corrupt"})
        service = CheckInService(store=store, capacity=Capacity(3))

        assert service.current().check_ins == ()
        assert service.check_in("Ana", "water").state.count == 1
