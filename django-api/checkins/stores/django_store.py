"""Django ORM implementation of the SnapshotStore."""

from typing import Any

from checkins.models import EventSnapshot
from checkins.stores.interfaces import SnapshotStore


class DjangoSnapshotStore(SnapshotStore):
    """Database-backed snapshot store, one row per storage key."""

    def __init__(self, key: str) -> None:
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> dict[str, Any] | None:
        snapshot = EventSnapshot.objects.filter(key=self._key).first()
        if snapshot is None:
            return None
        return snapshot.payload

    def save(self, blob: dict[str, Any]) -> None:
        EventSnapshot.objects.update_or_create(
            key=self._key,
            defaults={"payload": blob},
        )
