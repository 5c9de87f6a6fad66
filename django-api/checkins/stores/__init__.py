from checkins.stores.interfaces import SnapshotStore
from checkins.stores.memory_store import InMemorySnapshotStore

__all__ = ["SnapshotStore", "InMemorySnapshotStore"]
