"""In-process SnapshotStore, used by tests and one-off scripts."""

import copy
from typing import Any

from checkins.stores.interfaces import SnapshotStore


class InMemorySnapshotStore(SnapshotStore):
    """Keeps a private copy of the last saved blob."""

    def __init__(self, blob: Any = None) -> None:
        self._blob = copy.deepcopy(blob)

    def load(self) -> Any:
        return copy.deepcopy(self._blob)

    def save(self, blob: dict[str, Any]) -> None:
        self._blob = copy.deepcopy(blob)
