"""Store interfaces (repository pattern).

Stores must be swappable. They read and write the serialized snapshot
blob as-is; validation and repair belong to checkins.domain.snapshot.
"""

from abc import ABC, abstractmethod
from typing import Any


class SnapshotStore(ABC):
    """Interface for check-in snapshot persistence."""

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """Return the stored blob, or None if nothing has been saved."""
        ...

    @abstractmethod
    def save(self, blob: dict[str, Any]) -> None:
        """Replace the stored blob."""
        ...
