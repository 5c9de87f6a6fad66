"""Django ORM models (persistence layer).

The roster is stored as a single serialized snapshot per storage key.
Domain logic lives in checkins/domain/.
"""

from django.db import models


class EventSnapshot(models.Model):
    """Persistence model for a serialized EventState blob."""

    key = models.CharField(max_length=100, unique=True)
    payload = models.JSONField(default=dict)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key
