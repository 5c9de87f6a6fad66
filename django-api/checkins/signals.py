"""Django signals for cache invalidation."""

import logging

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from checkins.models import EventSnapshot

logger = logging.getLogger(__name__)


def summary_cache_key(storage_key: str) -> str:
    return f"checkins:summary:{storage_key}"


@receiver([post_save, post_delete], sender=EventSnapshot)
def invalidate_summary_cache(sender, instance, **kwargs):
    """Invalidate the cached summary once a snapshot change is committed."""
    key = summary_cache_key(instance.key)

    def invalidate() -> None:
        cache.delete(key)
        logger.debug(f"Invalidated summary cache for {instance.key}")

    # Deleting before commit would let a concurrent reader re-cache the old row.
    transaction.on_commit(invalidate)
