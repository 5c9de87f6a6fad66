"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from checkins.models import EventSnapshot
from checkins.signals import summary_cache_key
from checkins.stores.django_store import DjangoSnapshotStore

STORAGE_KEY = "intel_summit_checkins_v2"


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on snapshot changes."""

    def test_summary_is_cached(self, api_client):
        """A second summary request is served from the cache."""
        api_client.get("/api/checkins/summary")
        assert cache.get(summary_cache_key(STORAGE_KEY)) is not None

    def test_snapshot_save_invalidates_summary_cache(self, django_capture_on_commit_callbacks):
        """Saving a snapshot invalidates the checkins:summary:{key} cache key."""
        cache.set(summary_cache_key(STORAGE_KEY), {"count": 0})

        with django_capture_on_commit_callbacks(execute=True):
            DjangoSnapshotStore(STORAGE_KEY).save({"checkIns": [], "celebrated": False})

        assert cache.get(summary_cache_key(STORAGE_KEY)) is None

    def test_cache_kept_until_commit(self, django_capture_on_commit_callbacks):
        """The cached summary survives until the saving transaction commits."""
        cache.set(summary_cache_key(STORAGE_KEY), {"count": 0})

        with django_capture_on_commit_callbacks() as callbacks:
            DjangoSnapshotStore(STORAGE_KEY).save({"checkIns": [], "celebrated": False})
            assert cache.get(summary_cache_key(STORAGE_KEY)) == {"count": 0}

        assert len(callbacks) == 1
        callbacks[0]()
        assert cache.get(summary_cache_key(STORAGE_KEY)) is None

    def test_snapshot_delete_invalidates_summary_cache(self, django_capture_on_commit_callbacks):
        snapshot = EventSnapshot.objects.create(key=STORAGE_KEY, payload={})
        cache.set(summary_cache_key(STORAGE_KEY), {"count": 0})

        with django_capture_on_commit_callbacks(execute=True):
            snapshot.delete()

        assert cache.get(summary_cache_key(STORAGE_KEY)) is None

    def test_check_in_refreshes_summary(self, api_client, django_capture_on_commit_callbacks):
        """A command after a cached summary is reflected in the next summary."""
        assert api_client.get("/api/checkins/summary").json()["count"] == 0

        with django_capture_on_commit_callbacks(execute=True):
            api_client.post("/api/checkins", {"name": "Ana", "team": "water"}, format="json")

        assert api_client.get("/api/checkins/summary").json()["count"] == 1


@pytest.mark.django_db
class TestDjangoSnapshotStore:
    """Tests for the ORM-backed snapshot store."""

    def test_load_returns_none_when_empty(self):
        assert DjangoSnapshotStore("missing").load() is None

    def test_save_then_load(self):
        store = DjangoSnapshotStore("event-a")
        blob = {"checkIns": [{"displayName": "Ana", "teamId": "water"}], "celebrated": False}

        store.save(blob)
        store.save({**blob, "celebrated": True})

        assert store.load() == {**blob, "celebrated": True}
        assert EventSnapshot.objects.filter(key="event-a").count() == 1
