from django.contrib import admin

from checkins.models import EventSnapshot


@admin.register(EventSnapshot)
class EventSnapshotAdmin(admin.ModelAdmin):
    list_display = ["key", "check_in_count", "updated_at"]
    search_fields = ["key"]
    readonly_fields = ["updated_at"]

    @admin.display(description="Check-ins")
    def check_in_count(self, obj: EventSnapshot) -> int:
        entries = obj.payload.get("checkIns") if isinstance(obj.payload, dict) else None
        return len(entries) if isinstance(entries, list) else 0
