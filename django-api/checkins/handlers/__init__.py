from checkins.handlers.views import (
    CheckInDetailView,
    CheckInListView,
    ExportView,
    RemoveLastView,
    ResetView,
    SummaryView,
)

__all__ = [
    "CheckInListView",
    "CheckInDetailView",
    "RemoveLastView",
    "ResetView",
    "SummaryView",
    "ExportView",
]
