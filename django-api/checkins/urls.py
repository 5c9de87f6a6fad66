from django.urls import path

from checkins.handlers import (
    CheckInDetailView,
    CheckInListView,
    ExportView,
    RemoveLastView,
    ResetView,
    SummaryView,
)

urlpatterns = [
    path("checkins", CheckInListView.as_view(), name="checkin-list"),
    path("checkins/summary", SummaryView.as_view(), name="checkin-summary"),
    path("checkins/export", ExportView.as_view(), name="checkin-export"),
    path("checkins/reset", ResetView.as_view(), name="checkin-reset"),
    path("checkins/remove-last", RemoveLastView.as_view(), name="checkin-remove-last"),
    path(
        "checkins/<str:check_in_id>",
        CheckInDetailView.as_view(),
        name="checkin-detail",
    ),
]
