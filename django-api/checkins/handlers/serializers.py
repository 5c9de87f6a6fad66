"""Serializers for request input and domain model responses."""

from rest_framework import serializers

from checkins.domain.goal import (
    compute_team_tallies,
    compute_winners,
    is_full,
    progress_percent,
    remaining_spots,
)
from checkins.domain.normalization import team_label


class CheckInInputSerializer(serializers.Serializer):
    """Request body for check-in and edit.

    Blank values pass through so the domain rules can reject them with
    their own error codes.
    """

    name = serializers.CharField(allow_blank=True, allow_null=True, default="")
    team = serializers.CharField(allow_blank=True, allow_null=True, default="")


class CheckInSerializer(serializers.Serializer):
    """Serializer for CheckIn domain model."""

    id = serializers.CharField()
    display_name = serializers.CharField()
    normalized_name = serializers.CharField()
    team_id = serializers.CharField()
    team_label = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_team_label(self, obj) -> str:
        return team_label(obj.team_id)


class GoalSerializer(serializers.Serializer):
    """Serializer for GoalStatus domain model."""

    reached = serializers.BooleanField()
    winners = serializers.ListField(child=serializers.CharField())
    just_reached = serializers.BooleanField()


class SummarySerializer(serializers.Serializer):
    """Counts, progress and current leaders of an EventState."""

    count = serializers.IntegerField()
    capacity = serializers.SerializerMethodField()
    remaining = serializers.SerializerMethodField()
    progress = serializers.SerializerMethodField()
    is_full = serializers.SerializerMethodField()
    celebrated = serializers.BooleanField()
    tallies = serializers.SerializerMethodField()
    winners = serializers.SerializerMethodField()

    def get_capacity(self, obj) -> int:
        return obj.capacity.value

    def get_remaining(self, obj) -> int:
        return remaining_spots(obj)

    def get_progress(self, obj) -> int:
        return progress_percent(obj)

    def get_is_full(self, obj) -> bool:
        return is_full(obj)

    def get_tallies(self, obj) -> dict[str, int]:
        return compute_team_tallies(obj)

    def get_winners(self, obj) -> list[str]:
        return list(compute_winners(obj))


class EventStateSerializer(SummarySerializer):
    """Serializer for EventState domain model, including the roster."""

    check_ins = CheckInSerializer(many=True)
