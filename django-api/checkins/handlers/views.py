"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from checkins.domain.errors import DomainError, ErrorCode
from checkins.handlers import messages
from checkins.handlers.serializers import (
    CheckInInputSerializer,
    CheckInSerializer,
    EventStateSerializer,
    GoalSerializer,
    SummarySerializer,
)
from checkins.services import CommandOutcome, get_checkin_service
from checkins.signals import summary_cache_key

logger = logging.getLogger(__name__)

INVALID_INPUT = "INVALID_INPUT"

ERROR_STATUS = {
    ErrorCode.EMPTY_NAME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TEAM: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AT_CAPACITY: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_ENTRY: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_response(error: DomainError) -> Response:
    logger.warning(f"Rejected command: {error}")
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


def outcome_response(
    outcome: CommandOutcome,
    message: str,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    body = {
        "message": message,
        "state": EventStateSerializer(outcome.state).data,
        "goal": GoalSerializer(outcome.goal).data,
        "banner": messages.celebration_banner(outcome.state, outcome.goal),
    }
    if outcome.check_in is not None:
        body["check_in"] = CheckInSerializer(outcome.check_in).data
    return Response(body, status=status_code)


def invalid_input_response(errors) -> Response:
    logger.warning(f"Rejected malformed input: {errors}")
    return Response(
        {"code": INVALID_INPUT, "message": "Name and team must be text."},
        status=status.HTTP_400_BAD_REQUEST,
    )


class CheckInListView(APIView):
    """Handler for GET/POST /api/checkins"""

    def get(self, request: Request) -> Response:
        state = get_checkin_service().current()
        return Response(EventStateSerializer(state).data)

    def post(self, request: Request) -> Response:
        serializer = CheckInInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        data = serializer.validated_data
        try:
            outcome = get_checkin_service().check_in(data["name"], data["team"])
        except DomainError as e:
            return error_response(e)
        return outcome_response(
            outcome, messages.welcome(outcome.check_in), status.HTTP_201_CREATED
        )


class CheckInDetailView(APIView):
    """Handler for PATCH/DELETE /api/checkins/{check_in_id}"""

    def patch(self, request: Request, check_in_id: str) -> Response:
        serializer = CheckInInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        data = serializer.validated_data
        try:
            outcome = get_checkin_service().edit(check_in_id, data["name"], data["team"])
        except DomainError as e:
            return error_response(e)
        return outcome_response(outcome, messages.updated(outcome.check_in))

    def delete(self, request: Request, check_in_id: str) -> Response:
        try:
            outcome = get_checkin_service().remove(check_in_id)
        except DomainError as e:
            return error_response(e)
        return outcome_response(outcome, messages.removed(outcome.check_in))


class RemoveLastView(APIView):
    """Handler for POST /api/checkins/remove-last"""

    def post(self, request: Request) -> Response:
        try:
            outcome = get_checkin_service().remove_last()
        except DomainError as e:
            return error_response(e)
        return outcome_response(outcome, messages.removed(outcome.check_in))


class ResetView(APIView):
    """Handler for POST /api/checkins/reset"""

    def post(self, request: Request) -> Response:
        outcome = get_checkin_service().reset()
        return outcome_response(outcome, messages.reset_done())


class SummaryView(APIView):
    """Handler for GET /api/checkins/summary"""

    def get(self, request: Request) -> Response:
        config = settings.CHECKINS
        key = summary_cache_key(config["STORAGE_KEY"])
        body = cache.get(key)
        if body is None:
            service = get_checkin_service()
            state = service.current()
            goal = service.goal()
            body = {
                **SummarySerializer(state).data,
                "goal": GoalSerializer(goal).data,
                "banner": messages.celebration_banner(state, goal),
            }
            cache.set(key, body, config["SUMMARY_CACHE_TIMEOUT"])
        return Response(body)


class ExportView(APIView):
    """Handler for GET /api/checkins/export"""

    def get(self, request: Request) -> HttpResponse:
        return HttpResponse(get_checkin_service().export(), content_type="application/json")
