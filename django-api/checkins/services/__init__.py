from checkins.services.checkin_service import CheckInService, CommandOutcome, get_checkin_service

__all__ = ["CheckInService", "CommandOutcome", "get_checkin_service"]
