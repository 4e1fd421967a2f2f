"""Domain errors raised by the event store and auth dependency.

Each error carries the HTTP status it maps to; ``app.main`` registers a
single handler that renders any of them as ``{"detail": message}``.
"""
from fastapi import status


class EventPlannerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(EventPlannerError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(EventPlannerError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(EventPlannerError):
    """Authenticated, but not allowed to act on this event."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(EventPlannerError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(EventPlannerError):
    status_code = status.HTTP_409_CONFLICT


class StoreError(EventPlannerError):
    """The database failed; details are logged, not returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
