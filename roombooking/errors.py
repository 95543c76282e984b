"""
Errors raised by the booking engine.

Every error carries a ``kind`` from a small taxonomy that callers can
branch on, and a stable ``code`` that is sent to API clients. None of
them is retried inside the engine.
"""
import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    CONFLICT = "CONFLICT"
    FORBIDDEN = "FORBIDDEN"


class BookingError(Exception):
    """Base class for all engine errors."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT
    code: str = "BOOKING_ERROR"
    retryable: bool = False

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RoomNotFound(BookingError):
    kind = ErrorKind.NOT_FOUND
    code = "ROOM_NOT_FOUND"


class UserNotFound(BookingError):
    kind = ErrorKind.NOT_FOUND
    code = "USER_NOT_FOUND"


class BookingNotFound(BookingError):
    kind = ErrorKind.NOT_FOUND
    code = "BOOKING_NOT_FOUND"


class InvalidInterval(BookingError):
    kind = ErrorKind.INVALID_INPUT
    code = "INVALID_INTERVAL"


class PastBooking(BookingError):
    kind = ErrorKind.INVALID_INPUT
    code = "PAST_BOOKING"


class RoomNotAvailable(BookingError):
    """The interval overlaps an active booking on the room.

    Clients may re-fetch availability and resubmit.
    """

    kind = ErrorKind.CONFLICT
    code = "ROOM_NOT_AVAILABLE_FOR_THIS_TIME"
    retryable = True


class StatusConflict(BookingError):
    kind = ErrorKind.CONFLICT
    code = "BOOKING_STATUS_CONFLICT"


class AlreadyCancelled(StatusConflict):
    code = "BOOKING_ALREADY_CANCELLED"


class AccessDenied(BookingError):
    kind = ErrorKind.FORBIDDEN
    code = "ACCESS_DENIED"


class RoomStatusConflict(BookingError):
    kind = ErrorKind.CONFLICT
    code = "ROOM_STATUS_CONFLICT"


class RoomHasActiveBookings(BookingError):
    """The room still has a running or upcoming active booking."""

    kind = ErrorKind.CONFLICT
    code = "ROOM_BOOKINGS_CONFLICT"


class RequestInvalid(BookingError):
    """A request field is missing or malformed."""

    kind = ErrorKind.INVALID_INPUT
    code = "VALIDATION_FAILED"
