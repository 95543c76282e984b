import logging
from datetime import datetime, timedelta
from typing import Optional
from roombooking.clock import Clock, utc_now
from roombooking.services.booking_store import BookingStore

logger = logging.getLogger(__name__)

UPCOMING_HORIZON = timedelta(days=365 * 100)


class AvailabilityChecker:
    """
    Decides whether an interval on a room is free.

    Intervals are half-open, so a booking ending at 11:00 does not
    conflict with one starting at 11:00.
    """

    def __init__(self, store: BookingStore, clock: Clock = utc_now):
        self.store = store
        self.clock = clock

    def is_available(
        self,
        room_id: int,
        start_time: datetime,
        end_time: datetime,
        exclude_booking_id: Optional[int] = None,
    ) -> bool:
        conflicts = self.store.find_conflicting(room_id, start_time, end_time, exclude_booking_id)
        if conflicts:
            logger.debug(
                f"Room {room_id} busy for {start_time} to {end_time}: "
                f"conflicting bookings {[booking.id for booking in conflicts]}"
            )
        return not conflicts

    def has_upcoming_bookings(self, room_id: int) -> bool:
        """Whether any active booking on the room is still running or lies ahead."""
        now = self.clock()
        return bool(self.store.find_conflicting(room_id, now, now + UPCOMING_HORIZON))
