import logging
from datetime import date, datetime, time
from typing import List
from sqlalchemy.orm import Session
from roombooking.clock import Clock, utc_now
from roombooking.errors import RoomNotFound
from roombooking.models.booking import Booking
from roombooking.schemas.availability import RoomAvailabilityResponse, TimeSlot
from roombooking.services.availability import AvailabilityChecker
from roombooking.services.booking_store import BookingStore
from roombooking.services.registry import RoomRegistry

logger = logging.getLogger(__name__)


class ScheduleProjector:
    """Read-only day view of a room: is an interval free, and what is already taken."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        self.store = BookingStore(db)
        self.rooms = RoomRegistry(db)
        self.availability = AvailabilityChecker(self.store, clock)

    def check_availability(self, room_id: int, start_time: datetime, end_time: datetime) -> RoomAvailabilityResponse:
        if self.rooms.get_active(room_id) is None:
            logger.error(f"Room not found or inactive: {room_id}")
            raise RoomNotFound(f"Room not found or inactive with id: {room_id}")

        available = self.availability.is_available(room_id, start_time, end_time)
        target_date = start_time.date()
        busy_slots = self.busy_slots(room_id, target_date)

        logger.debug(f"Room {room_id} on {target_date}: available={available}, {len(busy_slots)} busy slots")
        return RoomAvailabilityResponse(
            available_for_interval=available,
            date=target_date,
            busy_slots=busy_slots,
        )

    def busy_slots(self, room_id: int, day: date) -> List[TimeSlot]:
        bookings = self.store.find_starting_between(
            room_id,
            datetime.combine(day, time.min),
            datetime.combine(day, time.max),
        )
        return sorted((to_time_slot(booking) for booking in bookings), key=lambda slot: slot.start_time)


def to_time_slot(booking: Booking) -> TimeSlot:
    # times of day only; a booking running past midnight ends "before" it starts
    return TimeSlot(
        start_time=booking.start_time.time(),
        end_time=booking.end_time.time(),
        status=booking.status,
    )
