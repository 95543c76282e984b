import logging
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session
from roombooking.clock import Clock, utc_now
from roombooking.config import get_settings
from roombooking.errors import (
    AlreadyCancelled,
    BookingNotFound,
    InvalidInterval,
    PastBooking,
    RoomNotAvailable,
    RoomNotFound,
    StatusConflict,
    UserNotFound,
)
from roombooking.models.booking import Booking, BookingStatus, ACTIVE_STATUSES
from roombooking.services.access import AuthorizationGate
from roombooking.services.availability import AvailabilityChecker
from roombooking.services.booking_store import BookingStore
from roombooking.services.registry import RoomRegistry, UserRegistry

logger = logging.getLogger(__name__)


class BookingLifecycle:
    """
    Creates bookings and moves them through their statuses.

    CONFIRMED -> CANCELLED by the owner or an admin, any status -> any
    other through the administrative ``update_status``. Every operation
    runs in a single transaction; checks happen in a fixed order
    (existence, access, time window, conflicts) so the same input always
    produces the same error.
    """

    def __init__(
        self,
        db: Session,
        clock: Clock = utc_now,
        min_duration: Optional[timedelta] = None,
    ):
        self.store = BookingStore(db)
        self.rooms = RoomRegistry(db)
        self.users = UserRegistry(db)
        self.availability = AvailabilityChecker(self.store, clock)
        self.gate = AuthorizationGate()
        self.clock = clock
        if min_duration is None:
            min_duration = timedelta(minutes=get_settings().min_booking_minutes)
        self.min_duration = min_duration

    def create(self, room_id: int, start_time: datetime, end_time: datetime, requester_id: int) -> Booking:
        logger.debug(f"Creating booking for user: {requester_id}, room_id: {room_id}, {start_time} to {end_time}")

        with self.store.transaction():
            # held until commit, so no other booking for this room can slip in between check and insert
            self.store.lock_room(room_id)

            if self.rooms.get_active(room_id) is None:
                logger.error(f"Room not found or inactive: {room_id}")
                raise RoomNotFound(f"Room not found or inactive with id: {room_id}")
            if not self.users.exists(requester_id):
                logger.error(f"User not found: {requester_id}")
                raise UserNotFound(f"User not found with id: {requester_id}")

            self.validate_interval(start_time, end_time)

            if not self.availability.is_available(room_id, start_time, end_time):
                logger.error(f"Overlapping booking found for room_id: {room_id}, time: {start_time} to {end_time}")
                raise RoomNotAvailable("Room is not available for selected time")

            booking = self.store.add(
                Booking(
                    room_id=room_id,
                    user_id=requester_id,
                    start_time=start_time,
                    end_time=end_time,
                    status=BookingStatus.CONFIRMED,
                )
            )

        logger.debug(f"Created booking: {booking.id}, room_id: {room_id}")
        return booking

    def validate_interval(self, start_time: datetime, end_time: datetime) -> None:
        if end_time <= start_time:
            raise InvalidInterval("End time must be after start time")
        if start_time < self.clock():
            raise InvalidInterval("Cannot book in the past")
        if end_time - start_time < self.min_duration:
            minutes = int(self.min_duration.total_seconds() // 60)
            raise InvalidInterval(f"Minimum booking duration is {minutes} minutes")

    def get(self, booking_id: int, requester_id: int, is_admin: bool) -> Booking:
        booking = self.store.get(booking_id)
        if booking is None:
            raise BookingNotFound("Booking not found")
        self.gate.ensure_owner_or_admin(booking, requester_id, is_admin, "check")
        return booking

    def cancel(self, booking_id: int, requester_id: int, is_admin: bool) -> Booking:
        with self.store.transaction():
            booking = self.store.get(booking_id, for_update=True)
            if booking is None:
                logger.error(f"Booking not found: {booking_id}")
                raise BookingNotFound("Booking not found")

            self.gate.ensure_owner_or_admin(booking, requester_id, is_admin, "cancel")

            if booking.start_time < self.clock():
                raise PastBooking("Cannot cancel past booking")
            if booking.status == BookingStatus.CANCELLED:
                raise AlreadyCancelled("Booking already cancelled")

            self.store.update_status(booking, BookingStatus.CANCELLED)

        logger.debug(f"Cancelled booking: {booking_id} by user: {requester_id}")
        return booking

    def update_status(self, booking_id: int, new_status: BookingStatus) -> Booking:
        """
        Administrative status change. Any transition is allowed except to
        the current status; moving a booking back into an active status
        re-checks the room for overlaps.
        """
        with self.store.transaction():
            booking = self.store.get(booking_id, for_update=True)
            if booking is None:
                logger.error(f"Booking not found: {booking_id}")
                raise BookingNotFound(f"Booking not found with id: {booking_id}")

            if booking.status == new_status:
                raise StatusConflict(f"Booking already has status: {new_status.value}")

            if new_status in ACTIVE_STATUSES and booking.status not in ACTIVE_STATUSES:
                self.store.lock_room(booking.room_id)
                if not self.availability.is_available(
                    booking.room_id, booking.start_time, booking.end_time, exclude_booking_id=booking.id
                ):
                    logger.error(f"Cannot reactivate booking {booking_id}: room {booking.room_id} is taken")
                    raise RoomNotAvailable("Room is not available for the booking's time anymore")

            previous = booking.status
            self.store.update_status(booking, new_status)

        logger.info(f"Booking {booking_id} status changed: {previous.value} -> {new_status.value}")
        return booking
