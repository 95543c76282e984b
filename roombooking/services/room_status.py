import logging
from sqlalchemy.orm import Session
from roombooking.clock import Clock, utc_now
from roombooking.errors import RoomHasActiveBookings, RoomNotFound, RoomStatusConflict
from roombooking.models.room import Room
from roombooking.services.availability import AvailabilityChecker
from roombooking.services.booking_store import BookingStore
from roombooking.services.registry import RoomRegistry

logger = logging.getLogger(__name__)


class RoomStatusService:
    """Activates and deactivates rooms; a room with running or upcoming bookings stays active."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        self.store = BookingStore(db)
        self.rooms = RoomRegistry(db)
        self.availability = AvailabilityChecker(self.store, clock)

    def set_active(self, room_id: int, active: bool) -> Room:
        with self.store.transaction():
            # same lock as booking creation, so no booking lands while the room is being closed
            self.store.lock_room(room_id)

            room = self.rooms.get(room_id)
            if room is None:
                logger.error(f"Room not found: {room_id}")
                raise RoomNotFound(f"Room not found with id: {room_id}")

            if room.is_active == active:
                raise RoomStatusConflict(f"Room already has status: {'active' if active else 'inactive'}")

            if not active and self.availability.has_upcoming_bookings(room_id):
                logger.error(f"Room {room_id} has upcoming bookings, not deactivating")
                raise RoomHasActiveBookings("Cannot deactivate room with active bookings. Cancel bookings first.")

            room.is_active = active
            self.store.db.flush()

        logger.info(f"Room {room_id} {'activated' if active else 'deactivated'}")
        return room
