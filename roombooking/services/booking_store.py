from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from roombooking.models.booking import Booking, BookingStatus, ACTIVE_STATUSES
from roombooking.models.room import Room
from roombooking.models.user import User  # noqa: F401  (mapper registration)


class BookingStore:
    """
    Data access for bookings.

    Bookings are never deleted. Callers group reads and writes that must
    be atomic inside ``transaction()``.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self):
        """
        Run the block in a fresh transaction: commit when it succeeds,
        roll everything back otherwise.

        Whatever the session already has open (the caller's user lookup,
        for one) is committed first, so the block's first statement opens
        the transaction and its read snapshot.
        """
        if self.db.in_transaction():
            self.db.commit()
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def lock_room(self, room_id: int) -> None:
        """
        Serialize booking writes for one room until the transaction ends.

        Takes a row lock on the room where the dialect supports
        ``SELECT ... FOR UPDATE``; SQLite transactions already hold the
        database write lock from their first statement.
        """
        self.db.query(Room.id).filter(Room.id == room_id).with_for_update().first()

    def get(self, booking_id: int, for_update: bool = False) -> Optional[Booking]:
        query = self.db.query(Booking).filter(Booking.id == booking_id)
        if for_update:
            query = query.with_for_update().populate_existing()
        return query.first()

    def find_conflicting(
        self,
        room_id: int,
        start_time: datetime,
        end_time: datetime,
        exclude_booking_id: Optional[int] = None,
    ) -> List[Booking]:
        """Active bookings on the room overlapping the half-open [start_time, end_time)."""
        query = self.db.query(Booking).filter(
            Booking.room_id == room_id,
            Booking.status.in_(ACTIVE_STATUSES),
            Booking.start_time < end_time,
            Booking.end_time > start_time,
        )
        if exclude_booking_id is not None:
            query = query.filter(Booking.id != exclude_booking_id)
        return query.all()

    def find_starting_between(
        self,
        room_id: int,
        range_start: datetime,
        range_end: datetime,
        statuses: Iterable[BookingStatus] = ACTIVE_STATUSES,
    ) -> List[Booking]:
        return (
            self.db.query(Booking)
            .filter(
                Booking.room_id == room_id,
                Booking.start_time.between(range_start, range_end),
                Booking.status.in_(list(statuses)),
            )
            .order_by(Booking.start_time)
            .all()
        )

    def add(self, booking: Booking) -> Booking:
        self.db.add(booking)
        self.db.flush()
        return booking

    def update_status(self, booking: Booking, status: BookingStatus) -> Booking:
        booking.status = status
        self.db.flush()
        return booking
