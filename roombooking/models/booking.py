import enum
from sqlalchemy import Column, Integer, DateTime, Enum, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from roombooking.clock import utc_now
from roombooking.db import Base


class BookingStatus(str, enum.Enum):
    CONFIRMED = "CONFIRMED"
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# statuses that occupy a room and take part in conflict detection
ACTIVE_STATUSES = (BookingStatus.CONFIRMED, BookingStatus.PENDING)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    status = Column(
        Enum(BookingStatus, native_enum=False, length=16),
        nullable=False,
        default=BookingStatus.CONFIRMED,
    )
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    room = relationship("Room", back_populates="bookings")
    user = relationship("User", back_populates="bookings")

    __table_args__ = (
        Index("ix_bookings_room_start_status", "room_id", "start_time", "status"),
        CheckConstraint("end_time > start_time", name="check_booking_interval"),
    )

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, room={self.room_id}, user={self.user_id}, "
            f"{self.start_time}..{self.end_time}, status={self.status})>"
        )
