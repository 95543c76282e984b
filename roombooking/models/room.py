from sqlalchemy.orm import relationship
from sqlalchemy import Boolean, Column, Integer, String
from roombooking.db import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    capacity = Column(Integer, nullable=False)
    location = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    # bookings are never removed, cancelling only changes their status
    bookings = relationship("Booking", back_populates="room")
