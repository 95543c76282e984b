import enum
from sqlalchemy.orm import relationship
from sqlalchemy import Column, Enum, Integer, String
from roombooking.db import Base


class UserRole(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, nullable=True)
    role = Column(Enum(UserRole, native_enum=False, length=16), nullable=False, default=UserRole.USER)

    bookings = relationship("Booking", back_populates="user")
