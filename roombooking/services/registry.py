from typing import Optional
from sqlalchemy.orm import Session
from roombooking.models.room import Room
from roombooking.models.user import User


class RoomRegistry:
    def __init__(self, db: Session):
        self.db = db

    def get(self, room_id: int) -> Optional[Room]:
        return self.db.query(Room).filter(Room.id == room_id).first()

    def get_active(self, room_id: int) -> Optional[Room]:
        """Return the room if it exists and is active."""
        return self.db.query(Room).filter(Room.id == room_id, Room.is_active.is_(True)).first()


class UserRegistry:
    def __init__(self, db: Session):
        self.db = db

    def exists(self, user_id: int) -> bool:
        return self.db.query(User.id).filter(User.id == user_id).first() is not None
