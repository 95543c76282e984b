from pydantic import BaseModel, ConfigDict
from typing import Optional


class RoomStatusUpdate(BaseModel):
    active: bool


class RoomResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    capacity: int
    location: Optional[str] = None
    is_active: bool
