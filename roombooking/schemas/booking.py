from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime
from roombooking.clock import to_naive_utc
from roombooking.models.booking import BookingStatus


class BookingCreate(BaseModel):
    room_id: int
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timezone(cls, value):
        return to_naive_utc(value)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    room_id: int
    user_id: int
    start_time: datetime
    end_time: datetime
    status: BookingStatus
    created_at: datetime
    updated_at: datetime
