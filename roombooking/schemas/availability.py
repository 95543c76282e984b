from datetime import date, time
from typing import List
from pydantic import BaseModel, computed_field
from roombooking.models.booking import BookingStatus


class TimeSlot(BaseModel):
    start_time: time
    end_time: time
    status: BookingStatus

    @computed_field
    @property
    def formatted_time(self) -> str:
        return f"{self.start_time} - {self.end_time}"

    @computed_field
    @property
    def status_description(self) -> str:
        return "Confirmed" if self.status == BookingStatus.CONFIRMED else "Pending"


class RoomAvailabilityResponse(BaseModel):
    available_for_interval: bool
    date: date
    busy_slots: List[TimeSlot]
