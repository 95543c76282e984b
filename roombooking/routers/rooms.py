from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from roombooking.clock import Clock, get_clock, to_naive_utc
from roombooking.db import get_db
from roombooking.schemas.availability import RoomAvailabilityResponse
from roombooking.services.schedule import ScheduleProjector


router = APIRouter(
    prefix="/rooms",
    tags=["rooms"],
)


@router.get("/{room_id}/availability", response_model=RoomAvailabilityResponse)
def check_availability(
    room_id: int,
    start_time: datetime,
    end_time: datetime,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """
    Check whether a room is free for [start_time, end_time) and list the
    busy slots of that day.
    """
    return ScheduleProjector(db, clock).check_availability(
        room_id, to_naive_utc(start_time), to_naive_utc(end_time)
    )
