from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from roombooking.clock import Clock, get_clock
from roombooking.db import get_db
from roombooking.schemas.booking import BookingResponse, BookingStatusUpdate
from roombooking.schemas.room import RoomResponse, RoomStatusUpdate
from roombooking.services.lifecycle import BookingLifecycle
from roombooking.services.room_status import RoomStatusService
from roombooking.utils.auth import Principal, require_admin


router = APIRouter(
    prefix="/admin",
    tags=["admin"],
)


@router.patch(
    "/bookings/{booking_id}/status",
    response_model=BookingResponse,
    summary="Set a booking's status",
    description="Administrative status change. Requires the admin role.",
)
def update_booking_status(
    booking_id: int,
    status_update: BookingStatusUpdate,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
):
    return BookingLifecycle(db).update_status(booking_id, status_update.status)


@router.patch(
    "/rooms/{room_id}/status",
    response_model=RoomResponse,
    summary="Activate or deactivate a room",
    description="Deactivation is refused while the room has running or upcoming bookings. Requires the admin role.",
)
def update_room_status(
    room_id: int,
    status_update: RoomStatusUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    _: Principal = Depends(require_admin),
):
    return RoomStatusService(db, clock).set_active(room_id, status_update.active)
