from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from roombooking.clock import Clock, get_clock
from roombooking.db import get_db
from roombooking.schemas.booking import BookingCreate, BookingResponse
from roombooking.services.lifecycle import BookingLifecycle
from roombooking.utils.auth import Principal, get_current_user
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


@router.post(
    "/",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    description="Book a room for [start_time, end_time). Requires authentication.",
)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    current_user: Principal = Depends(get_current_user),
):
    """
    Create a confirmed booking.

    - **room_id**: ID of an active room.
    - **start_time**: Start of the booking, not in the past.
    - **end_time**: End of the booking (exclusive), at least 30 minutes after start.

    Fails with 404 for an unknown or inactive room, 400 for an invalid
    interval and 409 when the room is already booked.
    """
    logger.debug(f"Creating booking for user: {current_user.username}, room_id: {booking.room_id}")
    return BookingLifecycle(db, clock).create(
        booking.room_id, booking.start_time, booking.end_time, requester_id=current_user.id
    )


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking by ID",
    description="Retrieve a booking. Only its owner or an admin may see it.",
)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: Principal = Depends(get_current_user),
):
    return BookingLifecycle(db).get(booking_id, current_user.id, current_user.is_admin)


@router.patch(
    "/{booking_id}/cancel",
    response_model=BookingResponse,
    summary="Cancel a booking",
    description="Cancel an upcoming booking. Requires ownership or the admin role.",
)
def cancel_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    current_user: Principal = Depends(get_current_user),
):
    """
    Cancel a booking. The booking is kept with status CANCELLED and no
    longer blocks its time slot.
    """
    return BookingLifecycle(db, clock).cancel(booking_id, current_user.id, current_user.is_admin)
