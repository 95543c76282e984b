from datetime import date, datetime, time, timedelta
import pytest

from roombooking.errors import RoomNotFound
from roombooking.models.booking import BookingStatus
from roombooking.services.availability import AvailabilityChecker
from roombooking.services.booking_store import BookingStore
from roombooking.services.schedule import ScheduleProjector
from tests.conf_tests import (
    FIXED_NOW,
    clear_db,
    test_db,
    test_user,
    test_room,
    inactive_room,
    create_booking,
    fixed_clock,
)

DAY = date(2026, 2, 12)


def at(hour, minute=0, day=DAY):
    return datetime.combine(day, time(hour, minute))


@pytest.fixture
def checker(test_db):
    return AvailabilityChecker(BookingStore(test_db), clock=fixed_clock)


@pytest.fixture
def projector(test_db):
    return ScheduleProjector(test_db, clock=fixed_clock)


# pylint: disable=redefined-outer-name


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (at(9), at(10), True),
        (at(11), at(12), True),
        (at(9), at(10, 1), False),
        (at(10, 59), at(11, 30), False),
        (at(10, 15), at(10, 45), False),
        (at(9), at(12), False),
        (at(10), at(11), False),
    ],
)
def test_half_open_overlap(checker, test_db, test_room, test_user, start, end, expected):
    create_booking(test_db, test_room, test_user, at(10), at(11))
    assert checker.is_available(test_room.id, start, end) is expected


def test_exclude_booking_from_check(checker, test_db, test_room, test_user):
    booking = create_booking(test_db, test_room, test_user, at(10), at(11))
    assert checker.is_available(test_room.id, at(10), at(11), exclude_booking_id=booking.id)


def test_has_upcoming_bookings(checker, test_db, test_room, test_user):
    assert not checker.has_upcoming_bookings(test_room.id)
    create_booking(test_db, test_room, test_user, FIXED_NOW - timedelta(days=2), FIXED_NOW - timedelta(days=1))
    assert not checker.has_upcoming_bookings(test_room.id)
    create_booking(
        test_db,
        test_room,
        test_user,
        FIXED_NOW + timedelta(days=30),
        FIXED_NOW + timedelta(days=30, hours=1),
        status=BookingStatus.CANCELLED,
    )
    assert not checker.has_upcoming_bookings(test_room.id)
    create_booking(test_db, test_room, test_user, FIXED_NOW - timedelta(minutes=30), FIXED_NOW + timedelta(minutes=30))
    assert checker.has_upcoming_bookings(test_room.id)


def test_projector_day_window(projector, test_db, test_room, test_user):
    create_booking(test_db, test_room, test_user, at(0), at(1))
    create_booking(test_db, test_room, test_user, at(23, 30), at(0, 30, day=DAY + timedelta(days=1)))
    create_booking(test_db, test_room, test_user, at(23, 0, day=DAY - timedelta(days=1)), at(0, 30))
    create_booking(test_db, test_room, test_user, at(12), at(13), status=BookingStatus.COMPLETED)

    view = projector.check_availability(test_room.id, at(14), at(15))
    assert view.available_for_interval
    assert view.date == DAY
    assert [(slot.start_time, slot.end_time) for slot in view.busy_slots] == [
        (time(0, 0), time(1, 0)),
        (time(23, 30), time(0, 30)),
    ]


def test_projector_flags_requested_interval(projector, test_db, test_room, test_user):
    create_booking(test_db, test_room, test_user, at(12), at(13))
    view = projector.check_availability(test_room.id, at(12, 30), at(13, 30))
    assert not view.available_for_interval
    assert view.busy_slots[0].status == BookingStatus.CONFIRMED


def test_projector_unknown_or_inactive_room(projector, inactive_room):
    with pytest.raises(RoomNotFound):
        projector.check_availability(inactive_room.id, at(12), at(13))
    with pytest.raises(RoomNotFound):
        projector.check_availability(4242, at(12), at(13))
