from datetime import datetime
from fastapi import status

from roombooking.models.booking import BookingStatus
from tests.conf_tests import (
    client,
    clear_db,
    test_db,
    test_user,
    test_room,
    inactive_room,
    create_booking,
)


def availability(room_id, start_time, end_time):
    return client.get(
        f"/rooms/{room_id}/availability",
        params={"start_time": start_time.isoformat(), "end_time": end_time.isoformat()},
    )


# pylint: disable-next=redefined-outer-name
def test_availability_empty_room(test_room):
    response = availability(test_room.id, datetime(2026, 2, 12, 12, 0), datetime(2026, 2, 12, 13, 0))
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["available_for_interval"] is True
    assert data["date"] == "2026-02-12"
    assert data["busy_slots"] == []


# pylint: disable-next=redefined-outer-name
def test_availability_ignores_cancelled_booking(test_db, test_room, test_user):
    create_booking(
        test_db,
        test_room,
        test_user,
        datetime(2026, 2, 12, 12, 0),
        datetime(2026, 2, 12, 13, 0),
        status=BookingStatus.CANCELLED,
    )
    response = availability(test_room.id, datetime(2026, 2, 12, 12, 0), datetime(2026, 2, 12, 13, 0))
    data = response.json()
    assert data["available_for_interval"] is True
    assert data["busy_slots"] == []


# pylint: disable-next=redefined-outer-name
def test_availability_lists_busy_slots_in_order(test_db, test_room, test_user):
    create_booking(test_db, test_room, test_user, datetime(2026, 2, 12, 15, 0), datetime(2026, 2, 12, 16, 0))
    create_booking(
        test_db,
        test_room,
        test_user,
        datetime(2026, 2, 12, 9, 0),
        datetime(2026, 2, 12, 9, 30),
        status=BookingStatus.PENDING,
    )
    create_booking(test_db, test_room, test_user, datetime(2026, 2, 13, 9, 0), datetime(2026, 2, 13, 10, 0))

    response = availability(test_room.id, datetime(2026, 2, 12, 15, 30), datetime(2026, 2, 12, 16, 30))
    data = response.json()
    assert data["available_for_interval"] is False
    assert [slot["start_time"] for slot in data["busy_slots"]] == ["09:00:00", "15:00:00"]
    assert data["busy_slots"][0]["status"] == "PENDING"
    assert data["busy_slots"][0]["status_description"] == "Pending"
    assert data["busy_slots"][1]["formatted_time"] == "15:00:00 - 16:00:00"
    assert data["busy_slots"][1]["status_description"] == "Confirmed"


def test_availability_room_not_found():
    response = availability(9999, datetime(2026, 2, 12, 12, 0), datetime(2026, 2, 12, 13, 0))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "ROOM_NOT_FOUND"


# pylint: disable-next=redefined-outer-name
def test_availability_inactive_room(inactive_room):
    response = availability(inactive_room.id, datetime(2026, 2, 12, 12, 0), datetime(2026, 2, 12, 13, 0))
    assert response.status_code == status.HTTP_404_NOT_FOUND
