import pytest
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, time, timezone
from unittest.mock import MagicMock

from app.core.errors import (
    BookingConflictError,
    NoBookingsFoundError,
    RoomNotFoundError,
    ValidationError,
)
from app.services.booking_ledger import BookingLedger

DAY = date(2024, 1, 1)


def book(ledger, room_id, start, end, customer="Alice", day=DAY):
    return ledger.create_booking(customer, day, start, end, room_id)


def test_create_booking_is_confirmed_and_stamped(ledger, make_room):
    room = make_room()
    before = datetime.now()

    booking = book(ledger, room.id, time(9), time(10))

    assert booking.id == 1
    assert booking.room_id == room.id
    assert booking.status == "confirmed"
    assert booking.date == DAY
    assert booking.created_at >= before


def test_accepts_iso_strings(ledger, make_room):
    room = make_room()

    booking = ledger.create_booking("Alice", "2024-01-01", "09:00", "10:30", room.id)

    assert booking.date == DAY
    assert booking.start_time == time(9)
    assert booking.end_time == time(10, 30)


def test_adjacent_bookings_do_not_conflict(ledger, make_room):
    room = make_room()

    book(ledger, room.id, time(9), time(10))
    book(ledger, room.id, time(10), time(11))
    book(ledger, room.id, time(8), time(9))

    assert len(ledger.list_customer_bookings()) == 3


def test_overlapping_booking_conflicts(ledger, make_room):
    room = make_room()
    first = book(ledger, room.id, time(9), time(10))

    with pytest.raises(BookingConflictError) as exc_info:
        book(ledger, room.id, time(9, 30), time(10, 30), customer="Bob")

    assert exc_info.value.conflicting_booking_id == first.id
    assert len(ledger.list_customer_bookings()) == 1


@pytest.mark.parametrize("start,end,conflicts", [
    (time(8), time(9), False),
    (time(11), time(12), False),
    (time(8), time(9, 1), True),
    (time(10, 59), time(12), True),
    (time(9, 30), time(10, 30), True),  # inside
    (time(9), time(11), True),  # identical
    (time(8), time(12), True),  # enclosing
])
def test_conflict_iff_intervals_overlap(ledger, make_room, start, end, conflicts):
    room = make_room()
    book(ledger, room.id, time(9), time(11))

    if conflicts:
        with pytest.raises(BookingConflictError):
            book(ledger, room.id, start, end)
    else:
        book(ledger, room.id, start, end)


def test_same_slot_in_different_rooms_or_dates(ledger, make_room):
    room_a = make_room(name="A")
    room_b = make_room(name="B")

    book(ledger, room_a.id, time(9), time(10))
    book(ledger, room_b.id, time(9), time(10))
    book(ledger, room_a.id, time(9), time(10), day=date(2024, 1, 2))

    assert len(ledger.list_customer_bookings()) == 3


@pytest.mark.parametrize("missing", ["customer_name", "date", "start_time", "end_time", "room_id"])
def test_missing_field_fails_before_conflict_check(ledger, make_room, missing):
    room = make_room()
    book(ledger, room.id, time(9), time(10))
    values = {
        "customer_name": "Bob",
        "date": DAY,
        "start_time": time(9),
        "end_time": time(10),
        "room_id": room.id,
    }
    values[missing] = None

    # Would conflict if it got that far
    with pytest.raises(ValidationError):
        ledger.create_booking(**values)


@pytest.mark.parametrize("start,end", [(time(10), time(10)), (time(11), time(10))])
def test_start_must_precede_end(ledger, make_room, start, end):
    room = make_room()

    with pytest.raises(ValidationError, match="earlier"):
        book(ledger, room.id, start, end)


def test_malformed_time_is_a_validation_error(ledger, make_room):
    room = make_room()

    with pytest.raises(ValidationError):
        ledger.create_booking("Alice", "2024-01-01", "nine", "10:00", room.id)


@pytest.mark.parametrize("start,end", [
    (time(9, 30, tzinfo=timezone.utc), time(10, 30, tzinfo=timezone.utc)),
    (time(9, 30, tzinfo=timezone.utc), time(10, 30)),
    ("09:30Z", "10:30Z"),
])
def test_times_with_offset_are_rejected(ledger, make_room, start, end):
    room = make_room()
    book(ledger, room.id, time(9), time(10))

    with pytest.raises(ValidationError, match="timezone"):
        book(ledger, room.id, start, end)

    assert len(ledger.list_customer_bookings()) == 1


def test_unknown_room(ledger):
    with pytest.raises(RoomNotFoundError):
        book(ledger, 99, time(9), time(10))


def test_booking_ids_are_unique_across_rooms(ledger, make_room):
    rooms = [make_room(name=str(i)) for i in range(3)]

    ids = [book(ledger, room.id, time(h), time(h + 1)).id for room in rooms for h in range(9, 12)]

    assert len(set(ids)) == len(ids)


def test_concurrent_overlapping_requests_confirm_exactly_one(ledger, make_room):
    room = make_room()
    barrier = threading.Barrier(10)

    def attempt(i):
        barrier.wait()
        try:
            return book(ledger, room.id, time(9), time(10), customer=f"Customer {i}")
        except BookingConflictError:
            return None

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(attempt, range(10)))

    assert len([r for r in results if r is not None]) == 1
    assert len(ledger.list_customer_bookings()) == 1


# --- Queries ---

def test_rooms_with_bookings_reports_occupancy(ledger, make_room):
    busy = make_room(name="Busy")
    make_room(name="Idle")
    book(ledger, busy.id, time(9), time(10), customer="Alice")
    # A booking far in the past still makes the room "Booked"
    book(ledger, busy.id, time(9), time(10), customer="Bob", day=date(2000, 1, 1))

    summaries = ledger.list_rooms_with_bookings()

    assert [s.room_name for s in summaries] == ["Busy", "Idle"]
    assert summaries[0].occupancy_status == "Booked"
    assert [b.customer_name for b in summaries[0].bookings] == ["Alice", "Bob"]
    assert summaries[1].occupancy_status == "Available"
    assert summaries[1].bookings == []


def test_list_customer_bookings_joins_room_names(ledger, make_room):
    room = make_room(name="Studio")
    book(ledger, room.id, time(9), time(10), customer="Alice")

    records = ledger.list_customer_bookings()

    assert len(records) == 1
    assert records[0].customer_name == "Alice"
    assert records[0].room_name == "Studio"
    assert records[0].start_time == time(9)


def test_list_customer_bookings_skips_unresolvable_rooms(make_room):
    room = make_room()
    lookup = MagicMock()
    lookup.list_rooms.return_value = [room]
    lookup.find_room.side_effect = lambda room_id: room if room_id == room.id else None
    ledger = BookingLedger(lookup)
    book(ledger, room.id, time(9), time(10), customer="Alice")
    book(ledger, room.id, time(10), time(11), customer="Bob")

    # Room disappears from the registry's point of view
    lookup.find_room.side_effect = lambda room_id: None

    assert ledger.list_customer_bookings() == []


def test_customer_summary(ledger, make_room):
    room = make_room(name="Studio")
    first = book(ledger, room.id, time(9), time(10), customer="Alice")
    book(ledger, room.id, time(10), time(11), customer="Bob")
    second = book(ledger, room.id, time(11), time(12), customer="ALICE")

    summary = ledger.get_customer_booking_summary("Alice")

    assert summary.customer_name == "Alice"
    assert summary.total_bookings == 2
    assert [b.booking_id for b in summary.bookings] == [first.id, second.id]
    detail = summary.bookings[0]
    assert detail.room_name == "Studio"
    assert detail.status == "confirmed"
    assert detail.created_at == first.created_at


def test_customer_summary_is_case_insensitive(ledger, make_room):
    room = make_room()
    book(ledger, room.id, time(9), time(10), customer="Alice")

    assert ledger.get_customer_booking_summary("Alice") == ledger.get_customer_booking_summary("alice")


def test_customer_summary_without_bookings(ledger, make_room):
    room = make_room()
    book(ledger, room.id, time(9), time(10), customer="Alice")

    with pytest.raises(NoBookingsFoundError):
        ledger.get_customer_booking_summary("Carol")
    # Substrings are not matches
    with pytest.raises(NoBookingsFoundError):
        ledger.get_customer_booking_summary("Ali")
