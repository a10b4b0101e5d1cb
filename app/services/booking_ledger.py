import itertools
import threading
from typing import List

from app.core.errors import BookingConflictError, NoBookingsFoundError, RoomNotFoundError
from app.models.domain_models import (
    AVAILABLE,
    BOOKED,
    BookedSlot,
    Booking,
    BookingDraft,
    CustomerBooking,
    CustomerBookingDetail,
    CustomerBookingSummary,
    RoomOccupancy,
)
from app.services.room_registry import RoomRegistry
from app.services.validation import build_model, require_fields

class BookingLedger:
    """
    Owns the reservations made against the rooms of a RoomRegistry.

    No two bookings for the same room and date ever overlap. The conflict
    check and the insert run under one lock, so concurrent requests for the
    same slot cannot both be confirmed.
    """

    def __init__(self, registry: RoomRegistry):
        self._registry = registry
        self._bookings: List[Booking] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _snapshot(self) -> List[Booking]:
        with self._lock:
            return list(self._bookings)

    def create_booking(self, customer_name=None, date=None, start_time=None, end_time=None, room_id=None) -> Booking:
        """
        Confirms a booking of room_id for [start_time, end_time) on date.

        Raises ValidationError for missing or malformed input (including
        start_time not before end_time), RoomNotFoundError for an unknown
        room and BookingConflictError when the slot overlaps an existing
        booking of the same room.
        """
        require_fields(
            customer_name=customer_name,
            date=date,
            start_time=start_time,
            end_time=end_time,
            room_id=room_id,
        )
        draft = build_model(
            BookingDraft,
            customer_name=customer_name,
            date=date,
            start_time=start_time,
            end_time=end_time,
            room_id=room_id,
        )

        if self._registry.find_room(draft.room_id) is None:
            raise RoomNotFoundError(draft.room_id)

        with self._lock:
            for existing in self._bookings:
                if existing.room_id == draft.room_id and existing.overlaps(draft):
                    raise BookingConflictError(draft.room_id, existing.id)

            booking = Booking(id=next(self._ids), **draft.model_dump())
            self._bookings.append(booking)
        return booking

    def list_rooms_with_bookings(self) -> List[RoomOccupancy]:
        """
        One entry per room in registration order. A room is "Booked" as soon
        as it has any booking at all, regardless of when that booking is.
        """
        bookings = self._snapshot()
        summaries = []
        for room in self._registry.list_rooms():
            room_bookings = [b for b in bookings if b.room_id == room.id]
            summaries.append(RoomOccupancy(
                room_id=room.id,
                room_name=room.name,
                occupancy_status=BOOKED if room_bookings else AVAILABLE,
                bookings=[
                    BookedSlot(
                        customer_name=b.customer_name,
                        date=b.date,
                        start_time=b.start_time,
                        end_time=b.end_time,
                    )
                    for b in room_bookings
                ],
            ))
        return summaries

    def list_customer_bookings(self) -> List[CustomerBooking]:
        """Every booking joined with its room name. Bookings whose room does not resolve are skipped."""
        records = []
        for booking in self._snapshot():
            room = self._registry.find_room(booking.room_id)
            if room is None:
                continue
            records.append(CustomerBooking(
                customer_name=booking.customer_name,
                room_name=room.name,
                date=booking.date,
                start_time=booking.start_time,
                end_time=booking.end_time,
            ))
        return records

    def get_customer_booking_summary(self, customer_name) -> CustomerBookingSummary:
        """
        All bookings of one customer, matched case-insensitively.
        The summary carries the name as recorded on the customer's first booking,
        so "Alice" and "alice" yield the same result.
        Raises NoBookingsFoundError if the customer has none.
        """
        require_fields(customer_name=customer_name)
        wanted = str(customer_name).casefold()

        matches = [b for b in self._snapshot() if b.customer_name.casefold() == wanted]
        details = []
        for booking in matches:
            room = self._registry.find_room(booking.room_id)
            if room is None:
                continue
            details.append(CustomerBookingDetail(
                booking_id=booking.id,
                room_name=room.name,
                date=booking.date,
                start_time=booking.start_time,
                end_time=booking.end_time,
                created_at=booking.created_at,
                status=booking.status,
            ))

        if not details:
            raise NoBookingsFoundError(customer_name)

        return CustomerBookingSummary(
            customer_name=matches[0].customer_name,
            total_bookings=len(details),
            bookings=details,
        )
