from typing import List, Optional


class BookingServiceError(Exception):
    """Base class for every recoverable error raised by the booking core."""


class ValidationError(BookingServiceError):
    """Input is missing or malformed. The caller can resubmit corrected data."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class RoomNotFoundError(BookingServiceError):
    def __init__(self, room_id):
        super().__init__(f"Room {room_id} not found.")
        self.room_id = room_id


class BookingConflictError(BookingServiceError):
    def __init__(self, room_id, conflicting_booking_id: int):
        super().__init__("Room is already booked for the given time.")
        self.room_id = room_id
        self.conflicting_booking_id = conflicting_booking_id


class NoBookingsFoundError(BookingServiceError):
    def __init__(self, customer_name: str):
        super().__init__(f"No bookings found for customer '{customer_name}'.")
        self.customer_name = customer_name
