import datetime as dt
from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

BOOKED = "Booked"
AVAILABLE = "Available"
CONFIRMED = "confirmed"

class CamelModel(BaseModel):
    # Snake case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

# --- Rooms ---

class RoomDraft(CamelModel):
    name: str = Field(min_length=1)
    seat_capacity: int = Field(gt=0)
    amenities: Tuple[str, ...]
    price_per_hour: float = Field(ge=0)

class Room(RoomDraft):
    id: int

# --- Bookings ---

class TimeSlot(CamelModel):
    """A reserved interval [start_time, end_time) on a single date."""
    date: dt.date
    start_time: dt.time
    end_time: dt.time

    @model_validator(mode="after")
    def check_order(self):
        # Offset-aware times cannot be compared with stored naive ones
        if self.start_time.tzinfo is not None or self.end_time.tzinfo is not None:
            raise ValueError("startTime and endTime must not carry a timezone offset")
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be earlier than endTime")
        return self

    def overlaps(self, other: "TimeSlot") -> bool:
        """Half-open overlap: a slot ending at 10:00 does not touch one starting at 10:00."""
        return (
            self.date == other.date
            and self.start_time < other.end_time
            and other.start_time < self.end_time
        )

class BookingDraft(TimeSlot):
    customer_name: str = Field(min_length=1)
    room_id: int

class Booking(BookingDraft):
    id: int
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    status: Literal["confirmed"] = CONFIRMED

# --- Read models ---

class BookedSlot(CamelModel):
    customer_name: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time

class RoomOccupancy(CamelModel):
    room_id: int
    room_name: str
    occupancy_status: Literal["Booked", "Available"]
    bookings: List[BookedSlot]

class CustomerBooking(CamelModel):
    customer_name: str
    room_name: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time

class CustomerBookingDetail(CamelModel):
    booking_id: int
    room_name: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    created_at: dt.datetime
    status: str

class CustomerBookingSummary(CamelModel):
    customer_name: str
    total_bookings: int
    bookings: List[CustomerBookingDetail]
