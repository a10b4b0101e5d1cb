import datetime as dt
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List

# --- Incoming Request Models ---
# Every field is optional: absence is reported by the booking core as a
# ValidationError rather than by FastAPI as a schema error.

class RoomCreateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # "roomName" and "seats" are accepted for older clients
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "roomName"))
    seat_capacity: Optional[int] = Field(default=None, validation_alias=AliasChoices("seatCapacity", "seats"))
    amenities: Optional[List[str]] = None
    price_per_hour: Optional[float] = None

class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_name: Optional[str] = None
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    room_id: Optional[int] = None

# --- Outgoing Response Models ---

class ErrorResponse(BaseModel):
    error: str
    message: str
