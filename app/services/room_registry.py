import itertools
import threading
from typing import Dict, List, Optional

from app.models.domain_models import Room, RoomDraft
from app.services.validation import build_model, require_fields

class RoomRegistry:
    """Owns the bookable rooms. Rooms are only ever added, never changed or removed."""

    def __init__(self):
        self._rooms: Dict[int, Room] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create_room(self, name=None, seat_capacity=None, amenities=None, price_per_hour=None) -> Room:
        """
        Registers a new room and returns it.
        Raises ValidationError when a field is absent or malformed.
        """
        require_fields(
            name=name,
            seat_capacity=seat_capacity,
            amenities=amenities,
            price_per_hour=price_per_hour,
        )
        draft = build_model(
            RoomDraft,
            name=name,
            seat_capacity=seat_capacity,
            amenities=amenities,
            price_per_hour=price_per_hour,
        )

        with self._lock:
            room = Room(id=next(self._ids), **draft.model_dump())
            self._rooms[room.id] = room
        return room

    def find_room(self, room_id) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(room_id)

    def list_rooms(self) -> List[Room]:
        """Snapshot of all rooms in registration order."""
        with self._lock:
            return list(self._rooms.values())
