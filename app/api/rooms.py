from fastapi import APIRouter, Depends, status
from typing import List

from app.api.deps import get_ledger, get_registry
from app.core.errors import RoomNotFoundError
from app.core.logger import logger
from app.models.api_models import RoomCreateRequest
from app.models.domain_models import Room, RoomOccupancy
from app.services.booking_ledger import BookingLedger
from app.services.room_registry import RoomRegistry

router = APIRouter()

@router.post("/rooms", response_model=Room, status_code=status.HTTP_201_CREATED)
async def create_room(req: RoomCreateRequest, registry: RoomRegistry = Depends(get_registry)):
    room = registry.create_room(**req.model_dump())
    logger.info(f"🏢 Room created: {room.name} (ID {room.id}, {room.seat_capacity} seats)")
    return room

@router.get("/rooms", response_model=List[RoomOccupancy])
async def list_rooms(ledger: BookingLedger = Depends(get_ledger)):
    """All rooms with their bookings and a Booked/Available flag."""
    return ledger.list_rooms_with_bookings()

@router.get("/rooms/{room_id}", response_model=Room)
async def get_room(room_id: int, registry: RoomRegistry = Depends(get_registry)):
    room = registry.find_room(room_id)
    if room is None:
        raise RoomNotFoundError(room_id)
    return room
