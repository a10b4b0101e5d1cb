from fastapi import Request

from app.services.booking_ledger import BookingLedger
from app.services.room_registry import RoomRegistry

def get_registry(request: Request) -> RoomRegistry:
    return request.app.state.registry

def get_ledger(request: Request) -> BookingLedger:
    return request.app.state.ledger
