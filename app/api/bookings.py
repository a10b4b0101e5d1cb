from fastapi import APIRouter, Depends, status

from app.api.deps import get_ledger
from app.core.logger import logger
from app.models.api_models import BookingCreateRequest
from app.models.domain_models import Booking
from app.services.booking_ledger import BookingLedger

router = APIRouter()

@router.post("/bookings", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(req: BookingCreateRequest, ledger: BookingLedger = Depends(get_ledger)):
    logger.info(f"📥 Booking Request - Room: {req.room_id}, Day: {req.date}, {req.start_time}-{req.end_time}")

    booking = ledger.create_booking(
        customer_name=req.customer_name,
        date=req.date,
        start_time=req.start_time,
        end_time=req.end_time,
        room_id=req.room_id,
    )

    logger.info(f"✅ Booking {booking.id} confirmed for {booking.customer_name} in room {booking.room_id}")
    return booking
