from fastapi import APIRouter, Depends
from typing import List

from app.api.deps import get_ledger
from app.models.domain_models import CustomerBooking, CustomerBookingSummary
from app.services.booking_ledger import BookingLedger

router = APIRouter()

@router.get("/customers", response_model=List[CustomerBooking])
async def list_customers(ledger: BookingLedger = Depends(get_ledger)):
    return ledger.list_customer_bookings()

@router.get("/customers/{customer_name}/bookings", response_model=CustomerBookingSummary)
async def get_customer_bookings(customer_name: str, ledger: BookingLedger = Depends(get_ledger)):
    """How many times a customer has booked, with the details of each booking."""
    return ledger.get_customer_booking_summary(customer_name)
