from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Identity
from ...schemas.booking import BookingCreate, BookingCreatedResponse, BookingResponse
from ...services.booking_store import BookingStore
from ..deps import get_current_identity

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("", response_model=BookingCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_data: BookingCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Book an appointment for the caller."""
    booking = BookingStore(db).create(
        date=booking_data.date,
        time=booking_data.time,
        service=booking_data.service,
        owner_id=identity.user_id,
    )

    return BookingCreatedResponse(
        message="Booking created successfully!",
        booking=BookingResponse.model_validate(booking),
    )


@router.get("", response_model=List[BookingResponse])
def list_bookings(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """List the caller's bookings, earliest first."""
    bookings = BookingStore(db).list_by_owner(identity.user_id)
    return [BookingResponse.model_validate(booking) for booking in bookings]
