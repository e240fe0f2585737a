from typing import List

from sqlalchemy.orm import Session

from ..models.booking import Booking


class BookingStore:
    """Bookings, always read back scoped to their owning account."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, date: str, time: str, service: str, owner_id: int) -> Booking:
        """Insert a booking; no overlap checks are made."""
        booking = Booking(date=date, time=time, service=service, user_id=owner_id)

        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        return booking

    def list_by_owner(self, owner_id: int) -> List[Booking]:
        """Return the owner's bookings ordered by date, then time (plain string order)."""
        return (
            self.db.query(Booking)
            .filter(Booking.user_id == owner_id)
            .order_by(Booking.date.asc(), Booking.time.asc(), Booking.id.asc())
            .all()
        )
