from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)

    # Booking details, stored as given (ISO 8601 strings sort correctly)
    date = Column(String(32), nullable=False)
    time = Column(String(32), nullable=False)
    service = Column(String(255), nullable=False)

    # Owner
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    user = relationship("User", back_populates="bookings")

    def __repr__(self):
        return f"<Booking(id={self.id}, user_id={self.user_id}, date='{self.date}', time='{self.time}')>"
