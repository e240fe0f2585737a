from .booking import Booking
from .user import User

__all__ = ["Booking", "User"]
