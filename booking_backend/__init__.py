"""
Booking Backend

A small FastAPI service for account signup, token-based sign-in and
per-account appointment bookings, with a static single-page client.
"""

__version__ = "1.0.0"
