"""
Test suite for the Booking Backend.

Contains unit and integration tests for the application's functionality.
"""
