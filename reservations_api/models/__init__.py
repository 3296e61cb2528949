"""Database models"""

from reservations_api.models.reservation import Reservation, ReservationStatus

__all__ = [
    "Reservation",
    "ReservationStatus",
]
