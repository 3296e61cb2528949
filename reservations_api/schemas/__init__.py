"""Pydantic schemas for request/response validation"""

from reservations_api.schemas.reservation import (
    ReservationResponse,
    ReservationEnvelope,
    ReservationListEnvelope,
    ErrorResponse,
)

__all__ = [
    "ReservationResponse",
    "ReservationEnvelope",
    "ReservationListEnvelope",
    "ErrorResponse",
]
