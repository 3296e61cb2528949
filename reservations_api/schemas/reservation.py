"""Reservation schemas"""

from datetime import date, datetime, time
from typing import List, Optional
from pydantic import BaseModel, field_serializer


class ReservationResponse(BaseModel):
    """Reservation record"""
    reservation_id: int
    first_name: str
    last_name: str
    mobile_number: str
    reservation_date: date
    reservation_time: time
    people: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_serializer("reservation_time")
    def serialize_reservation_time(self, value: time) -> str:
        return value.strftime("%H:%M")


class ReservationEnvelope(BaseModel):
    """Single reservation wrapped in a data member"""
    data: ReservationResponse


class ReservationListEnvelope(BaseModel):
    """Reservation list wrapped in a data member"""
    data: List[ReservationResponse]


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests"""
    error: str
