"""Reservation management API endpoints"""

from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from reservations_api.clock import Clock, get_clock
from reservations_api.config import settings
from reservations_api.database import get_db
from reservations_api.repositories.reservation import SQLAlchemyReservationStore
from reservations_api.schemas.reservation import (
    ErrorResponse,
    ReservationEnvelope,
    ReservationListEnvelope,
    ReservationResponse,
)
from reservations_api.services.reservations import ReservationService
from reservations_api.services.validation import ReservationPolicy

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def get_reservation_service(
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> ReservationService:
    """Build a request-scoped reservation service"""
    return ReservationService(
        SQLAlchemyReservationStore(db),
        clock,
        ReservationPolicy.from_settings(settings),
    )


def _envelope(reservation) -> ReservationEnvelope:
    return ReservationEnvelope(data=ReservationResponse.model_validate(reservation))


@router.get("", response_model=ReservationListEnvelope)
async def list_reservations(
    reservation_date: Optional[date] = Query(None, alias="date"),
    mobile_number: Optional[str] = None,
    service: ReservationService = Depends(get_reservation_service),
):
    """List open reservations for a date (default today) or search by phone"""
    reservations = await service.list(reservation_date, mobile_number)
    return ReservationListEnvelope(
        data=[ReservationResponse.model_validate(r) for r in reservations]
    )


@router.post("", response_model=ReservationEnvelope, status_code=201, responses=ERROR_RESPONSES)
async def create_reservation(
    payload: Any = Body(None),
    service: ReservationService = Depends(get_reservation_service),
):
    """Create a new reservation"""
    reservation = await service.create(payload)
    return _envelope(reservation)


@router.get("/{reservation_id}", response_model=ReservationEnvelope, responses=ERROR_RESPONSES)
async def get_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Get reservation details"""
    reservation = await service.read(reservation_id)
    return _envelope(reservation)


@router.put("/{reservation_id}", response_model=ReservationEnvelope, responses=ERROR_RESPONSES)
async def update_reservation(
    reservation_id: str,
    payload: Any = Body(None),
    service: ReservationService = Depends(get_reservation_service),
):
    """Update every field of a reservation"""
    reservation = await service.update(reservation_id, payload)
    return _envelope(reservation)


@router.put("/{reservation_id}/status", response_model=ReservationEnvelope, responses=ERROR_RESPONSES)
async def update_reservation_status(
    reservation_id: str,
    payload: Any = Body(None),
    service: ReservationService = Depends(get_reservation_service),
):
    """Move a reservation along its status lifecycle"""
    reservation = await service.update_status(reservation_id, payload)
    return _envelope(reservation)
