"""Reservation storage"""

import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from reservations_api.models.reservation import Reservation, ReservationStatus


class ReservationStore(ABC):
    """Persistence operations the reservation service relies on"""

    @abstractmethod
    async def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def list_open_by_date(self, reservation_date: date) -> List[Reservation]:
        """Reservations on a date that are neither finished nor cancelled, by time"""
        pass

    @abstractmethod
    async def search_by_phone_fragment(self, digits: str) -> List[Reservation]:
        """All reservations whose phone digits contain ``digits``, by date"""
        pass

    @abstractmethod
    async def insert(self, record: Dict[str, Any]) -> Reservation:
        pass

    @abstractmethod
    async def update(self, reservation_id: int, patch: Dict[str, Any]) -> Optional[Reservation]:
        pass


def _digits_only(column):
    """Strip the punctuation phone numbers are usually written with"""
    for char in ("(", ")", " ", "-", "+", "."):
        column = func.replace(column, char, "")
    return column


class SQLAlchemyReservationStore(ReservationStore):
    """Store backed by an async SQLAlchemy session; one commit per write"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        result = await self.db.execute(
            select(Reservation)
            .where(Reservation.reservation_id == reservation_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_open_by_date(self, reservation_date: date) -> List[Reservation]:
        result = await self.db.execute(
            select(Reservation)
            .where(
                Reservation.reservation_date == reservation_date,
                Reservation.status.not_in([
                    ReservationStatus.FINISHED.value,
                    ReservationStatus.CANCELLED.value,
                ]),
            )
            .order_by(Reservation.reservation_time)
        )
        return list(result.scalars().all())

    async def search_by_phone_fragment(self, digits: str) -> List[Reservation]:
        fragment = re.sub(r"\D", "", digits)
        result = await self.db.execute(
            select(Reservation)
            .where(_digits_only(Reservation.mobile_number).like(f"%{fragment}%"))
            .order_by(Reservation.reservation_date)
        )
        return list(result.scalars().all())

    async def insert(self, record: Dict[str, Any]) -> Reservation:
        reservation = Reservation(**record)
        self.db.add(reservation)
        await self.db.commit()
        await self.db.refresh(reservation)
        return reservation

    async def update(self, reservation_id: int, patch: Dict[str, Any]) -> Optional[Reservation]:
        reservation = await self.find_by_id(reservation_id)
        if not reservation:
            return None

        for field, value in patch.items():
            setattr(reservation, field, value)

        await self.db.commit()
        await self.db.refresh(reservation)
        return reservation
