"""Reservation use cases: listing, reads, creation, updates and status changes"""

from datetime import date
from typing import Any, List, Optional

import structlog

from reservations_api.clock import Clock
from reservations_api.errors import (
    MalformedRequestError,
    MissingFieldError,
    NotFoundError,
    ReservationFinishedError,
)
from reservations_api.models.reservation import Reservation, ReservationStatus
from reservations_api.repositories.reservation import ReservationStore
from reservations_api.services import lifecycle
from reservations_api.services.validation import (
    DEFAULT_POLICY,
    ReservationPolicy,
    validate_reservation,
)

logger = structlog.get_logger()


async def resolve_reservation(store: ReservationStore, reservation_id: Any) -> Reservation:
    """Look a reservation up by id or raise NotFoundError"""
    try:
        key = int(reservation_id)
    except (TypeError, ValueError):
        raise NotFoundError(reservation_id)

    reservation = await store.find_by_id(key)
    if not reservation:
        raise NotFoundError(reservation_id)
    return reservation


class ReservationService:
    """Runs the validation pipeline and status lifecycle in front of a store"""

    def __init__(
        self,
        store: ReservationStore,
        clock: Clock,
        policy: ReservationPolicy = DEFAULT_POLICY,
    ):
        self.store = store
        self.clock = clock
        self.policy = policy

    async def list(
        self,
        reservation_date: Optional[date] = None,
        mobile_number: Optional[str] = None,
    ) -> List[Reservation]:
        if reservation_date:
            return await self.store.list_open_by_date(reservation_date)
        if mobile_number:
            return await self.store.search_by_phone_fragment(mobile_number)
        return await self.store.list_open_by_date(self.clock.today())

    async def read(self, reservation_id: Any) -> Reservation:
        return await resolve_reservation(self.store, reservation_id)

    async def create(self, payload: Any) -> Reservation:
        record = validate_reservation(payload, self.clock.now(), self.policy, creating=True)
        record["status"] = ReservationStatus.BOOKED.value

        reservation = await self.store.insert(record)
        logger.info("Reservation created", reservation_id=reservation.reservation_id)
        return reservation

    async def update(self, reservation_id: Any, payload: Any) -> Reservation:
        current = await resolve_reservation(self.store, reservation_id)
        if current.status == lifecycle.FINISHED:
            raise ReservationFinishedError()

        record = validate_reservation(payload, self.clock.now(), self.policy, creating=False)
        target = record.get("status")
        if target is not None and target != current.status:
            lifecycle.check_transition(current.status, target)

        return await self._write(current.reservation_id, record)

    async def update_status(self, reservation_id: Any, payload: Any) -> Reservation:
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
            raise MalformedRequestError()

        current = await resolve_reservation(self.store, reservation_id)
        target = payload["data"].get("status")
        if target is None or target == "":
            raise MissingFieldError("status")

        previous = current.status
        lifecycle.check_transition(previous, target)
        reservation = await self._write(current.reservation_id, {"status": target})
        logger.info(
            "Reservation status changed",
            reservation_id=reservation.reservation_id,
            previous=previous,
            status=reservation.status,
        )
        return reservation

    async def _write(self, reservation_id: int, patch: dict) -> Reservation:
        reservation = await self.store.update(reservation_id, patch)
        if not reservation:
            raise NotFoundError(reservation_id)
        logger.info("Reservation updated", reservation_id=reservation_id, fields=sorted(patch))
        return reservation
