"""Reservation status lifecycle"""

from typing import Dict, FrozenSet

from reservations_api.errors import (
    InvalidStatusError,
    InvalidTransitionError,
    ReservationFinishedError,
)
from reservations_api.models.reservation import ReservationStatus

BOOKED = ReservationStatus.BOOKED.value
SEATED = ReservationStatus.SEATED.value
FINISHED = ReservationStatus.FINISHED.value
CANCELLED = ReservationStatus.CANCELLED.value

STATUSES = frozenset(status.value for status in ReservationStatus)

ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    BOOKED: frozenset({SEATED, CANCELLED}),
    SEATED: frozenset({FINISHED, CANCELLED}),
    FINISHED: frozenset(),
    CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def is_valid_status(value: object) -> bool:
    return isinstance(value, str) and value in STATUSES


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def check_transition(current: str, target: object) -> None:
    """
    Raise unless ``current -> target`` is a legal edge.

    Unknown targets fail with InvalidStatus, anything leaving ``finished``
    with ReservationFinished, other illegal edges with InvalidTransition.
    """
    if not is_valid_status(target):
        raise InvalidStatusError(target)
    if current == FINISHED:
        raise ReservationFinishedError()
    if not can_transition(current, target):
        raise InvalidTransitionError(current, target)
