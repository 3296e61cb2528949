"""Tests for the reservation status lifecycle"""

from itertools import product

import pytest

from reservations_api.errors import (
    InvalidStatusError,
    InvalidTransitionError,
    ReservationFinishedError,
)
from reservations_api.services.lifecycle import (
    STATUSES,
    TERMINAL_STATUSES,
    can_transition,
    check_transition,
)

LEGAL_EDGES = {
    ("booked", "seated"),
    ("seated", "finished"),
    ("booked", "cancelled"),
    ("seated", "cancelled"),
}


@pytest.mark.parametrize("current, target", sorted(LEGAL_EDGES))
def test_legal_transitions(current, target):
    check_transition(current, target)


@pytest.mark.parametrize("current, target", sorted(product(STATUSES, STATUSES)))
def test_transition_table_is_exactly_the_legal_edges(current, target):
    assert can_transition(current, target) == ((current, target) in LEGAL_EDGES)


@pytest.mark.parametrize("target", sorted(STATUSES))
def test_finished_reservations_cannot_move(target):
    with pytest.raises(ReservationFinishedError):
        check_transition("finished", target)


@pytest.mark.parametrize("current", sorted(STATUSES))
@pytest.mark.parametrize("target", ["bogus", "BOOKED", "", None, 3])
def test_unknown_target_status(current, target):
    with pytest.raises(InvalidStatusError) as exc_info:
        check_transition(current, target)

    assert exc_info.value.status == target


def test_invalid_status_message_names_value():
    with pytest.raises(InvalidStatusError, match="^bogus is not a valid status"):
        check_transition("booked", "bogus")


@pytest.mark.parametrize(
    "current, target",
    [
        ("booked", "booked"),
        ("booked", "finished"),
        ("seated", "booked"),
        ("seated", "seated"),
        ("cancelled", "booked"),
        ("cancelled", "seated"),
        ("cancelled", "cancelled"),
    ],
)
def test_illegal_edges(current, target):
    with pytest.raises(InvalidTransitionError):
        check_transition(current, target)


def test_terminal_statuses():
    assert TERMINAL_STATUSES == {"finished", "cancelled"}
    assert STATUSES == {"booked", "seated", "finished", "cancelled"}
